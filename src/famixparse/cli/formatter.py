# src/famixparse/cli/formatter.py
from typing import Dict, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from famixparse.core.engine import ParseResult
from famixparse.core.models import Entity, chart_labels, count_occurrences

# Initialize the Rich console for high-quality terminal output
console = Console()

BAR_WIDTH = 40

class FamixFormatter:
    """
    FamixFormatter: The visual side of the CLI.
    Renders welcome/help text, parsed entities, the leftover input and the
    kind-frequency chart.
    """

    def __init__(self, out: Console = None):
        self.console = out or console

    def show_welcome(self):
        self.console.print(Panel.fit(
            "[bold cyan]Please input a FAMIX string[/bold cyan]\n"
            "Note: Spaces are important!\n"
            "Type [bold]help[/bold] for more information.",
            title="[bold white]Welcome[/bold white]",
            border_style="cyan"
        ))

    def show_help(self):
        self.console.print(Panel.fit(
            "Type [bold]reset[/bold] to reset the input, [bold]:q[/bold] to quit.\n"
            "Type [bold]example[/bold] to load an example.",
            title="[bold white]Help[/bold white]",
            border_style="dim"
        ))

    def show_example(self, example: str):
        self.console.print(Panel(Text(example), title="Example", border_style="green"))

    def show_entities(self, entities: Sequence[Entity]):
        """One line per entity using its debug rendering."""
        self.console.print("[bold green]Parsed:[/bold green]")
        for entity in entities:
            self.console.print(Text(f" {entity.describe()}"))

    def show_rest(self, result: ParseResult):
        # Text() keeps brackets in the leftover input from being read as markup
        self.console.print("[bold yellow]Rest:[/bold yellow]")
        self.console.print(Text(repr(result.remainder)))

    def show_result(self, result: ParseResult):
        self.show_entities(result.entities)
        self.show_rest(result)

    def print_kind_table(self, entities: Sequence[Entity]):
        """Builds the summary table shown after a one-shot parse."""
        table = Table(title="FAMIX Entities", show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind", style="cyan")
        table.add_column("Details")

        for i, entity in enumerate(entities, 1):
            table.add_row(str(i), entity.kind, Text(entity.describe()))

        self.console.print(table)

    def render_chart(self, entities: Sequence[Entity]) -> Dict[str, int]:
        """
        Draws a horizontal bar chart of entity counts per kind.
        Returns the counts that were drawn.
        """
        counts = count_occurrences(entities)
        if not counts:
            self.console.print("[dim]Nothing to chart.[/dim]")
            return counts

        peak = max(counts.values())
        table = Table(title="Famix Chart", show_header=False, box=None, padding=(0, 1))
        table.add_column("Kind", style="bold white", justify="right")
        table.add_column("Bar", style="blue")

        for label, count in zip(chart_labels(counts), counts.values()):
            length = max(1, round(BAR_WIDTH * count / peak))
            table.add_row(label, "█" * length)

        self.console.print(Panel.fit(table, border_style="blue"))
        return counts
