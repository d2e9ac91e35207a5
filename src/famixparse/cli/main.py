#!/usr/bin/env python3
"""
FAMIXPARSE CLI - Interactive Reader
-----------------------------------
Two ways in:
1. `famixparse` / `famixparse repl`: type FAMIX text line by line. The
   buffer is re-parsed after every line and the entities are printed once
   a complete top-level list has been read.
2. `famixparse parse PATH`: parse a whole file at once, optionally
   exporting the entities to YAML.

Author: FamixParse Team
Date: 2026-10-19
"""

import sys
import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from famixparse.cli.formatter import FamixFormatter
from famixparse.core.engine import Command, FamixEngine, parse_file
from famixparse.core.session import ReadSession
from famixparse.export.exporter import FamixExporter

VERSION = "0.1.0"

# Global console for consistent styling across the application
console = Console()
logger = logging.getLogger("famixparse.cli")

class FamixCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self, out: Console = None):
        """Initializes the CLI and sets up the argument parser."""
        self.console = out or console
        self.formatter = FamixFormatter(self.console)
        self.parser = argparse.ArgumentParser(
            prog="famixparse",
            description="FamixParse - Incremental FAMIX model reader",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("--version", action="version", version=f"famixparse v{VERSION}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'repl' subcommand - the interactive read loop (also the default)
        repl_parser = subparsers.add_parser("repl", help="Read FAMIX text line by line")
        repl_parser.add_argument("--no-chart", action="store_true", help="Never offer the kind chart")
        repl_parser.add_argument("-y", "--yes", action="store_true", help="Show the kind chart without asking")

        # 'parse' subcommand - one-shot file mode
        parse_parser = subparsers.add_parser("parse", help="Parse a FAMIX file")
        parse_parser.add_argument("path", help="Path to a FAMIX text file")
        parse_parser.add_argument("--export", metavar="OUT", help="Write the entities to a YAML file")
        parse_parser.add_argument("--chart", action="store_true", help="Render the kind frequency chart")
        parse_parser.add_argument("--strict", action="store_true", help="Fail if any input is left unparsed")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    def _wants_chart(self, args: argparse.Namespace) -> bool:
        """Asks whether to draw the chart, unless a flag already decided."""
        if getattr(args, "no_chart", False):
            return False
        if getattr(args, "yes", False):
            return True
        self.console.print("Would you like to see a graph of the result?")
        choice = self.console.input("[bold yellow](y/n): [/bold yellow]").strip().lower()
        return choice == 'y'

    def run_repl(self, args: argparse.Namespace) -> int:
        """The read loop: one feed() per line until :q or end of input."""
        engine = FamixEngine()
        session = ReadSession()
        self.formatter.show_welcome()

        while True:
            try:
                line = self.console.input("")
            except EOFError:
                return 0

            outcome = engine.feed(session, line)

            if outcome.command is Command.QUIT:
                return 0
            if outcome.command is Command.HELP:
                self.formatter.show_help()
                continue
            if outcome.command is Command.RESET:
                self.console.print("[bold cyan]---Reset---[/bold cyan]")
                continue
            if outcome.command is Command.EXAMPLE:
                self.formatter.show_example(engine.example)

            if not outcome.round_complete:
                continue

            self.formatter.show_result(outcome.result)
            if self._wants_chart(args):
                self.formatter.render_chart(session.entities)
            self.formatter.show_welcome()

    def run_parse(self, args: argparse.Namespace) -> int:
        """Parses one file and reports what was read."""
        try:
            result = parse_file(args.path)
        except (OSError, UnicodeDecodeError) as e:
            self.console.print(f"[bold red]Error:[/bold red] Cannot read '{args.path}': {e}")
            return 1

        if not result.matched:
            self.console.print(Panel(
                f"[bold red]No FAMIX list found in {args.path}[/bold red]\n"
                f"The input may be incomplete or malformed.",
                expand=False, border_style="red"
            ))
            return 1

        self.formatter.print_kind_table(result.entities)
        if result.remainder.strip():
            self.formatter.show_rest(result)
        if args.chart:
            self.formatter.render_chart(result.entities)

        if args.export:
            try:
                written = FamixExporter().write(result.entities, args.export)
            except IOError as e:
                self.console.print(f"[bold red]Error:[/bold red] {e}")
                return 1
            self.console.print(f"[bold green]Exported {len(result.entities)} entities to {written}[/bold green]")

        if args.strict and not result.complete:
            self.console.print("[bold red]Strict mode:[/bold red] input left unparsed.")
            return 1
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)
        logger.debug(f"Command: {args.command or 'repl'}")

        if args.command == "parse":
            return self.run_parse(args)
        return self.run_repl(args)

def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(FamixCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)

if __name__ == "__main__":
    main()
