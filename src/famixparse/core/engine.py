#!/usr/bin/env python3
"""
FAMIXPARSE ENGINE - The Orchestrator
------------------------------------
Public entry point of the parser plus the line-by-line read loop that
drives it.

parse() is stateless: it takes the whole accumulated text and returns the
entities and the unconsumed remainder. FamixEngine.feed() handles one input
line against a ReadSession: it interprets commands, appends ordinary lines
to the buffer and re-parses the whole buffer each time. A round completes
as soon as the buffer yields at least one entity.

Author: FamixParse Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from famixparse.core.models import Entity
from famixparse.core.session import ReadSession
from famixparse.parsing.combinators import Parser
from famixparse.parsing.grammar import FAMIX_EXAMPLE, famix_parser

logger = logging.getLogger("famixparse.engine")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse over a complete buffer."""
    entities: Tuple[Entity, ...] = ()   # In source order, empty on failure
    matched: bool = False               # True iff the top-level list matched
    remainder: str = ""                 # Unconsumed suffix (the whole text on failure)

    @property
    def complete(self) -> bool:
        """True when the matched input leaves nothing but whitespace behind."""
        return self.matched and not self.remainder.strip()


def parse(text: str, parser: Parser = famix_parser) -> ParseResult:
    """
    Parses `text` with the top-level FAMIX grammar.
    Calling it twice on the same text gives the same result.
    """
    outcome = parser.parse(text)
    if not outcome.matched:
        logger.debug(f"No match over {len(text)} chars; buffer kept for more input")
        return ParseResult(entities=(), matched=False, remainder=outcome.rest)

    entities = tuple(outcome.match)
    logger.debug(f"Matched {len(entities)} entities, {len(outcome.rest)} chars left")
    return ParseResult(entities=entities, matched=True, remainder=outcome.rest)


def parse_file(path: Union[str, Path]) -> ParseResult:
    """Reads a FAMIX file (BOM-aware) and parses it."""
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse(text)


class Command(str, Enum):
    QUIT = ":q"
    EXAMPLE = "example"
    RESET = "reset"
    HELP = "help"

    @classmethod
    def match(cls, line: str) -> Optional["Command"]:
        """Recognizes a whole-line command, case-insensitively."""
        wanted = line.strip().lower()
        for command in cls:
            if command.value == wanted:
                return command
        return None


@dataclass
class FeedResult:
    """What happened when one line was fed to the engine."""
    command: Optional[Command] = None
    result: ParseResult = field(default_factory=ParseResult)
    round_complete: bool = False


class FamixEngine:
    """
    Drives the read loop: one call to feed() per input line.
    """

    def __init__(self, parser: Parser = famix_parser, example: str = FAMIX_EXAMPLE):
        self.parser = parser
        self.example = example

    def feed(self, session: ReadSession, line: str) -> FeedResult:
        session.lines_read += 1
        command = Command.match(line)

        if command is Command.QUIT or command is Command.HELP:
            return FeedResult(command=command)

        if command is Command.RESET:
            session.clear()
            logger.info("Session reset")
            return FeedResult(command=command)

        if command is Command.EXAMPLE:
            session.buffer = self.example
        else:
            session.append_line(line)

        result = parse(session.buffer, self.parser)
        if not result.entities:
            return FeedResult(command=command, result=result)

        # Round complete: hand the entities over and start a fresh buffer
        session.entities = list(result.entities)
        session.buffer = ""
        session.rounds += 1
        logger.info(f"Round {session.rounds} complete: {len(result.entities)} entities")
        return FeedResult(command=command, result=result, round_complete=True)
