#!/usr/bin/env python3
"""
FAMIXPARSE COMBINATORS - The Toolkit
------------------------------------
A minimal backtracking parser-combinator engine. A Parser wraps a function
that takes a Cursor and either returns a value (advancing the cursor past
the matched text) or returns NO_MATCH (leaving the cursor untouched).

Rollback is structural: sequence, optional, one_of and zero_or_more
snapshot the cursor offset and restore it on failure, so any parser built
from them is invisible to its caller when it fails.

Author: FamixParse Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Tuple, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class _NoMatch:
    """Failure sentinel. Distinct from None so None stays a legal result."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = _NoMatch()


class Cursor:
    """
    A view over the unconsumed part of the input.
    The source text never changes; only the offset moves.
    """

    __slots__ = ("source", "offset")

    def __init__(self, source: str, offset: int = 0):
        self.source = source
        self.offset = offset

    @property
    def rest(self) -> str:
        return self.source[self.offset:]

    def startswith(self, literal: str) -> bool:
        return self.source.startswith(literal, self.offset)

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, rest={self.rest[:24]!r})"


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Result of running a parser over a whole string."""
    match: Union[T, _NoMatch]   # NO_MATCH when the parser failed
    rest: str                   # Unconsumed suffix of the input

    @property
    def matched(self) -> bool:
        return self.match is not NO_MATCH


class Parser(Generic[T]):
    """
    A parsing function lifted into a composable value.
    """

    def __init__(self, run: Callable[[Cursor], Union[T, _NoMatch]], name: str = ""):
        self._run = run
        self.name = name or getattr(run, "__name__", "parser")

    def run(self, cursor: Cursor) -> Union[T, _NoMatch]:
        return self._run(cursor)

    __call__ = run

    def parse(self, text: str) -> ParseOutcome[T]:
        """Runs the parser against a fresh cursor over `text`."""
        cursor = Cursor(text)
        match = self._run(cursor)
        return ParseOutcome(match=match, rest=cursor.rest)

    def map(self, f: Callable[[T], U]) -> "Parser[U]":
        """Transforms a successful result; failure passes through."""
        def mapped(cursor: Cursor):
            result = self._run(cursor)
            if result is NO_MATCH:
                return NO_MATCH
            return f(result)
        return Parser(mapped, name=f"{self.name}.map")

    def skip(self, other: "Parser[Any]") -> "Parser[T]":
        """Runs self then `other`, keeping only self's result."""
        return sequence(self, other).map(lambda pair: pair[0])

    def take(self, other: "Parser[U]") -> "Parser[Tuple[T, U]]":
        """Runs self then `other`, keeping both results as a pair."""
        return sequence(self, other)

    def zero_or_more(self, separated_by: "Parser[Any]" = None) -> "Parser[List[T]]":
        return zero_or_more(self, separated_by=separated_by)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"


def _ensure_parsers(parsers: Iterable[Any]) -> Tuple[Parser, ...]:
    parsers = tuple(parsers)
    for p in parsers:
        if not isinstance(p, Parser):
            raise TypeError(f"Expected a Parser, got {type(p).__name__}")
    return parsers


# --- PRIMITIVES ---

def prefix(literal: str) -> Parser[str]:
    """Matches `literal` exactly at the cursor."""
    def run(cursor: Cursor):
        if not cursor.startswith(literal):
            return NO_MATCH
        cursor.offset += len(literal)
        return literal
    return Parser(run, name=f"prefix({literal!r})")


def prefix_while(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consumes the longest run of characters satisfying `predicate`. Never fails."""
    def run(cursor: Cursor):
        source = cursor.source
        start = end = cursor.offset
        while end < len(source) and predicate(source[end]):
            end += 1
        cursor.offset = end
        return source[start:end]
    return Parser(run, name="prefix_while")


def prefix_through(delimiter: str) -> Parser[str]:
    """Consumes everything up to and including the first `delimiter`."""
    def run(cursor: Cursor):
        found = cursor.source.find(delimiter, cursor.offset)
        if found == -1:
            return NO_MATCH
        start = cursor.offset
        cursor.offset = found + len(delimiter)
        return cursor.source[start:cursor.offset]
    return Parser(run, name=f"prefix_through({delimiter!r})")


DIGITS = frozenset("0123456789")


def _integer(cursor: Cursor):
    source = cursor.source
    end = cursor.offset
    while end < len(source) and source[end] in DIGITS:
        end += 1
    if end == cursor.offset:
        return NO_MATCH
    value = int(source[cursor.offset:end])
    cursor.offset = end
    return value


integer: Parser[int] = Parser(_integer, name="integer")


# --- COMBINATORS ---

def sequence(*parsers: Parser[Any]) -> Parser[Tuple[Any, ...]]:
    """
    Runs 2 to 5 parsers in order and returns their results as a tuple.
    If any of them fails, the cursor goes back to where the whole
    sequence started, undoing what the earlier parsers consumed.
    """
    parsers = _ensure_parsers(parsers)
    if not 2 <= len(parsers) <= 5:
        raise ValueError(f"sequence() takes 2 to 5 parsers, got {len(parsers)}")

    def run(cursor: Cursor):
        start = cursor.offset
        results = []
        for p in parsers:
            result = p.run(cursor)
            if result is NO_MATCH:
                cursor.offset = start
                return NO_MATCH
            results.append(result)
        return tuple(results)
    return Parser(run, name="sequence")


def skip(parser: Parser[Any]) -> Parser[None]:
    """Runs `parser` and discards its result."""
    return parser.map(lambda _: None)


def optional(parser: Parser[T]) -> Parser[Union[T, None]]:
    """Always succeeds: the parser's result, or None without consuming input."""
    parser, = _ensure_parsers([parser])

    def run(cursor: Cursor):
        start = cursor.offset
        result = parser.run(cursor)
        if result is NO_MATCH:
            cursor.offset = start
            return None
        return result
    return Parser(run, name=f"optional({parser.name})")


def one_of(*parsers: Union[Parser[T], Iterable[Parser[T]]]) -> Parser[T]:
    """Tries each alternative in order and returns the first success."""
    if len(parsers) == 1 and not isinstance(parsers[0], Parser):
        parsers = tuple(parsers[0])
    alternatives = _ensure_parsers(parsers)

    def run(cursor: Cursor):
        start = cursor.offset
        for p in alternatives:
            result = p.run(cursor)
            if result is not NO_MATCH:
                return result
            cursor.offset = start
        return NO_MATCH
    return Parser(run, name="one_of")


def zero_or_more(element: Parser[T], separated_by: Parser[Any] = None) -> Parser[List[T]]:
    """
    Greedy repetition with a separator required between elements.

    The cursor is committed right after each accepted element. A separator
    that is not followed by another element is given back, so a trailing
    separator never counts as consumed.
    """
    if separated_by is None:
        separated_by = prefix("")
    element, separated_by = _ensure_parsers([element, separated_by])

    def run(cursor: Cursor):
        committed = cursor.offset
        matches = []
        while True:
            before = cursor.offset
            result = element.run(cursor)
            if result is NO_MATCH:
                cursor.offset = committed
                return matches
            committed = cursor.offset
            matches.append(result)
            if separated_by.run(cursor) is NO_MATCH:
                cursor.offset = committed
                return matches
            # Neither element nor separator moved: stop instead of spinning.
            if cursor.offset == before:
                cursor.offset = committed
                return matches
    return Parser(run, name=f"zero_or_more({element.name})")
