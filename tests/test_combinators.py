#!/usr/bin/env python3
"""
FAMIXPARSE COMBINATOR SUITE
---------------------------
Checks every primitive and combinator, with the emphasis on the rollback
contract: a parser that fails must leave the cursor where it found it.

Author: FamixParse Team
Date: 2026-10-19
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from famixparse.parsing.combinators import (
    NO_MATCH,
    Cursor,
    Parser,
    integer,
    one_of,
    optional,
    prefix,
    prefix_through,
    prefix_while,
    sequence,
    skip,
    zero_or_more,
)

# --- PRIMITIVES ---

def test_prefix_advances_on_match():
    cursor = Cursor("(name 'x')")
    assert prefix("(name '").run(cursor) == "(name '"
    assert cursor.rest == "x')"

def test_prefix_failure_leaves_cursor():
    cursor = Cursor("(id: 1)")
    assert prefix("(name").run(cursor) is NO_MATCH
    assert cursor.offset == 0

def test_empty_prefix_always_matches():
    outcome = prefix("").parse("anything")
    assert outcome.matched
    assert outcome.rest == "anything"

def test_prefix_while_may_consume_nothing():
    outcome = prefix_while(lambda ch: ch == " ").parse("x  ")
    assert outcome.match == ""
    assert outcome.rest == "x  "

def test_prefix_while_is_greedy():
    outcome = prefix_while(lambda ch: ch != "'").parse("methodA1()')")
    assert outcome.match == "methodA1()"
    assert outcome.rest == "')"

def test_prefix_through_includes_delimiter():
    outcome = prefix_through("))").parse("201)))\n")
    assert outcome.match == "201))"
    assert outcome.rest == ")\n"

def test_prefix_through_missing_delimiter_fails():
    cursor = Cursor("201)")
    assert prefix_through("))").run(cursor) is NO_MATCH
    assert cursor.offset == 0

@pytest.mark.parametrize("text, value, rest", [
    ("42)", 42, ")"),
    ("007", 7, ""),
    ("201))", 201, "))"),
])
def test_integer_reads_leading_digits(text, value, rest):
    outcome = integer.parse(text)
    assert outcome.match == value
    assert outcome.rest == rest

@pytest.mark.parametrize("text", ["", "x1", "-1", " 1", "٣"])
def test_integer_needs_ascii_digits(text):
    outcome = integer.parse(text)
    assert outcome.match is NO_MATCH
    assert outcome.rest == text

# --- COMBINATORS ---

def test_map_transforms_success_only():
    doubled = integer.map(lambda n: n * 2)
    assert doubled.parse("21").match == 42
    assert doubled.parse("x").match is NO_MATCH

def test_sequence_returns_tuple():
    outcome = sequence(prefix("(LOC "), integer, prefix(")")).parse("(LOC 4)")
    assert outcome.match == ("(LOC ", 4, ")")
    assert outcome.rest == ""

def test_sequence_rolls_back_whole_span():
    """The earlier successes are undone, not just the failing step."""
    cursor = Cursor("(LOC 4]")
    parser = sequence(prefix("(LOC "), integer, prefix(")"))
    assert parser.run(cursor) is NO_MATCH
    assert cursor.offset == 0

def test_nested_sequence_rolls_back_to_outer_start():
    cursor = Cursor("xxab-", offset=2)
    parser = sequence(sequence(prefix("a"), prefix("b")), prefix("c"))
    assert parser.run(cursor) is NO_MATCH
    assert cursor.offset == 2

@pytest.mark.parametrize("count", [0, 1, 6])
def test_sequence_arity_is_bounded(count):
    with pytest.raises(ValueError):
        sequence(*[prefix("a")] * count)

def test_combinators_reject_non_parsers():
    with pytest.raises(TypeError):
        sequence(prefix("a"), "b")
    with pytest.raises(TypeError):
        one_of(prefix("a"), None)

def test_skip_discards_value():
    assert skip(integer).parse("12").match is None

def test_take_pairs_and_skip_keeps_left():
    parser = skip(prefix("(ref: ")).take(integer).skip(prefix(")"))
    outcome = parser.parse("(ref: 3)")
    assert outcome.match == (None, 3)
    assert outcome.rest == ""

def test_take_rolls_back():
    cursor = Cursor("(ref: x)")
    assert skip(prefix("(ref: ")).take(integer).run(cursor) is NO_MATCH
    assert cursor.offset == 0

def test_optional_yields_none_without_consuming():
    parser = optional(sequence(prefix("\n"), prefix("(parentPackage")))
    cursor = Cursor("\n)")
    assert parser.run(cursor) is None
    assert cursor.offset == 0

def test_optional_restores_after_partial_primitive_consumption():
    """A bare parser that moves before failing is still safe to wrap."""
    def greedy_then_fail(cursor):
        cursor.offset += 1
        return NO_MATCH

    cursor = Cursor("abc")
    assert optional(Parser(greedy_then_fail)).run(cursor) is None
    assert cursor.offset == 0

def test_optional_passes_value_through():
    assert optional(integer).parse("5").match == 5

def test_one_of_first_success_wins():
    parser = one_of(prefix("ab").map(lambda _: 1), prefix("a").map(lambda _: 2))
    assert parser.parse("abc").match == 1
    assert parser.parse("ac").match == 2

def test_one_of_accepts_iterable():
    parser = one_of([prefix("x"), prefix("y")])
    assert parser.parse("y").match == "y"

def test_one_of_failure_leaves_cursor():
    cursor = Cursor("zzz")
    assert one_of(prefix("x"), sequence(prefix("z"), prefix("q"))).run(cursor) is NO_MATCH
    assert cursor.offset == 0

# --- REPETITION ---

def test_trailing_separator_is_not_consumed():
    parser = zero_or_more(prefix("A"), separated_by=prefix(","))
    outcome = parser.parse("A,A,A,")
    assert outcome.match == ["A", "A", "A"]
    assert outcome.rest == ","

def test_zero_or_more_matches_nothing():
    outcome = zero_or_more(prefix("A"), separated_by=prefix(",")).parse("B,A")
    assert outcome.match == []
    assert outcome.rest == "B,A"

def test_zero_or_more_stops_when_separator_missing():
    outcome = prefix("A").zero_or_more(separated_by=prefix(",")).parse("A,AA")
    assert outcome.match == ["A", "A"]
    assert outcome.rest == "A"

def test_zero_or_more_default_separator():
    outcome = prefix("A").zero_or_more().parse("AAAb")
    assert outcome.match == ["A", "A", "A"]
    assert outcome.rest == "b"

def test_zero_or_more_discards_partial_element():
    element = sequence(prefix("A"), prefix("B"))
    outcome = zero_or_more(element, separated_by=prefix(",")).parse("AB,AC")
    assert outcome.match == [("A", "B")]
    assert outcome.rest == ",AC"

def test_zero_or_more_terminates_on_empty_matches():
    outcome = prefix_while(lambda ch: ch == "x").zero_or_more().parse("yyy")
    assert outcome.match == [""]
    assert outcome.rest == "yyy"

# --- PROPERTIES ---

COMPOSITES = [
    sequence(prefix("A"), integer, prefix(",")),
    skip(prefix("(")).take(integer).skip(prefix_through(")")),
    one_of(sequence(prefix("A"), prefix("B")), sequence(prefix("A"), integer)),
]

@pytest.mark.parametrize("parser", COMPOSITES)
@given(text=st.text(alphabet="AB,()01 \n", max_size=20), lead=st.integers(min_value=0, max_value=3))
def test_failed_composite_never_moves_cursor(parser, text, lead):
    cursor = Cursor("#" * lead + text, offset=lead)
    if parser.run(cursor) is NO_MATCH:
        assert cursor.offset == lead

@given(text=st.text(alphabet="AB,()01 \n", max_size=20))
def test_failure_is_idempotent(text):
    parser = sequence(prefix("("), integer, prefix(")"))
    first, second = parser.parse(text), parser.parse(text)
    assert first == second

if __name__ == "__main__":
    pytest.main([__file__])
