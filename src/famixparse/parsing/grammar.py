#!/usr/bin/env python3
"""
FAMIXPARSE GRAMMAR - The Record Shapes
--------------------------------------
Composes the combinator toolkit into parsers for the six FAMIX record
shapes and the enclosing top-level list:

    ((FAMIX.Namespace (id: 1)
        (name 'aNamespace'))
      (FAMIX.Package (id: 201)
        (name 'aPackage')))

Layout is significant only at separators: a newline followed by any number
of spaces. Field order inside a record is fixed.

Author: FamixParse Team
Date: 2026-10-19
"""

from famixparse.core.models import Attribute, Class, Inheritance, Method, Namespace, Package
from famixparse.parsing.combinators import (
    Parser,
    integer,
    one_of,
    optional,
    prefix,
    prefix_through,
    prefix_while,
    sequence,
    skip,
)

# --- SHARED PARSERS ---

zero_or_more_spaces = skip(prefix_while(lambda ch: ch == " "))

newline_separator = skip(sequence(prefix("\n"), zero_or_more_spaces))

# (name '<anything but a quote>')
name_field = sequence(
    zero_or_more_spaces,
    prefix("(name '"),
    prefix_while(lambda ch: ch != "'"),
    prefix("')"),
).map(lambda parts: parts[2])


def ref_field(tag: str) -> Parser[int]:
    """Matches `(<tag> (ref: <int>))` and yields the referenced id."""
    return (skip(prefix(f"({tag} (ref: "))
            .take(integer)
            .skip(prefix_through("))"))
            .map(lambda pair: pair[1]))


def entity_id(tag: str) -> Parser[int]:
    """Matches `(FAMIX.<tag> (id: <int>)` and yields the id."""
    return (skip(prefix(f"(FAMIX.{tag} (id: "))
            .take(integer)
            .skip(prefix_through(")"))
            .map(lambda pair: pair[1]))


def entity_tag(tag: str) -> Parser[None]:
    """Matches the bare `(FAMIX.<tag>` opener used by records without an id."""
    return skip(prefix(f"(FAMIX.{tag}"))


def then_separator(parser: Parser) -> Parser:
    """Runs `parser` followed by a newline separator, keeping the parser's result."""
    return parser.skip(newline_separator)


def then_close(parser: Parser) -> Parser:
    """Runs `parser` followed by the record's closing paren."""
    return parser.skip(prefix(")"))


parent_package_field = ref_field("parentPackage")
parent_type_field = ref_field("parentType")
container_field = ref_field("container")

# --- FAMIX.Namespace ---

namespace_entity = sequence(
    then_separator(entity_id("Namespace")),
    name_field,
    prefix(")"),
).map(lambda parts: Namespace(name=parts[1], id=parts[0]))

# --- FAMIX.Package ---

package_entity = sequence(
    entity_id("Package"),
    newline_separator,
    name_field,
    optional(sequence(newline_separator, parent_package_field)),
    prefix(")"),
).map(lambda parts: Package(
    name=parts[2],
    id=parts[0],
    parent_package=parts[3][1] if parts[3] is not None else None,
))

# --- FAMIX.Class ---

class_entity = sequence(
    then_separator(entity_id("Class")),
    then_separator(name_field),
    then_separator(container_field),
    then_close(parent_package_field),
).map(lambda parts: Class(
    name=parts[1],
    id=parts[0],
    container=parts[2],
    parent_package=parts[3],
))

# --- FAMIX.Method ---

signature_field = (skip(prefix("(signature '"))
                   .take(prefix_while(lambda ch: ch != "'"))
                   .skip(prefix_through(")"))
                   .map(lambda pair: pair[1]))

# LOC is the last field, so its '))' also closes the Method record
loc_field = (skip(prefix("(LOC "))
             .take(integer)
             .skip(prefix_through("))"))
             .map(lambda pair: pair[1]))

method_entity = sequence(
    then_separator(entity_tag("Method")),
    then_separator(name_field),
    then_separator(signature_field),
    then_separator(parent_type_field),
    loc_field,
).map(lambda parts: Method(
    name=parts[1],
    signature=parts[2],
    parent_type=parts[3],
    loc=parts[4],
))

# --- FAMIX.Attribute ---

attribute_entity = sequence(
    then_separator(entity_tag("Attribute")),
    then_separator(name_field),
    then_close(parent_type_field),
).map(lambda parts: Attribute(name=parts[1], parent_type=parts[2]))

# --- FAMIX.Inheritance ---

inheritance_entity = sequence(
    then_separator(entity_tag("Inheritance")),
    then_separator(ref_field("subclass")),
    then_close(ref_field("superclass")),
).map(lambda parts: Inheritance(subclass=parts[1], superclass=parts[2]))

# --- TOP LEVEL ---

ENTITY_PARSERS = (
    namespace_entity,
    package_entity,
    class_entity,
    method_entity,
    attribute_entity,
    inheritance_entity,
)

famix_entity = one_of(ENTITY_PARSERS)

famix_parser = (skip(prefix("("))
                .take(famix_entity.zero_or_more(separated_by=newline_separator))
                .skip(prefix(")"))
                .map(lambda pair: pair[1]))


FAMIX_EXAMPLE = """\
((FAMIX.Namespace (id: 1)
    (name 'aNamespace'))
  (FAMIX.Package (id: 201)
    (name 'aPackage'))
  (FAMIX.Package (id: 202)
    (name 'anotherPackage')
    (parentPackage (ref: 201)))
  (FAMIX.Package (id: 203)
    (name 'anotherPackage')
    (parentPackage (ref: 201)))
  (FAMIX.Class (id: 2)
    (name 'ClassA')
    (container (ref: 1))
    (parentPackage (ref: 201)))
  (FAMIX.Method
    (name 'methodA1')
    (signature 'methodA1()')
    (parentType (ref: 2))
    (LOC 2))
  (FAMIX.Method
    (name 'methodA2')
    (signature 'methodA2()')
    (parentType (ref: 3))
    (LOC 3))
  (FAMIX.Method
    (name 'methodA3')
    (signature 'methodA3()')
    (parentType (ref: 4))
    (LOC 4))
  (FAMIX.Attribute
    (name 'attributeA1')
    (parentType (ref: 2)))
  (FAMIX.Class (id: 3)
    (name 'ClassB')
    (container (ref: 1))
    (parentPackage (ref: 202)))
  (FAMIX.Inheritance
    (subclass (ref: 3))
    (superclass (ref: 2))))"""
