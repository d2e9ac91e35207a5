#!/usr/bin/env python3
"""
FAMIXPARSE CORE MODELS
----------------------
Defines the FAMIX entity records produced by the grammar.
Every integer field is a raw id or reference exactly as written in the
source text. Nothing is resolved or cross-checked.

Author: FamixParse Team
Date: 2026-10-19
"""

from collections import Counter
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, Optional, Union

@dataclass(frozen=True)
class Namespace:
    """FAMIX.Namespace record."""
    name: str
    id: int

    kind = "Namespace"

    def describe(self) -> str:
        return f"FAMIX.namespace, name: {self.name}, id: {self.id}"


@dataclass(frozen=True)
class Package:
    """FAMIX.Package record. The parent package is the only optional field."""
    name: str
    id: int
    parent_package: Optional[int] = None

    kind = "Package"

    def describe(self) -> str:
        return (f"FAMIX.package, name: {self.name}, id: {self.id}, "
                f"parentPackageID: {self.parent_package}")


@dataclass(frozen=True)
class Class:
    """FAMIX.Class record."""
    name: str
    id: int
    container: int          # Ref to the owning Namespace
    parent_package: int     # Ref to the owning Package

    kind = "Class"

    def describe(self) -> str:
        return (f"FAMIX.class, name: {self.name}, id: {self.id}, "
                f"container: {self.container}, parentPackage: {self.parent_package}")


@dataclass(frozen=True)
class Method:
    """FAMIX.Method record. Methods carry no id of their own."""
    name: str
    signature: str
    parent_type: int        # Ref to the owning Class
    loc: int                # Lines of code

    kind = "Method"

    def describe(self) -> str:
        return (f"FAMIX.method, name: {self.name}, signature: {self.signature}, "
                f"parentType: {self.parent_type}, LOC: {self.loc}")


@dataclass(frozen=True)
class Attribute:
    """FAMIX.Attribute record."""
    name: str
    parent_type: int

    kind = "Attribute"

    def describe(self) -> str:
        return f"FAMIX.attribute, name: {self.name}, parentID: {self.parent_type}"


@dataclass(frozen=True)
class Inheritance:
    """FAMIX.Inheritance edge between two Class ids."""
    subclass: int
    superclass: int

    kind = "Inheritance"

    def describe(self) -> str:
        return f"FAMIX.inheritance, subclassID: {self.subclass}, superclassID: {self.superclass}"


Entity = Union[Namespace, Package, Class, Method, Attribute, Inheritance]

ENTITY_TYPES = (Namespace, Package, Class, Method, Attribute, Inheritance)

# Stable, closed set of kind tags (one per variant) for reporting and charts
ENTITY_KINDS = tuple(t.kind for t in ENTITY_TYPES)


def entity_fields(entity: Entity) -> Dict[str, Union[str, int, None]]:
    """Field name -> value, in declaration order."""
    return {f.name: getattr(entity, f.name) for f in fields(entity)}


def count_occurrences(entities: Iterable[Entity]) -> Dict[str, int]:
    """
    Counts entities per kind tag. Kinds appear in order of first occurrence.
    """
    return dict(Counter(e.kind for e in entities))


def chart_labels(counts: Dict[str, int]) -> List[str]:
    """Builds bar labels like 'Method (3)' for the frequency chart."""
    return [f"{kind} ({count})" for kind, count in counts.items()]
