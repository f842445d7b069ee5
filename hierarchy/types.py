"""
hierarchy/types.py — kontekst hierarchii jednostek.

UnitHierarchy powstaje w loaderze (jedno przejście po allStruct) i jest
przekazywany dalej: do budowy domknięcia (children) i do ingestera
rekordów (defined — zbiór jednostek faktycznie zdefiniowanych).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

# Mapa sąsiedztwa: jednostka → lista jednostek (kolejność ze źródła).
Adjacency: TypeAlias = dict[str, list[str]]


@dataclass(slots=True)
class UnitHierarchy:
    """
    - children: rodzic → dzieci (kolejność rodzeństwa jak w dokumencie)
    - parents:  dziecko → rodzice (jednostka może mieć wielu rodziców — DAG)
    - defined:  identyfikatory jednostek zdefiniowanych węzłem <div>
    """
    children: Adjacency = field(default_factory=dict)
    parents: Adjacency = field(default_factory=dict)
    defined: set[str] = field(default_factory=set)

    def link(self, parent: str, child: str) -> None:
        self.children.setdefault(parent, []).append(child)
        self.parents.setdefault(child, []).append(parent)

    def is_defined(self, unit_id: str) -> bool:
        return unit_id in self.defined
