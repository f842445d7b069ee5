"""
store/memory.py — repozytorium w pamięci.

Odwzorowuje ograniczenia kluczy z db/schema.sql (duplikat klucza → ValueError),
a transaction() przywraca stan sprzed transakcji, gdy w środku poleci wyjątek.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from data_model import ClosureEdge, Item, ItemAuthor, Unit, UnitItem


@dataclass
class MemoryRepository:
    units:        dict[str, Unit] = field(default_factory=dict)
    closure:      dict[tuple[str, str], ClosureEdge] = field(default_factory=dict)
    items:        dict[str, Item] = field(default_factory=dict)
    item_authors: dict[tuple[str, int], ItemAuthor] = field(default_factory=dict)
    unit_items:   dict[tuple[str, str], UnitItem] = field(default_factory=dict)

    _TABLES = ("units", "closure", "items", "item_authors", "unit_items")

    # ------------------------------------------------------------------
    # Transakcje
    # ------------------------------------------------------------------

    def close(self) -> None:
        pass

    @contextmanager
    def transaction(self) -> Iterator[None]:
        snapshot = {name: copy.copy(getattr(self, name)) for name in self._TABLES}
        try:
            yield
        except BaseException:
            for name, rows in snapshot.items():
                setattr(self, name, rows)
            raise

    # ------------------------------------------------------------------
    # Zapis
    # ------------------------------------------------------------------

    @staticmethod
    def _insert(table: dict, key, row, what: str) -> None:
        if key in table:
            raise ValueError(f"Duplikat klucza {what}: {key!r}")
        table[key] = row

    def create_unit(self, unit: Unit) -> None:
        self._insert(self.units, unit.id, unit, "unit")

    def create_closure_edge(self, edge: ClosureEdge) -> None:
        self._insert(self.closure, (edge.ancestor_unit, edge.unit_id), edge, "unit_hier")

    def create_item(self, item: Item) -> None:
        self._insert(self.items, item.id, item, "item")

    def create_item_author(self, author: ItemAuthor) -> None:
        self._insert(self.item_authors, (author.item_id, author.ordering), author, "item_author")

    def create_unit_item(self, link: UnitItem) -> None:
        self._insert(self.unit_items, (link.unit_id, link.item_id), link, "unit_item")

    # ------------------------------------------------------------------
    # Odczyt
    # ------------------------------------------------------------------

    def indirect_ancestors(self, unit_id: str) -> list[str]:
        return [
            e.ancestor_unit
            for e in self.closure.values()
            if e.unit_id == unit_id and not e.is_direct
        ]

    def ancestors(self, unit_id: str) -> list[ClosureEdge]:
        return [e for e in self.closure.values() if e.unit_id == unit_id]

    def descendants(self, unit_id: str) -> list[ClosureEdge]:
        return [e for e in self.closure.values() if e.ancestor_unit == unit_id]

    def unit_ids(self) -> set[str]:
        return set(self.units)

    def get_unit(self, unit_id: str) -> Unit | None:
        return self.units.get(unit_id)

    def unit_items_for(self, item_id: str) -> list[UnitItem]:
        return [ui for ui in self.unit_items.values() if ui.item_id == item_id]

    def authors_for(self, item_id: str) -> list[ItemAuthor]:
        rows = [a for a in self.item_authors.values() if a.item_id == item_id]
        return sorted(rows, key=lambda a: a.ordering)
