"""
store/base.py — kontrakt repozytorium docelowego.

Konwerter tylko zleca utworzenie encji i czyta relację domknięcia;
cały stan trwały należy do repozytorium. Implementacje:
  PostgresRepository — psycopg2, tabele z db/schema.sql
  MemoryRepository   — w pamięci procesu (--dry-run, testy)
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from data_model import ClosureEdge, Item, ItemAuthor, Unit, UnitItem


class Repository(Protocol):
    def transaction(self) -> AbstractContextManager[None]:
        """Zakres transakcji: commit przy sukcesie, rollback przy wyjątku."""
        ...

    def create_unit(self, unit: Unit) -> None: ...

    def create_closure_edge(self, edge: ClosureEdge) -> None: ...

    def create_item(self, item: Item) -> None: ...

    def create_item_author(self, author: ItemAuthor) -> None: ...

    def create_unit_item(self, link: UnitItem) -> None: ...

    def indirect_ancestors(self, unit_id: str) -> list[str]:
        """Przodkowie jednostki z krawędzi pośrednich (is_direct=False)."""
        ...

    def ancestors(self, unit_id: str) -> list[ClosureEdge]: ...

    def descendants(self, unit_id: str) -> list[ClosureEdge]: ...

    def unit_ids(self) -> set[str]: ...

    def close(self) -> None: ...

    def get_unit(self, unit_id: str) -> Unit | None: ...
