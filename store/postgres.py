"""
store/postgres.py — repozytorium PostgreSQL (psycopg2).

Tabele: unit, unit_hier, item, item_author, unit_item (db/schema.sql).
Repozytorium nie otwiera połączenia samo — dostaje gotowe (esconv._db).
Zapis poza transaction() nie jest zatwierdzany.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager

import psycopg2.extensions

from data_model import ClosureEdge, Item, ItemAuthor, Unit, UnitItem

_INSERT_UNIT = """
    INSERT INTO unit (id, name, type, is_active, attrs)
    VALUES (%s, %s, %s, %s, %s::jsonb)
"""

_INSERT_UNIT_HIER = """
    INSERT INTO unit_hier (ancestor_unit, unit_id, ordering, is_direct)
    VALUES (%s, %s, %s, %s)
"""

_INSERT_ITEM = """
    INSERT INTO item (
        id, source, status, title, content_type, genre,
        pub_date, added_date, rights, attrs
    )
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s::jsonb)
"""

_INSERT_ITEM_AUTHOR = """
    INSERT INTO item_author (item_id, ordering, attrs)
    VALUES (%s, %s, %s::jsonb)
"""

_INSERT_UNIT_ITEM = """
    INSERT INTO unit_item (unit_id, item_id, ordering_of_units, is_direct)
    VALUES (%s, %s, %s, %s)
"""

_SELECT_EDGES = """
    SELECT ancestor_unit, unit_id, is_direct, ordering
    FROM unit_hier
    WHERE {column} = %s
    ORDER BY is_direct DESC, ordering NULLS LAST, {order}
"""


def _json(value) -> str | None:
    return None if value is None else json.dumps(value, ensure_ascii=False)


class PostgresRepository:
    def __init__(self, conn: psycopg2.extensions.connection) -> None:
        self.conn = conn

    def close(self) -> None:
        self.conn.close()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        # with conn: commit przy sukcesie, rollback przy wyjątku
        with self.conn:
            yield

    def _execute(self, sql: str, params: tuple) -> None:
        with self.conn.cursor() as cur:
            cur.execute(sql, params)

    # ------------------------------------------------------------------
    # Zapis
    # ------------------------------------------------------------------

    def create_unit(self, unit: Unit) -> None:
        self._execute(
            _INSERT_UNIT,
            (unit.id, unit.name, unit.type, unit.is_active, _json(unit.attrs)),
        )

    def create_closure_edge(self, edge: ClosureEdge) -> None:
        self._execute(
            _INSERT_UNIT_HIER,
            (edge.ancestor_unit, edge.unit_id, edge.ordering, edge.is_direct),
        )

    def create_item(self, item: Item) -> None:
        self._execute(
            _INSERT_ITEM,
            (
                item.id,
                item.source,
                item.status,
                item.title,
                item.content_type,
                item.genre,
                item.pub_date,
                item.added_date,
                item.rights,
                _json(item.attrs),
            ),
        )

    def create_item_author(self, author: ItemAuthor) -> None:
        self._execute(
            _INSERT_ITEM_AUTHOR,
            (author.item_id, author.ordering, _json(author.attrs)),
        )

    def create_unit_item(self, link: UnitItem) -> None:
        self._execute(
            _INSERT_UNIT_ITEM,
            (link.unit_id, link.item_id, link.ordering_of_units, link.is_direct),
        )

    # ------------------------------------------------------------------
    # Odczyt
    # ------------------------------------------------------------------

    def indirect_ancestors(self, unit_id: str) -> list[str]:
        with self.conn.cursor() as cur:
            cur.execute(
                "SELECT ancestor_unit FROM unit_hier WHERE unit_id = %s AND NOT is_direct",
                (unit_id,),
            )
            return [r[0] for r in cur.fetchall()]

    def _edges(self, column: str, order: str, unit_id: str) -> list[ClosureEdge]:
        with self.conn.cursor() as cur:
            cur.execute(_SELECT_EDGES.format(column=column, order=order), (unit_id,))
            rows = cur.fetchall()
        return [
            ClosureEdge(ancestor_unit=a, unit_id=u, is_direct=d, ordering=o)
            for a, u, d, o in rows
        ]

    def ancestors(self, unit_id: str) -> list[ClosureEdge]:
        return self._edges("unit_id", "ancestor_unit", unit_id)

    def descendants(self, unit_id: str) -> list[ClosureEdge]:
        return self._edges("ancestor_unit", "unit_id", unit_id)

    def unit_ids(self) -> set[str]:
        with self.conn.cursor() as cur:
            cur.execute("SELECT id FROM unit")
            return {r[0] for r in cur.fetchall()}

    def get_unit(self, unit_id: str) -> Unit | None:
        with self.conn.cursor() as cur:
            cur.execute(
                "SELECT id, name, type, is_active, attrs FROM unit WHERE id = %s",
                (unit_id,),
            )
            row = cur.fetchone()
        if row is None:
            return None
        uid, name, type_, is_active, attrs = row
        if isinstance(attrs, str):
            attrs = json.loads(attrs)
        return Unit(id=uid, name=name, type=type_, is_active=is_active, attrs=attrs)
