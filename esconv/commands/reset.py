"""Komenda: esconv reset — usuwanie skonwertowanych danych z bazy."""

from __future__ import annotations

import argparse

from rich.console import Console

from esconv._db import get_connection

console = Console()

# Kolejność usuwania zgodna z kluczami obcymi.
ITEM_TABLES = ("unit_item", "item_author", "item")
UNIT_TABLES = ("unit_hier", "unit")


def _table_exists(cur, table: str) -> bool:
    cur.execute(
        """
        SELECT 1 FROM information_schema.tables
        WHERE table_schema = 'public' AND table_name = %s
        """,
        (table,),
    )
    return cur.fetchone() is not None


def _clear(cur, tables: tuple[str, ...]) -> None:
    for table in tables:
        if not _table_exists(cur, table):
            console.print(f"[yellow]Tabela [bold]{table}[/bold] nie istnieje — pominięto.[/yellow]")
            continue
        cur.execute(f"DELETE FROM {table}")
        console.print(f"[green]Usunięto {cur.rowcount} wierszy z [bold]{table}[/bold][/green]")


def run(args: argparse.Namespace) -> None:
    cel: str = args.cel

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    with conn, conn.cursor() as cur:
        # rekordy zawsze przed jednostkami
        if cel in ("items", "all"):
            _clear(cur, ITEM_TABLES)
        if cel in ("units", "all"):
            _clear(cur, UNIT_TABLES)
    conn.close()

    console.print("[dim]Gotowe.[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "reset",
        help="Usuwa skonwertowane dane z bazy (bez potwierdzenia).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Usuwa dane z bazy eschol5. Działa natychmiast, bez pytania o potwierdzenie.
Konwersja nie jest idempotentna — przed ponownym uruchomieniem wyczyść bazę.

Cele:
  items   Usuwa rekordy (unit_item, item_author, item).
  units   Usuwa jednostki i domknięcie (unit_hier, unit).
  all     Wykonuje oba powyższe.

Przykłady:
  esconv reset items
  esconv reset all
        """,
    )
    p.add_argument(
        "cel",
        metavar="CEL",
        choices=["items", "units", "all"],
        help="Co usunąć: items | units | all",
    )
    p.set_defaults(func=run)
