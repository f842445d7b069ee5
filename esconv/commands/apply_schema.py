"""Komenda: esconv apply-schema — aplikuje db/schema.sql do bazy danych."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from esconv._db import get_connection

console = Console()

ROOT        = pathlib.Path(__file__).resolve().parent.parent.parent
SCHEMA_PATH = ROOT / "db" / "schema.sql"


def split_statements(sql: str) -> list[str]:
    """
    Dzieli SQL na pojedyncze instrukcje.

    Instrukcja kończy się średnikiem na końcu linii; linie komentarzy (--)
    są pomijane, puste wyniki odrzucane.
    """
    stmts: list[str] = []
    buf:   list[str] = []

    for line in sql.splitlines():
        if line.lstrip().startswith("--"):
            continue
        buf.append(line)
        if line.rstrip().endswith(";"):
            stmt = "\n".join(buf).strip()
            if stmt:
                stmts.append(stmt)
            buf = []

    remaining = "\n".join(buf).strip()
    if remaining:
        stmts.append(remaining)

    return stmts


def run(args: argparse.Namespace) -> None:
    schema_path = pathlib.Path(args.schema)
    if not schema_path.exists():
        console.print(f"[red]Brak pliku schematu:[/red] {schema_path}")
        raise SystemExit(1)

    stmts = split_statements(schema_path.read_text(encoding="utf-8"))

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    # schema.sql jest idempotentny (IF NOT EXISTS); każda instrukcja osobno
    conn.autocommit = True
    try:
        with conn.cursor() as cur:
            for stmt in stmts:
                cur.execute(stmt)
    except Exception as e:
        console.print(f"[red]Błąd wykonania schematu:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]Schemat zastosowany:[/green] {schema_path} ({len(stmts)} instrukcji)")
    console.print("[dim]Gotowe.[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "apply-schema",
        help="Aplikuje db/schema.sql do bazy danych (idempotentne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Tworzy tabele unit, unit_hier, item, item_author i unit_item w skonfigurowanej
bazie PostgreSQL. Wszystkie instrukcje używają IF NOT EXISTS.

Przykład:
  esconv apply-schema
        """,
    )
    p.add_argument(
        "--schema",
        default=str(SCHEMA_PATH),
        metavar="PLIK",
        help=f"Plik schematu (domyślnie: {SCHEMA_PATH.name}).",
    )
    p.set_defaults(func=run)
