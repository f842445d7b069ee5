"""Komenda: esconv convert — konwersja allStruct i zrzutu indeksu do bazy."""

from __future__ import annotations

import argparse
import pathlib
import time

from rich.console import Console
from rich.markup import escape

from data_model import RecordError
from esconv._db import get_connection
from esconv.phases import DEFAULT_PROGRESS_EVERY, PhaseResult, convert_items, convert_units
from hierarchy import parse_hierarchy
from records import iter_records
from store import MemoryRepository, PostgresRepository, Repository

console = Console()


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _fail(result: PhaseResult, phase: str) -> None:
    err = result.error
    if isinstance(err, RecordError) and err.fragment:
        # surowy fragment do diagnostyki, bez interpretacji markupu rich
        console.print(escape(err.fragment), highlight=False)
    console.print(f"[red]Błąd w fazie {phase}:[/red] {escape(str(err))}")
    console.print(f"[yellow]Faza {phase} wycofana (rollback).[/yellow]")
    raise SystemExit(1)


def _open_repository(dry_run: bool) -> Repository:
    if dry_run:
        return MemoryRepository()
    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)
    return PostgresRepository(conn)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    struct_path = pathlib.Path(args.all_struct)
    dump_path   = pathlib.Path(args.index_dump)
    for path in (struct_path, dump_path):
        if not path.exists():
            console.print(f"[red]Plik nie istnieje:[/red] {path}")
            raise SystemExit(1)

    repo = _open_repository(args.dry_run)
    start = time.monotonic()

    console.print(f"Konwersja jednostek: [bold]{struct_path}[/bold]")
    try:
        root = parse_hierarchy(struct_path)
    except Exception as e:
        console.print(f"[red]Błąd parsowania allStruct:[/red] {e}")
        raise SystemExit(1)

    units = convert_units(repo, root)
    if not units.ok:
        _fail(units, "units")
    console.print(
        f"[green]Jednostki:[/green] {units.count}, "
        f"krawędzie domknięcia: {units.edges}"
    )

    console.print(f"Konwersja rekordów: [bold]{dump_path}[/bold]")
    items = convert_items(
        repo,
        iter_records(dump_path),
        units.hierarchy,
        on_progress=lambda n: console.print(f"{n} gotowych."),
        progress_every=args.progress_every,
        limit=args.limit,
    )
    if not items.ok:
        _fail(items, "items")
    console.print(f"[green]{items.count} gotowych.[/green]")

    repo.close()
    if args.dry_run:
        console.print("[dim](--dry-run: nic nie zapisano w bazie)[/dim]")
    console.print(f"  Czas: {time.monotonic() - start:.1f} s")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "convert",
        help="Konwertuje allStruct i zrzut indeksu do bazy eschol5.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Konwertuje dane starego eScholarship do bazy eschol5 w dwóch fazach:
  1. allStruct.xml → unit + unit_hier (pełne domknięcie hierarchii)
  2. zrzut indeksu (XML, opcjonalnie .gz) → item + item_author + unit_item

Każda faza to jedna transakcja. Pierwszy błędny rekord przerywa konwersję
(wypisywany jest jego surowy XML). Konwersja nie jest idempotentna —
uruchamiaj na pustej bazie (esconv reset all).

Przykłady:
  esconv convert allStruct.xml indexDump.xml.gz
  esconv convert allStruct.xml indexDump.xml.gz --progress-every 1000
  esconv convert allStruct.xml indexDump.xml --dry-run --limit 500
        """,
    )
    p.add_argument(
        "all_struct",
        metavar="allStruct.xml",
        help="Ścieżka do dokumentu hierarchii jednostek.",
    )
    p.add_argument(
        "index_dump",
        metavar="indexDump.xml[.gz]",
        help="Ścieżka do zrzutu rekordów (gzip rozpoznawany po .gz).",
    )
    p.add_argument(
        "--progress-every",
        type=int,
        default=DEFAULT_PROGRESS_EVERY,
        metavar="N",
        help=f"Raport postępu co N rekordów (domyślnie: {DEFAULT_PROGRESS_EVERY}).",
    )
    p.add_argument(
        "--limit",
        type=int,
        default=None,
        metavar="N",
        help="Zatrzymaj po N rekordach.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Wykonaj konwersję w pamięci, bez zapisu do bazy.",
    )
    p.set_defaults(func=run)
