"""Komenda: esconv records — podgląd rekordów ze zrzutu indeksu (bez bazy)."""

from __future__ import annotations

import argparse
import itertools
import pathlib

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from data_model import RecordError
from records import extract_item, iter_records, split_authors, text_at, unit_tokens

console = Console()

_DEFAULT_LIMIT = 20


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.index_dump)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("ID",      no_wrap=True, style="bold cyan")
    table.add_column("TYP",     no_wrap=True, style="dim")
    table.add_column("DATA",    no_wrap=True)
    table.add_column("AUT",     justify="right", no_wrap=True)
    table.add_column("JEDNOSTKI", max_width=40)
    table.add_column("TYTUŁ",   no_wrap=False, max_width=60)

    count = 0
    try:
        for fragment in itertools.islice(iter_records(path), args.limit):
            doc  = fragment.root
            item = extract_item(doc)
            authors = split_authors(item.id or "", text_at(doc, "creator"))
            units   = unit_tokens(text_at(doc, "entityOnly"))
            table.add_row(
                item.id or "[red]?[/red]",
                item.genre or "-",
                item.pub_date,
                str(len(authors)),
                ", ".join(units) or "-",
                escape((item.title or "")[:80]),
            )
            count += 1
    except RecordError as e:
        console.print(f"[red]Błąd parsowania rekordu:[/red] {e}")
        raise SystemExit(1)

    console.print()
    console.print(table)
    console.print(f"  [dim]{count} rekordów[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "records",
        help="Podgląd rekordów ze zrzutu indeksu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta pierwsze N rekordów zrzutu indeksu (XML lub .gz) i pokazuje pola,
które trafiłyby do bazy. Nie wymaga połączenia z bazą.

Przykłady:
  esconv records indexDump.xml.gz
  esconv records indexDump.xml --limit 100
        """,
    )
    p.add_argument(
        "index_dump",
        metavar="indexDump.xml[.gz]",
        help="Ścieżka do zrzutu rekordów.",
    )
    p.add_argument(
        "--limit", "-n",
        type=int,
        default=_DEFAULT_LIMIT,
        metavar="N",
        help=f"Liczba rekordów do pokazania (domyślnie: {_DEFAULT_LIMIT}).",
    )
    p.set_defaults(func=run)
