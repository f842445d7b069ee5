"""Komenda: esconv units — przodkowie i potomkowie jednostki z tabeli unit_hier."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import ClosureEdge
from esconv._db import get_connection
from store import PostgresRepository

console = Console()


def _edge_table(title: str, edges: list[ClosureEdge], column: str) -> Table:
    table = Table(
        title=title,
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column(column.upper(), no_wrap=True, style="bold cyan")
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("ORD", justify="right", no_wrap=True, style="dim")

    for e in edges:
        unit = e.ancestor_unit if column == "ancestor" else e.unit_id
        kind = "[green]bezpośrednia[/green]" if e.is_direct else "[yellow]pośrednia[/yellow]"
        table.add_row(unit, kind, "-" if e.ordering is None else str(e.ordering))
    return table


def run(args: argparse.Namespace) -> None:
    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    repo = PostgresRepository(conn)
    unit = repo.get_unit(args.unit_id)
    if unit is None:
        console.print(f"[yellow]Brak jednostki:[/yellow] {args.unit_id}")
        conn.close()
        raise SystemExit(1)

    ancestors   = repo.ancestors(unit.id)
    descendants = [] if args.ancestors_only else repo.descendants(unit.id)
    conn.close()

    status = "[green]aktywna[/green]" if unit.is_active else "[red]wygaszona[/red]"
    console.print(
        f"[bold cyan]{unit.id}[/bold cyan]  {unit.name or '-'}  "
        f"typ=[cyan]{unit.type or '-'}[/cyan]  {status}"
    )
    if unit.attrs:
        console.print(f"  [dim]{unit.attrs}[/dim]")

    console.print()
    console.print(_edge_table("Przodkowie", ancestors, "ancestor"))
    if not args.ancestors_only:
        console.print(_edge_table("Potomkowie", descendants, "unit"))
    console.print(
        f"  [dim]{len(ancestors)} przodków, {len(descendants)} potomków[/dim]\n"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "units",
        help="Pokazuje domknięcie hierarchii dla jednostki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pokazuje jednostkę oraz jej przodków i potomków z tabeli unit_hier
(krawędzie bezpośrednie z numerem pozycji, pośrednie bez).

Przykłady:
  esconv units root
  esconv units ucla_history --ancestors-only
        """,
    )
    p.add_argument(
        "unit_id",
        metavar="UNIT_ID",
        help="Identyfikator jednostki.",
    )
    p.add_argument(
        "--ancestors-only",
        action="store_true",
        help="Pokaż tylko przodków.",
    )
    p.set_defaults(func=run)
