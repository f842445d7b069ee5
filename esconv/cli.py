"""
esconv — konwerter danych starego eScholarship do bazy eschol5.

Użycie:
  esconv <komenda> [opcje]

Komendy:
  convert       Konwertuje allStruct.xml i zrzut indeksu do bazy.
  records       Podgląd rekordów ze zrzutu indeksu (bez bazy).
  units         Pokazuje przodków i potomków jednostki (unit_hier).
  apply-schema  Aplikuje db/schema.sql do bazy danych (idempotentne).
  reset         Usuwa skonwertowane dane (items / units / all).
"""

from __future__ import annotations

import argparse
import sys

if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from esconv.commands import convert as cmd_convert
from esconv.commands import records as cmd_records
from esconv.commands import units as cmd_units
from esconv.commands import apply_schema as cmd_apply_schema
from esconv.commands import reset as cmd_reset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esconv",
        description="Konwerter eScholarship → eschol5.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="esconv 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_convert.add_parser(subparsers)
    cmd_records.add_parser(subparsers)
    cmd_units.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)
    cmd_reset.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
