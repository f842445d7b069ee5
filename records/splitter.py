"""
records/splitter.py — strumieniowe dzielenie zrzutu indeksu na rekordy.

Zrzut (indexDump.xml, opcjonalnie .gz) to sklejone fragmenty XML:

    <document>
      <identifier>qt0001abcd</identifier>
      ...
    </document>
    <document>
      ...

Plik czytany jest linia po linii; w pamięci trzymane są tylko linie
bieżącego fragmentu. Stan automatu:

    IDLE       — poza fragmentem (linie ignorowane)
    BUFFERING  — po znaczniku otwarcia, zbieranie linii
    READY      — po znaczniku zamknięcia: parsowanie i oddanie fragmentu

Publiczne API:
  open_stream(path)                 -> IO[str]  (gzip wg rozszerzenia .gz)
  split_fragments(lines)            -> Iterator[str]
  iter_fragments(lines)             -> Iterator[Fragment]
  iter_records(path)                -> Iterator[Fragment]
"""

from __future__ import annotations

import gzip
import pathlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import IO

from bs4 import BeautifulSoup, Tag

from data_model import RecordError

OPEN_MARKER  = "<document>"
CLOSE_MARKER = "</document>"

# Artefakt niestandardowego kodowania atrybutów w XTF, usuwany z linii fragmentu.
XTF_ATTR_ARTIFACT = "><$"


class _State(StrEnum):
    IDLE      = "idle"
    BUFFERING = "buffering"
    READY     = "ready"


@dataclass(slots=True)
class Fragment:
    """Jeden rekord: surowy tekst (do diagnostyki) i sparsowany element główny."""
    raw: str
    root: Tag


def open_stream(path: str | pathlib.Path) -> IO[str]:
    """Otwiera zrzut jako strumień tekstowy; pliki *.gz są dekompresowane w locie."""
    path = pathlib.Path(path)
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return open(path, "r", encoding="utf-8")


def repair_line(line: str) -> str:
    return line.replace(XTF_ATTR_ARTIFACT, "", 1)


def split_fragments(
    lines:        Iterable[str],
    open_marker:  str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> Iterator[str]:
    """
    Składa linie w surowe fragmenty XML, jeden na parę znaczników.

    Linia ze znacznikiem otwarcia czyści bufor (nawet jeśli poprzedni
    fragment nie został zamknięty). Naprawa XTF dotyczy tylko linii
    pomiędzy znacznikami.
    """
    state = _State.IDLE
    buf: list[str] = []

    for line in lines:
        if open_marker in line:
            buf = [line]
            state = _State.READY if close_marker in line else _State.BUFFERING
        elif close_marker in line and state is _State.BUFFERING:
            buf.append(line)
            state = _State.READY
        elif state is _State.BUFFERING:
            buf.append(repair_line(line))

        if state is _State.READY:
            yield "".join(buf)
            buf = []
            state = _State.IDLE


def parse_fragment(raw: str) -> Fragment:
    """Parsuje fragment XML i usuwa przestrzenie nazw z elementów."""
    soup = BeautifulSoup(raw, "lxml-xml")
    root = soup.find(True)
    if root is None:
        raise RecordError("Nie udało się sparsować fragmentu XML.", fragment=raw)
    for el in (root, *root.find_all(True)):
        el.prefix = None
        el.namespace = None
    return Fragment(raw=raw, root=root)


def iter_fragments(
    lines:        Iterable[str],
    open_marker:  str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> Iterator[Fragment]:
    for raw in split_fragments(lines, open_marker, close_marker):
        yield parse_fragment(raw)


def iter_records(path: str | pathlib.Path) -> Iterator[Fragment]:
    """
    Leniwa, jednorazowa sekwencja rekordów z pliku zrzutu.

    Strumień zamykany jest po wyczerpaniu sekwencji (lub jej porzuceniu).
    """
    with open_stream(path) as io:
        yield from iter_fragments(io)
