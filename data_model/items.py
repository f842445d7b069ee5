"""
data_model/items.py — rekordy bibliograficzne i ich powiązania.

Mapowanie na tabele:
  Item       → item
  ItemAuthor → item_author
  UnitItem   → unit_item
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Data-wartownik dla brakujących dat publikacji / dodania.
SENTINEL_DATE = "1901-01-01"

DEFAULT_STATUS = "unknown"
DEFAULT_RIGHTS = "public"


@dataclass(slots=True)
class Item:
    """
    Pojedynczy rekord bibliograficzny.

    - id:           identyfikator rekordu (pole identifier), np. "qt0001abcd"
    - source:       system źródłowy, np. "repo" / "ojs"
    - status:       status publikacji (domyślnie "unknown")
    - content_type: format treści (pole format), np. "application/pdf"
    - genre:        typ publikacji (pole type), np. "article"
    - pub_date:     data publikacji (domyślnie SENTINEL_DATE)
    - added_date:   data dodania do repozytorium (pole dateStamp)
    - rights:       oznaczenie praw (domyślnie "public")
    - attrs:        flagi contentExists / pdfExists / language / peerReviewed
    """
    id: str
    source: str | None
    title: str | None
    content_type: str | None
    genre: str | None
    status: str = DEFAULT_STATUS
    pub_date: str = SENTINEL_DATE
    added_date: str = SENTINEL_DATE
    rights: str = DEFAULT_RIGHTS
    attrs: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ItemAuthor:
    """
    Autor rekordu: {lname, fname} dla osoby albo {organization} dla instytucji.
    ordering — pozycja autora w polu creator (od 0).
    """
    item_id: str
    ordering: int
    attrs: dict[str, str]


@dataclass(slots=True, frozen=True)
class UnitItem:
    """
    Przynależność rekordu do jednostki.

    Wiersze bezpośrednie mają ordering_of_units równy pozycji jednostki
    w polu entityOnly; wiersze dziedziczone (przodkowie) numerowane są od 1000.
    """
    unit_id: str
    item_id: str
    ordering_of_units: int
    is_direct: bool
