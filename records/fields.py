"""
records/fields.py — wyciąganie pól z rekordu indeksu.

Rekord to płaski <document> z polami tekstowymi (identifier, title,
creator, entityOnly…). Funkcje tutaj nie dotykają bazy — zwracają
obiekty data_model gotowe do zapisu.
"""

from __future__ import annotations

from bs4 import Tag

from data_model import (
    DEFAULT_RIGHTS,
    DEFAULT_STATUS,
    SENTINEL_DATE,
    Item,
    ItemAuthor,
)

AUTHOR_SEP = ";"
NAME_SEP   = ","
UNIT_SEP   = "|"

_YES = "yes"


def text_at(el: Tag, name: str) -> str | None:
    """Tekst pierwszego potomka o podanej nazwie; None gdy pola brak."""
    found = el.find(name)
    if found is None:
        return None
    return found.get_text().strip()


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value


def item_attrs(doc: Tag) -> dict[str, object]:
    attrs: dict[str, object] = {}
    if text_at(doc, "contentExists") == _YES:
        attrs["contentExists"] = True
    if text_at(doc, "pdfExists") == _YES:
        attrs["pdfExists"] = True
    language = text_at(doc, "language")
    if language is not None:
        attrs["language"] = language
    if text_at(doc, "peerReview") == _YES:
        attrs["peerReviewed"] = True
    return attrs


def extract_item(doc: Tag) -> Item:
    """
    Buduje Item z rekordu. Brakujące pola opcjonalne dostają wartości
    domyślne: status "unknown", daty SENTINEL_DATE, prawa "public".
    Identyfikator nie jest tu sprawdzany (robi to ingester).
    """
    return Item(
        id=text_at(doc, "identifier"),
        source=text_at(doc, "source"),
        title=text_at(doc, "title"),
        content_type=text_at(doc, "format"),
        genre=text_at(doc, "type"),
        status=_or_default(text_at(doc, "pubStatus"), DEFAULT_STATUS),
        pub_date=_or_default(text_at(doc, "date"), SENTINEL_DATE),
        added_date=_or_default(text_at(doc, "dateStamp"), SENTINEL_DATE),
        rights=_or_default(text_at(doc, "rights"), DEFAULT_RIGHTS),
        attrs=item_attrs(doc),
    )


def author_attrs(token: str) -> dict[str, str]:
    """
    "Smith, John" → {"lname": "Smith", "fname": "John"}
    każdy inny kształt → {"organization": token}
    """
    parts = token.split(NAME_SEP)
    if len(parts) == 2:
        return {"lname": parts[0].strip(), "fname": parts[1].strip()}
    return {"organization": token}


def split_authors(item_id: str, creator: str | None) -> list[ItemAuthor]:
    if not creator:
        return []
    tokens = [t.strip() for t in creator.split(AUTHOR_SEP)]
    return [
        ItemAuthor(item_id=item_id, ordering=order, attrs=author_attrs(token))
        for order, token in enumerate(t for t in tokens if t)
    ]


def unit_tokens(entity_only: str | None) -> list[str]:
    """Lista jednostek z pola entityOnly ("a|b|c"), z zachowaniem pozycji."""
    if entity_only is None:
        return []
    return [t.strip() for t in entity_only.split(UNIT_SEP)]
