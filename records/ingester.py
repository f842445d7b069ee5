"""
records/ingester.py — zapis jednego rekordu indeksu do repozytorium.

Kolejność dla każdego rekordu:
  1. Item (z domyślnymi wartościami brakujących pól),
  2. ItemAuthor dla każdego autora z pola creator,
  3. UnitItem: bezpośrednio dla jednostek z entityOnly (tylko zdefiniowanych
     w allStruct), a pośrednio dla ich przodków z relacji domknięcia.

Publiczne API:
  ingest_record(doc, repo, hierarchy)        -> Item
  ingest_fragment(fragment, repo, hierarchy) -> Item   (błędy → RecordError)
"""

from __future__ import annotations

from bs4 import Tag

from data_model import Item, RecordError, UnitItem
from hierarchy import UnitHierarchy
from store import Repository

from .fields import extract_item, split_authors, text_at, unit_tokens
from .splitter import Fragment

# Pierwszy numer ordering_of_units dla wierszy dziedziczonych; zawsze za
# wszystkimi bezpośrednimi pozycjami z entityOnly.
INDIRECT_ORDERING_START = 1000


def link_units(
    item_id:   str,
    tokens:    list[str],
    repo:      Repository,
    hierarchy: UnitHierarchy,
) -> list[UnitItem]:
    """
    Tworzy wiersze unit_item dla rekordu.

    Nieznane jednostki są pomijane bez błędu. Przodek trafia do wyniku
    jako wiersz pośredni tylko raz i tylko wtedy, gdy nie jest już
    zadeklarowany bezpośrednio.
    """
    direct = [(order, unit) for order, unit in enumerate(tokens) if hierarchy.is_defined(unit)]
    done = {unit for _, unit in direct}
    linked: set[str] = set()
    rows: list[UnitItem] = []
    aorder = INDIRECT_ORDERING_START

    for order, unit in direct:
        if unit in linked:
            continue
        linked.add(unit)
        rows.append(UnitItem(unit_id=unit, item_id=item_id, ordering_of_units=order, is_direct=True))
        for ancestor in repo.indirect_ancestors(unit):
            if ancestor in done:
                continue
            done.add(ancestor)
            rows.append(UnitItem(unit_id=ancestor, item_id=item_id, ordering_of_units=aorder, is_direct=False))
            aorder += 1

    for row in rows:
        repo.create_unit_item(row)
    return rows


def ingest_record(doc: Tag, repo: Repository, hierarchy: UnitHierarchy) -> Item:
    item = extract_item(doc)
    if not item.id:
        raise RecordError("Rekord bez pola identifier.")
    repo.create_item(item)

    for author in split_authors(item.id, text_at(doc, "creator")):
        repo.create_item_author(author)

    entity_only = text_at(doc, "entityOnly")
    if entity_only is not None:
        link_units(item.id, unit_tokens(entity_only), repo, hierarchy)

    return item


def ingest_fragment(fragment: Fragment, repo: Repository, hierarchy: UnitHierarchy) -> Item:
    """ingest_record z dołączeniem surowego fragmentu do każdego błędu."""
    try:
        return ingest_record(fragment.root, repo, hierarchy)
    except RecordError as e:
        e.fragment = e.fragment or fragment.raw
        e.item_id = e.item_id or text_at(fragment.root, "identifier")
        raise
    except Exception as e:
        raise RecordError(
            f"{type(e).__name__}: {e}",
            fragment=fragment.raw,
            item_id=text_at(fragment.root, "identifier"),
        ) from e
