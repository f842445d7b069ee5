"""
esconv/phases.py — dwie fazy konwersji, każda w osobnej transakcji.

  convert_units  allStruct → unit + unit_hier (wczytanie, potem domknięcie)
  convert_items  zrzut indeksu → item + item_author + unit_item

Faza items wymaga kompletnej tabeli unit_hier, więc uruchamia się dopiero
po udanym convert_units. Błąd w fazie wycofuje całą fazę i wraca jako
PhaseResult(ok=False, error=...) — o przerwaniu programu decyduje wywołujący.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from bs4 import Tag

from data_model import ConversionError
from hierarchy import UnitHierarchy, build_closure, load_units
from records import Fragment, ingest_fragment
from store import Repository

DEFAULT_PROGRESS_EVERY = 100


@dataclass(slots=True)
class PhaseResult:
    """
    Wynik fazy konwersji.

    - ok:        True gdy faza została zatwierdzona
    - count:     liczba jednostek (faza units) albo rekordów (faza items)
    - edges:     liczba krawędzi domknięcia (tylko faza units)
    - elapsed:   czas trwania fazy w sekundach
    - error:     błąd, który przerwał fazę (None gdy ok)
    - hierarchy: kontekst hierarchii dla fazy items (tylko faza units)
    """
    ok: bool
    count: int = 0
    edges: int = 0
    elapsed: float = 0.0
    error: ConversionError | None = None
    hierarchy: UnitHierarchy | None = None


def _as_conversion_error(e: Exception) -> ConversionError:
    if isinstance(e, ConversionError):
        return e
    err = ConversionError(f"{type(e).__name__}: {e}")
    err.__cause__ = e
    return err


def convert_units(repo: Repository, root: Tag) -> PhaseResult:
    """Wczytuje hierarchię i buduje domknięcie — jedna transakcja."""
    start = time.monotonic()
    n_units = n_edges = 0

    def create_unit(unit) -> None:
        nonlocal n_units
        repo.create_unit(unit)
        n_units += 1

    try:
        with repo.transaction():
            hier = load_units(root, create_unit)
            for edge in build_closure(hier.children):
                repo.create_closure_edge(edge)
                n_edges += 1
    except Exception as e:
        return PhaseResult(ok=False, elapsed=time.monotonic() - start, error=_as_conversion_error(e))

    return PhaseResult(
        ok=True,
        count=n_units,
        edges=n_edges,
        elapsed=time.monotonic() - start,
        hierarchy=hier,
    )


def convert_items(
    repo:           Repository,
    records:        Iterable[Fragment],
    hierarchy:      UnitHierarchy,
    on_progress:    Callable[[int], None] | None = None,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
    limit:          int | None = None,
) -> PhaseResult:
    """
    Zapisuje rekordy po kolei — jedna transakcja na cały strumień.

    Pierwszy błędny rekord przerywa fazę; RecordError w wyniku zawiera
    surowy fragment XML. `count` w wyniku nieudanym to liczba rekordów
    przetworzonych przed błędem (wycofanych razem z resztą).
    """
    start = time.monotonic()
    n_done = 0

    try:
        with repo.transaction():
            for fragment in records:
                if limit is not None and n_done >= limit:
                    break
                ingest_fragment(fragment, repo, hierarchy)
                n_done += 1
                if on_progress and progress_every > 0 and n_done % progress_every == 0:
                    on_progress(n_done)
    except Exception as e:
        return PhaseResult(
            ok=False,
            count=n_done,
            elapsed=time.monotonic() - start,
            error=_as_conversion_error(e),
        )

    return PhaseResult(ok=True, count=n_done, elapsed=time.monotonic() - start)
