"""
hierarchy/closure.py — budowa tabeli domknięcia (unit_hier).

Z mapy rodzic → dzieci powstaje pełna relacja przodek → potomek:

  - krawędź bezpośrednia (is_direct=True) dla pary rodzic–dziecko, z numerem
    pozycji dziecka wśród rodzeństwa (od 0),
  - krawędź pośrednia (is_direct=False, ordering=None) dla każdej pary
    przodek–potomek odległej o więcej niż jeden poziom.

Każda para (przodek, potomek) trafia do wyniku dokładnie raz, nawet gdy
w DAG-u prowadzi do niej wiele ścieżek. Rozstrzyga kolejność odkrycia:
dla przodka u dzieci przeglądane są w kolejności dokumentu, a po każdym
dziecku c — wszyscy potomkowie c (preorder). Jeśli jednostka x jest
potomkiem wcześniejszego rodzeństwa, para (u, x) będzie pośrednia, nawet
gdy x występuje też jako bezpośrednie dziecko u (przez <ref>).

Przejście jest iteracyjne (jawny stos); cykle nie zapętlają obliczeń.

Publiczne API:
  build_closure(children, root)  -> Iterator[ClosureEdge]
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TypeAlias

from data_model import ROOT_UNIT_ID, ClosureEdge

# Klucz zbioru "done": para nieuporządkowana.
PairKey: TypeAlias = frozenset[str]


def _pair(a: str, b: str) -> PairKey:
    return frozenset((a, b))


def _ancestors_in_order(children: Mapping[str, Sequence[str]], root: str) -> list[str]:
    """Jednostki posiadające dzieci, osiągalne z root, w kolejności preorder."""
    order: list[str] = []
    seen: set[str] = set()
    stack = [root]
    while stack:
        unit = stack.pop()
        if unit in seen:
            continue
        seen.add(unit)
        kids = children.get(unit)
        if not kids:
            continue
        order.append(unit)
        stack.extend(reversed(kids))
    return order


def _descendant_edges(
    ancestor: str,
    child:    str,
    children: Mapping[str, Sequence[str]],
    done:     set[PairKey],
    expanded: set[str],
) -> Iterator[ClosureEdge]:
    """Krawędzie pośrednie od `ancestor` do wszystkich potomków `child`."""
    stack = list(reversed(children.get(child, ())))
    while stack:
        unit = stack.pop()
        if unit != ancestor and _pair(ancestor, unit) not in done:
            done.add(_pair(ancestor, unit))
            yield ClosureEdge(ancestor_unit=ancestor, unit_id=unit, is_direct=False, ordering=None)
        # każdy węzeł rozwijany raz na przodka (DAG / cykle)
        if unit in expanded:
            continue
        expanded.add(unit)
        stack.extend(reversed(children.get(unit, ())))


def _unit_edges(
    unit:     str,
    children: Mapping[str, Sequence[str]],
    done:     set[PairKey],
) -> Iterator[ClosureEdge]:
    expanded: set[str] = {unit}
    for idx, child in enumerate(children.get(unit, ())):
        if child != unit and _pair(unit, child) not in done:
            done.add(_pair(unit, child))
            yield ClosureEdge(ancestor_unit=unit, unit_id=child, is_direct=True, ordering=idx)
        if child in expanded:
            continue
        expanded.add(child)
        yield from _descendant_edges(unit, child, children, done, expanded)


def build_closure(
    children: Mapping[str, Sequence[str]],
    root:     str = ROOT_UNIT_ID,
) -> Iterator[ClosureEdge]:
    """
    Generuje krawędzie domknięcia dla wszystkich jednostek osiągalnych z root.

    Args:
        children: mapa rodzic → dzieci (np. UnitHierarchy.children)
        root:     jednostka startowa (domyślnie syntetyczny "root")

    Yields:
        ClosureEdge — najpierw krawędzie, których przodkiem jest root, potem
        kolejne jednostki w porządku preorder. Żadna para się nie powtarza,
        nie ma krawędzi zwrotnych (przodek == potomek).
    """
    done: set[PairKey] = set()
    for unit in _ancestors_in_order(children, root):
        yield from _unit_edges(unit, children, done)
