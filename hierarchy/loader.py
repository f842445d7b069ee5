"""
hierarchy/loader.py — wczytywanie dokumentu hierarchii (allStruct).

Dokument ma postać:

    <allStruct>
      <div id="ucla" label="UCLA" type="campus" directSubmit="enabled">
        <div id="ucla_history" label="History" type="oru">
          <ref ref="ucla_history_series"/>
        </div>
      </div>
      ...
    </allStruct>

- <allStruct>  → syntetyczna jednostka "root"
- <div>        → nowa jednostka (Unit)
- <ref>        → wskazanie na jednostkę zdefiniowaną gdzie indziej; nie tworzy
                 jednostki, ale uczestniczy w powiązaniach rodzic–dziecko

Publiczne API:
  parse_hierarchy(source)          -> Tag (korzeń dokumentu)
  load_units(root, create_unit)    -> UnitHierarchy
"""

from __future__ import annotations

import pathlib
from typing import Callable, IO

from bs4 import BeautifulSoup, Tag

from data_model import ROOT_UNIT_ID, HierarchyError, Unit

from .types import UnitHierarchy

ROOT_TAG = "allStruct"
UNIT_TAG = "div"
REF_TAG  = "ref"

ROOT_NAME = "eScholarship"
ROOT_TYPE = "root"

# Wartość directSubmit oznaczająca jednostkę wygaszoną (is_active=False).
MORIBUND = "moribund"

# Opcjonalne flagi <div> przenoszone do Unit.attrs.
_ATTR_FLAGS = ("directSubmit", "hide")


def parse_hierarchy(source: str | pathlib.Path | IO) -> Tag:
    """Parsuje dokument allStruct i zwraca jego element główny."""
    if isinstance(source, (str, pathlib.Path)):
        with open(source, "rb") as f:
            soup = BeautifulSoup(f, "lxml-xml")
    else:
        soup = BeautifulSoup(source, "lxml-xml")

    root = soup.find(True)
    if root is None:
        raise HierarchyError("Pusty dokument hierarchii.")
    return root


def _unit_id(el: Tag) -> str | None:
    if el.name == ROOT_TAG:
        return ROOT_UNIT_ID
    return el.get("id") or el.get("ref")


def _unit_from_div(el: Tag, unit_id: str) -> Unit:
    attrs = {name: el[name] for name in _ATTR_FLAGS if el.get(name)}
    return Unit(
        id=unit_id,
        name=el.get("label"),
        type=el.get("type"),
        is_active=el.get("directSubmit") != MORIBUND,
        attrs=attrs,
    )


def root_unit() -> Unit:
    return Unit(id=ROOT_UNIT_ID, name=ROOT_NAME, type=ROOT_TYPE, is_active=True, attrs=None)


def load_units(root: Tag, create_unit: Callable[[Unit], None]) -> UnitHierarchy:
    """
    Przechodzi drzewo allStruct w głąb (preorder) i dla każdego węzła:
      - zleca utworzenie jednostki (korzeń i <div>; <ref> nie tworzy jednostki),
      - zapisuje powiązania rodzic → dziecko i dziecko → rodzic.

    Args:
        root:        element główny dokumentu (zwykle <allStruct>)
        create_unit: funkcja zapisująca jednostkę (np. repo.create_unit)

    Returns:
        UnitHierarchy z mapami sąsiedztwa i zbiorem zdefiniowanych jednostek.

    Raises:
        HierarchyError: węzeł z dziećmi bez identyfikatora albo dziecko bez id/ref.
    """
    hier = UnitHierarchy()
    stack: list[Tag] = [root]

    while stack:
        el = stack.pop()
        unit_id = _unit_id(el)

        if el.name == ROOT_TAG:
            create_unit(root_unit())
        elif el.name == UNIT_TAG:
            if not unit_id:
                raise HierarchyError("Węzeł <div> bez identyfikatora.", element=str(el)[:200])
            create_unit(_unit_from_div(el, unit_id))
            hier.defined.add(unit_id)

        children = [c for c in el.find_all(True, recursive=False) if c.name != ROOT_TAG]
        if children and not unit_id:
            raise HierarchyError("Węzeł z dziećmi bez identyfikatora.", element=str(el)[:200])

        for child in children:
            child_id = child.get("id") or child.get("ref")
            if not child_id:
                raise HierarchyError(
                    f"Węzeł <{child.name}> bez id/ref pod '{unit_id}'.",
                    element=str(child)[:200],
                )
            hier.link(unit_id, child_id)

        # odwrócona kolejność → dzieci zdejmowane ze stosu w kolejności dokumentu
        stack.extend(reversed(children))

    return hier

