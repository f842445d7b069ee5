"""
data_model/units.py — jednostki organizacyjne i relacja domknięcia hierarchii.

Unit odpowiada jednemu węzłowi <div> z dokumentu hierarchii (allStruct);
ClosureEdge to jeden wiersz tabeli unit_hier (przodek → potomek).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

# Identyfikator syntetycznego korzenia hierarchii.
ROOT_UNIT_ID = "root"

# Mapa atrybutów jednostki (serializowana do JSON).
UnitAttrs: TypeAlias = dict[str, Any]


@dataclass(slots=True, frozen=True)
class Unit:
    """
    Jednostka organizacyjna (kampus, wydział, seria, czasopismo…).

    - id:        unikalny identyfikator, np. "ucla_history"
    - name:      etykieta wyświetlana (atrybut label)
    - type:      znacznik typu, np. "campus", "series", "root"
    - is_active: False gdy directSubmit="moribund"
    - attrs:     opcjonalne flagi (directSubmit, hide); None dla korzenia
    """
    id: str
    name: str | None
    type: str | None
    is_active: bool = True
    attrs: UnitAttrs | None = field(default=None, compare=False)


@dataclass(slots=True, frozen=True)
class ClosureEdge:
    """
    Krawędź domknięcia: ancestor_unit jest przodkiem unit_id.

    ordering ma znaczenie tylko dla krawędzi bezpośrednich (pozycja wśród
    rodzeństwa, od 0); krawędzie pośrednie mają ordering=None.
    """
    ancestor_unit: str
    unit_id: str
    is_direct: bool
    ordering: int | None = None
