"""
data_model — struktury danych konwertera eScholarship.

Użycie:
  from data_model import Unit, ClosureEdge, Item, ItemAuthor, UnitItem

Moduły:
  units  — Unit, ClosureEdge, ROOT_UNIT_ID
  items  — Item, ItemAuthor, UnitItem, SENTINEL_DATE, DEFAULT_STATUS, DEFAULT_RIGHTS
  errors — ConversionError, HierarchyError, RecordError

Mapowanie na schemat (db/schema.sql):
  Unit        → unit
  ClosureEdge → unit_hier
  Item        → item
  ItemAuthor  → item_author
  UnitItem    → unit_item
"""

from .units import (
    ROOT_UNIT_ID,
    UnitAttrs,
    Unit,
    ClosureEdge,
)
from .items import (
    SENTINEL_DATE,
    DEFAULT_STATUS,
    DEFAULT_RIGHTS,
    Item,
    ItemAuthor,
    UnitItem,
)
from .errors import (
    ConversionError,
    HierarchyError,
    RecordError,
)

__all__ = [
    # units
    "ROOT_UNIT_ID",
    "UnitAttrs",
    "Unit",
    "ClosureEdge",
    # items
    "SENTINEL_DATE",
    "DEFAULT_STATUS",
    "DEFAULT_RIGHTS",
    "Item",
    "ItemAuthor",
    "UnitItem",
    # errors
    "ConversionError",
    "HierarchyError",
    "RecordError",
]
