"""
hierarchy — hierarchia jednostek eScholarship i jej domknięcie.

Publiczne API:
  parse_hierarchy(source)          → Tag (element <allStruct>)
  load_units(root, create_unit)    → UnitHierarchy
  build_closure(children, root)    → Iterator[ClosureEdge]
  root_unit()                      → Unit (syntetyczny korzeń)
  UnitHierarchy, Adjacency         typy danych
"""

from .closure import build_closure
from .loader  import MORIBUND, load_units, parse_hierarchy, root_unit
from .types   import Adjacency, UnitHierarchy

__all__ = [
    "build_closure",
    "MORIBUND",
    "load_units",
    "parse_hierarchy",
    "root_unit",
    "Adjacency",
    "UnitHierarchy",
]
