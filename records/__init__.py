"""
records — rekordy bibliograficzne ze zrzutu indeksu XTF.

Publiczne API:
  iter_records(path)                           → Iterator[Fragment]
  iter_fragments(lines)                        → Iterator[Fragment]
  split_fragments(lines)                       → Iterator[str]
  parse_fragment(raw)                          → Fragment
  extract_item(doc), split_authors(id, s)      ekstrakcja pól
  ingest_record(doc, repo, hierarchy)          → Item
  ingest_fragment(fragment, repo, hierarchy)   → Item
"""

from .fields    import extract_item, split_authors, text_at, unit_tokens
from .ingester  import INDIRECT_ORDERING_START, ingest_fragment, ingest_record, link_units
from .splitter  import (
    CLOSE_MARKER,
    OPEN_MARKER,
    Fragment,
    iter_fragments,
    iter_records,
    open_stream,
    parse_fragment,
    split_fragments,
)

__all__ = [
    "extract_item",
    "split_authors",
    "text_at",
    "unit_tokens",
    "INDIRECT_ORDERING_START",
    "ingest_fragment",
    "ingest_record",
    "link_units",
    "CLOSE_MARKER",
    "OPEN_MARKER",
    "Fragment",
    "iter_fragments",
    "iter_records",
    "open_stream",
    "parse_fragment",
    "split_fragments",
]
