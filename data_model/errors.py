"""
data_model/errors.py — wyjątki konwersji.

ConversionError  — baza; każdy błąd przerywa całą fazę konwersji.
HierarchyError   — błąd strukturalny dokumentu hierarchii (allStruct).
RecordError      — błąd przetwarzania jednego rekordu; przechowuje surowy
                   fragment XML do diagnostyki.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Błąd przerywający fazę konwersji."""


class HierarchyError(ConversionError):
    def __init__(self, message: str, *, element: str | None = None) -> None:
        super().__init__(message)
        self.element = element


class RecordError(ConversionError):
    def __init__(
        self,
        message: str,
        *,
        fragment: str | None = None,
        item_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.fragment = fragment
        self.item_id = item_id

    def __str__(self) -> str:
        base = super().__str__()
        return f"[{self.item_id}] {base}" if self.item_id else base
