from .catalog import CatalogItem, MarginMode, ServiceType
from .selection import (
    CartLine,
    Coverage,
    LedgerLine,
    LedgerSummary,
    QuantitySuggestion,
    SelectionEntry,
)

__all__ = [
    "CatalogItem",
    "MarginMode",
    "ServiceType",
    "CartLine",
    "Coverage",
    "LedgerLine",
    "LedgerSummary",
    "QuantitySuggestion",
    "SelectionEntry",
]
