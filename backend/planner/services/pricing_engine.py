"""
Ledger pricing.

Every figure is recomputed from the ledger on each call; nothing is cached.
Ledgers are bounded by catalog size so this is a single cheap pass.
"""

from decimal import Decimal

from ..models.catalog import CatalogItem
from ..models.selection import LedgerLine, LedgerSummary, SelectionEntry
from .margin_calculator import customer_price_for
from .quantity_planner import clamp_guest_count
from .selection_ledger import SelectionLedger


def line_cost(entry: SelectionEntry) -> Decimal:
    return entry.unit_customer_price * entry.quantity


def total(ledger: SelectionLedger) -> Decimal:
    return sum((line_cost(entry) for entry in ledger), Decimal("0"))


def item_count(ledger: SelectionLedger) -> int:
    """Distinct items selected, not the sum of their quantities."""
    return len(ledger)


def total_units(ledger: SelectionLedger) -> int:
    return sum(entry.quantity for entry in ledger)


def suggestion_cost(item: CatalogItem, quantity: int) -> Decimal:
    """Preview cost of `quantity` units before the item is added to the ledger."""
    return customer_price_for(item) * quantity


def ledger_lines(ledger: SelectionLedger) -> list[LedgerLine]:
    return [
        LedgerLine(
            item_id=entry.item_id,
            name=entry.item.name,
            quantity=entry.quantity,
            unit_customer_price=entry.unit_customer_price,
            line_cost=line_cost(entry),
        )
        for entry in ledger
    ]


def summarize(ledger: SelectionLedger, guest_count: int) -> LedgerSummary:
    """
    Build the selection panel payload.

    Args:
        ledger: The session's ledger
        guest_count: Current guest count (clamped to at least 1)

    Returns:
        LedgerSummary whose total is the exact sum of its line costs
    """
    lines = ledger_lines(ledger)
    return LedgerSummary(
        guest_count=clamp_guest_count(guest_count),
        lines=lines,
        item_count=len(lines),
        total_units=sum(line.quantity for line in lines),
        total=sum((line.line_cost for line in lines), Decimal("0")),
    )
