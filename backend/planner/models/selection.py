from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from .catalog import CatalogItem


class Coverage(BaseModel):
    """Advisory result: do the chosen units serve every guest?"""

    actual_servings: int
    meets_guest_count: bool


class QuantitySuggestion(BaseModel):
    """What the suggestion dialog shows for one item at one guest count."""

    item_id: str
    name: str
    guest_count: int
    serving_capacity: Optional[int] = None
    suggested_quantity: int
    coverage: Coverage


class SelectionEntry(BaseModel):
    """
    One chosen item in the selection ledger.

    unit_customer_price is locked in when the entry is added; guest-count
    recomputation only ever touches quantity.
    """

    item_id: str
    item: CatalogItem
    quantity: int = Field(..., ge=1)
    unit_customer_price: Decimal


class LedgerLine(BaseModel):
    item_id: str
    name: str
    quantity: int
    unit_customer_price: Decimal
    line_cost: Decimal


class LedgerSummary(BaseModel):
    """Render payload for the selection panel: lines plus totals."""

    guest_count: int
    lines: List[LedgerLine] = Field(default_factory=list)
    item_count: int = 0  # distinct items, not units
    total_units: int = 0
    total: Decimal = Decimal("0")


class CartLine(BaseModel):
    """A ledger entry exported into the externally owned cart/order."""

    item_id: str
    name: str
    unit_customer_price: Decimal
    quantity: int
    category_label: str
