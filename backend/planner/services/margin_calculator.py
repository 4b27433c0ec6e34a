"""
Platform margin calculation.

Responsibility: turn a supplier's base price into the customer-facing price
by adding the platform margin configured on the catalog item.

Design:
- Two margin modes: percent (proportional markup) and fixed (flat add-on).
- Missing margin values count as zero and a missing mode counts as percent,
  matching how catalog rows without margin data have always been priced.
- Money stays in Decimal throughout. Floats are converted through str() so
  100.1 becomes Decimal("100.1"), not its binary approximation.
- No validation: negative prices are the catalog provider's problem and are
  passed through as given.
"""

from decimal import Decimal
from typing import Optional, Union

from ..models.catalog import CatalogItem, MarginMode

Number = Union[Decimal, int, float, str]

HUNDRED = Decimal("100")


def _to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _to_mode(margin_mode: Union[MarginMode, str, None]) -> MarginMode:
    if margin_mode in (None, ""):
        return MarginMode.PERCENT
    return MarginMode(margin_mode)


def compute_margin(
    base_price: Number,
    margin_mode: Union[MarginMode, str, None],
    margin_value: Optional[Number] = None,
) -> Decimal:
    """
    Calculate the platform margin for one unit.

    Args:
        base_price: Supplier price per unit
        margin_mode: MarginMode (or its string value); None means percent
        margin_value: Percentage or flat amount depending on mode; None means 0

    Returns:
        The margin amount as a Decimal
    """
    value = _to_decimal(margin_value)
    if _to_mode(margin_mode) is MarginMode.FIXED:
        return value
    return _to_decimal(base_price) * value / HUNDRED


def customer_price(
    base_price: Number,
    margin_mode: Union[MarginMode, str, None],
    margin_value: Optional[Number] = None,
) -> Decimal:
    """Base price plus platform margin: what the planner sees and pays per unit."""
    return _to_decimal(base_price) + compute_margin(base_price, margin_mode, margin_value)


def customer_price_for(item: CatalogItem) -> Decimal:
    return customer_price(item.base_price, item.margin_mode, item.margin_value)
