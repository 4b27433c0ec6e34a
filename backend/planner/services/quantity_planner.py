"""
Quantity suggestion engine.

Responsibility: given a guest count and an item's serving capacity (persons
served by one unit), suggest how many units to buy, and report whether a
chosen unit count covers every guest.

Design:
- Ceiling division, so the suggestion is the smallest purchase that serves
  everyone. Under-provisioning is never suggested.
- Items without a serving capacity plan as if one unit served one person.
  The item itself is never changed.
- Coverage is advisory only. The planner may accept fewer units than
  suggested; callers show a warning, nothing here refuses.
"""

from typing import Iterable, Optional

from ..models.catalog import CatalogItem
from ..models.selection import Coverage, QuantitySuggestion


def clamp_guest_count(guest_count: Optional[int]) -> int:
    """Guest counts below 1 (or missing) are treated as 1."""
    if guest_count is None or guest_count < 1:
        return 1
    return int(guest_count)


def effective_capacity(serving_capacity: Optional[int]) -> int:
    """The capacity used for planning: the declared one if positive, else 1."""
    if serving_capacity is None or serving_capacity < 1:
        return 1
    return int(serving_capacity)


def suggest_quantity(guest_count: Optional[int], serving_capacity: Optional[int]) -> int:
    """
    Calculate the minimum number of units that serves every guest.

    Args:
        guest_count: Number of guests (clamped to at least 1)
        serving_capacity: Persons served by one unit (None/0 plans as 1)

    Returns:
        ceil(guest_count / capacity), never less than 1
    """
    guests = clamp_guest_count(guest_count)
    capacity = effective_capacity(serving_capacity)
    # Integer ceiling division; avoids float rounding on large counts
    return max(1, -(-guests // capacity))


def coverage(
    unit_count: int,
    serving_capacity: Optional[int],
    guest_count: Optional[int],
) -> Coverage:
    actual_servings = unit_count * effective_capacity(serving_capacity)
    return Coverage(
        actual_servings=actual_servings,
        meets_guest_count=actual_servings >= clamp_guest_count(guest_count),
    )


def suggest_for_item(item: CatalogItem, guest_count: Optional[int]) -> QuantitySuggestion:
    """
    Build the suggestion shown for a single item.

    Returns:
        QuantitySuggestion with the suggested unit count and the coverage that
        count achieves at this guest count
    """
    guests = clamp_guest_count(guest_count)
    suggested = suggest_quantity(guests, item.serving_capacity)
    return QuantitySuggestion(
        item_id=item.id,
        name=item.name,
        guest_count=guests,
        serving_capacity=item.serving_capacity,
        suggested_quantity=suggested,
        coverage=coverage(suggested, item.serving_capacity, guests),
    )


def suggest_for_items(
    items: Iterable[CatalogItem],
    guest_count: Optional[int],
) -> list[QuantitySuggestion]:
    """
    Suggest quantities for every item in a catalog snapshot.

    Args:
        items: Catalog items, in display order
        guest_count: Number of guests

    Returns:
        List of QuantitySuggestion, one per item, order preserved
    """
    return [suggest_for_item(item, guest_count) for item in items]
