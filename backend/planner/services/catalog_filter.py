from typing import Iterable, Optional

from ..models.catalog import CatalogItem, ServiceType

ALL_CATEGORIES = "all"


def filter_items(
    items: Iterable[CatalogItem],
    search_query: str = "",
    category_id: Optional[str] = None,
    service_type: Optional[ServiceType] = None,
    available_only: bool = True,
    plannable_only: bool = False,
) -> list[CatalogItem]:
    """
    Narrow a catalog snapshot to what the planner is browsing.

    Args:
        items: Catalog snapshot, in display order
        search_query: Case-insensitive substring of the item name; blank matches all
        category_id: Category to keep; None or "all" keeps every category
        service_type: Keep only items for this service; None keeps all
        available_only: Drop items flagged unavailable
        plannable_only: Keep only items with a serving capacity (the calculator
            screen cannot plan anything else)

    Returns:
        Matching items, original order preserved
    """
    query = (search_query or "").strip().lower()
    result = []
    for item in items:
        if available_only and not item.is_available:
            continue
        if plannable_only and not item.has_serving_capacity():
            continue
        if service_type is not None and item.service_type != service_type:
            continue
        if category_id not in (None, ALL_CATEGORIES) and item.category_id != category_id:
            continue
        if query and query not in item.name.lower():
            continue
        result.append(item)
    return result
