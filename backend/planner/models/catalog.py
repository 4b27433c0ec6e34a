from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class MarginMode(str, Enum):
    PERCENT = "percent"  # proportional markup on base price
    FIXED = "fixed"  # flat add-on per unit


class ServiceType(str, Enum):
    INDOOR_EVENTS = "indoor_events"
    CLOUD_KITCHEN = "cloud_kitchen"


class CatalogItem(BaseModel):
    """
    A catalog item as supplied by the catalog provider.

    Read-only inside the planner: the core never writes back to it, so the
    model is frozen and entries can hold it as a snapshot.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    base_price: Decimal
    margin_mode: MarginMode = MarginMode.PERCENT
    margin_value: Optional[Decimal] = None
    serving_capacity: Optional[int] = None  # persons served by one unit
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    service_type: Optional[ServiceType] = None
    is_vegetarian: bool = False
    is_available: bool = True

    @field_validator("margin_mode", mode="before")
    @classmethod
    def _default_margin_mode(cls, value):
        # Catalog rows without a margin type are priced as percent markup
        return MarginMode.PERCENT if value in (None, "") else value

    def has_serving_capacity(self) -> bool:
        """True when the item can take part in guest-count quantity planning."""
        return bool(self.serving_capacity) and self.serving_capacity > 0
