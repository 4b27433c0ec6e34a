"""
Shared fixtures for all test modules.
"""

from decimal import Decimal

import pytest

from planner.config import PlannerSettings
from planner.models.catalog import CatalogItem, MarginMode, ServiceType
from planner.services.selection_ledger import SelectionLedger
from planner.services.session_manager import PlanningSession


# ---------------------------------------------------------------------------
# Catalog fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def biryani() -> CatalogItem:
    """Serves 6 per unit, 10% platform margin on a 100 base price."""
    return CatalogItem(
        id="item-biryani",
        name="Veg Biryani Handi",
        base_price=Decimal("100"),
        margin_mode=MarginMode.PERCENT,
        margin_value=Decimal("10"),
        serving_capacity=6,
        category_id="cat-mains",
        category_name="Main Course",
        service_type=ServiceType.INDOOR_EVENTS,
        is_vegetarian=True,
    )


@pytest.fixture
def paneer_tray() -> CatalogItem:
    """Serves 12 per unit, flat 15 margin."""
    return CatalogItem(
        id="item-paneer",
        name="Paneer Tikka Tray",
        base_price=Decimal("250"),
        margin_mode=MarginMode.FIXED,
        margin_value=Decimal("15"),
        serving_capacity=12,
        category_id="cat-starters",
        category_name="Starters",
        service_type=ServiceType.INDOOR_EVENTS,
        is_vegetarian=True,
    )


@pytest.fixture
def soft_drink() -> CatalogItem:
    """No serving capacity and no category: not plannable by guest count."""
    return CatalogItem(
        id="item-cola",
        name="Cola Can",
        base_price=Decimal("40"),
        service_type=ServiceType.CLOUD_KITCHEN,
    )


@pytest.fixture
def catalog(biryani, paneer_tray, soft_drink) -> list[CatalogItem]:
    return [biryani, paneer_tray, soft_drink]


# ---------------------------------------------------------------------------
# Ledger / session fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ledger() -> SelectionLedger:
    return SelectionLedger()


@pytest.fixture
def settings() -> PlannerSettings:
    """Defaults only, independent of the environment running the tests."""
    return PlannerSettings()


@pytest.fixture
def session(settings) -> PlanningSession:
    """A fresh open session for 50 guests."""
    return PlanningSession(
        "test-session",
        service_type=ServiceType.INDOOR_EVENTS,
        guest_count=50,
        settings=settings,
    )
