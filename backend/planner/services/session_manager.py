import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..config import PlannerSettings, load_settings
from ..errors import SessionClosedError
from ..models.catalog import CatalogItem, ServiceType
from ..models.selection import CartLine, LedgerSummary, QuantitySuggestion, SelectionEntry
from . import pricing_engine
from .quantity_planner import clamp_guest_count, suggest_for_item
from .selection_ledger import SelectionLedger

logger = logging.getLogger(__name__)


class SessionState(str):
    """String constants for a planning session's lifecycle."""

    OPEN = "open"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class PlanningSession:
    """
    One planner's guest count and selection ledger, from the moment the
    selection dialog/step opens until it is committed or cancelled.

    Nothing leaves the session until commit() is called; cancel() simply
    drops the ledger.
    """

    def __init__(
        self,
        session_id: str,
        service_type: Optional[ServiceType] = None,
        guest_count: Optional[int] = None,
        settings: Optional[PlannerSettings] = None,
    ):
        self.settings = settings or load_settings()
        self.session_id = session_id
        self.service_type = ServiceType(service_type) if service_type else None
        self.created_at = datetime.now()
        self.last_updated = datetime.now()
        self.state = SessionState.OPEN
        self.guest_count = clamp_guest_count(
            guest_count if guest_count is not None else self.settings.default_guest_count
        )
        self.ledger = SelectionLedger()
        logger.info(
            "Planning session %s opened (service=%s, guests=%d)",
            session_id,
            self.service_type.value if self.service_type else None,
            self.guest_count,
        )

    def _ensure_open(self) -> None:
        if self.state != SessionState.OPEN:
            raise SessionClosedError(self.session_id, self.state)

    def _touch(self) -> None:
        self.last_updated = datetime.now()

    # ------------------------------------------------------------------
    # Guest count
    # ------------------------------------------------------------------

    def set_guest_count(self, guest_count: Optional[int]) -> int:
        """Store the new guest count and recompute every plannable entry."""
        self._ensure_open()
        self.guest_count = clamp_guest_count(guest_count)
        logger.info("Session %s guest count set to %d", self.session_id, self.guest_count)
        self.ledger.recompute_for_guest_count(self.guest_count)
        self._touch()
        return self.guest_count

    # ------------------------------------------------------------------
    # Suggestion flow
    # ------------------------------------------------------------------

    def suggest(self, item: CatalogItem) -> QuantitySuggestion:
        return suggest_for_item(item, self.guest_count)

    def suggestion_cost(self, item: CatalogItem, quantity: int) -> Decimal:
        return pricing_engine.suggestion_cost(item, quantity)

    def accept_suggestion(self, item: CatalogItem, quantity: int) -> SelectionEntry:
        """Record the quantity the planner accepted in the suggestion dialog."""
        self._ensure_open()
        entry = self.ledger.add_or_replace(item, quantity)
        self._touch()
        return entry

    def add_suggested(self, item: CatalogItem) -> SelectionEntry:
        """Add an item at its suggested quantity for the current guest count."""
        return self.accept_suggestion(item, self.suggest(item).suggested_quantity)

    # ------------------------------------------------------------------
    # Manual edits
    # ------------------------------------------------------------------

    def add_one(self, item: CatalogItem) -> SelectionEntry:
        self._ensure_open()
        entry = self.ledger.increment_or_add(item)
        self._touch()
        return entry

    def remove_one(self, item_id: str) -> None:
        self._ensure_open()
        self.ledger.decrement_or_remove(item_id)
        self._touch()

    def adjust(self, item_id: str, delta: int) -> None:
        self._ensure_open()
        self.ledger.adjust(item_id, delta)
        self._touch()

    def set_quantity(self, item_id: str, quantity: int) -> None:
        self._ensure_open()
        self.ledger.set_quantity(item_id, quantity)
        self._touch()

    def remove(self, item_id: str) -> None:
        self._ensure_open()
        self.ledger.remove(item_id)
        self._touch()

    # ------------------------------------------------------------------
    # Totals, commit, cancel
    # ------------------------------------------------------------------

    def summary(self) -> LedgerSummary:
        return pricing_engine.summarize(self.ledger, self.guest_count)

    def commit(self) -> list[CartLine]:
        """
        Export the ledger into cart lines and close the session.

        The returned lines are the only thing that leaves the session; the
        ledger is cleared afterwards.
        """
        self._ensure_open()
        lines = self.ledger.export_cart(self.settings.default_category_label)
        self.ledger.clear()
        self.state = SessionState.COMMITTED
        self._touch()
        logger.info(
            "Session %s committed %d items (%d units)",
            self.session_id,
            len(lines),
            sum(line.quantity for line in lines),
        )
        return lines

    def cancel(self) -> None:
        """Discard the ledger without exporting anything. Safe to call twice."""
        if self.state == SessionState.CANCELLED:
            return
        self._ensure_open()
        discarded = len(self.ledger)
        self.ledger.clear()
        self.state = SessionState.CANCELLED
        self._touch()
        logger.info("Session %s cancelled, %d entries discarded", self.session_id, discarded)

    def to_dict(self):
        """Convert session to dictionary for serialization"""
        summary = self.summary()
        return {
            "session_id": self.session_id,
            "service_type": self.service_type.value if self.service_type else None,
            "state": self.state,
            "created_at": self.created_at.isoformat(),
            "last_updated": self.last_updated.isoformat(),
            "guest_count": self.guest_count,
            "ledger_version": self.ledger.version,
            "summary": summary.model_dump(mode="json"),
        }
