"""
Selection ledger: the planner's in-progress choices for one session.

Rules:
- One entry per item id. Adding an item that is already present overwrites
  or increments it, never duplicates it.
- No entry is ever stored with a quantity below 1. Paths that would go
  lower either clamp (adjust) or delete the entry (decrement, set_quantity).
- The unit customer price is computed once, when the entry is (re)added.
  Guest-count recomputation changes quantities only.
- Operations on an item id that is not in the ledger do nothing.

The ledger mutates in place and is owned by a single session. `version`
increases whenever the contents actually change so an observer can tell a
stale render from a fresh one without diffing entries.
"""

import logging
from typing import Iterator, Optional

from ..config import DEFAULT_CATEGORY_LABEL
from ..models.catalog import CatalogItem
from ..models.selection import CartLine, SelectionEntry
from .margin_calculator import customer_price_for
from .quantity_planner import suggest_quantity

logger = logging.getLogger(__name__)


class SelectionLedger:
    def __init__(self):
        self._entries: dict[str, SelectionEntry] = {}
        self.version = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._entries

    def __iter__(self) -> Iterator[SelectionEntry]:
        return iter(list(self._entries.values()))

    def get(self, item_id: str) -> Optional[SelectionEntry]:
        return self._entries.get(item_id)

    def quantity_of(self, item_id: str) -> int:
        """Current quantity for an item, 0 if it is not selected."""
        entry = self._entries.get(item_id)
        return entry.quantity if entry else 0

    def entries(self) -> list[SelectionEntry]:
        return list(self._entries.values())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _store(self, entry: SelectionEntry) -> None:
        self._entries[entry.item_id] = entry
        self.version += 1

    def _set_entry_quantity(self, entry: SelectionEntry, quantity: int) -> None:
        if quantity == entry.quantity:
            return
        self._store(entry.model_copy(update={"quantity": quantity}))

    def add_or_replace(self, item: CatalogItem, quantity: int) -> SelectionEntry:
        """
        Insert or overwrite the entry for item.id.

        The unit price is recomputed from the snapshot passed in, so a fresh
        add picks up any price change in the catalog.
        """
        entry = SelectionEntry(
            item_id=item.id,
            item=item,
            quantity=max(1, quantity),
            unit_customer_price=customer_price_for(item),
        )
        self._store(entry)
        return entry

    def increment_or_add(self, item: CatalogItem) -> SelectionEntry:
        entry = self._entries.get(item.id)
        if entry is None:
            return self.add_or_replace(item, 1)
        self._set_entry_quantity(entry, entry.quantity + 1)
        return self._entries[item.id]

    def decrement_or_remove(self, item_id: str) -> None:
        entry = self._entries.get(item_id)
        if entry is None:
            logger.debug("decrement_or_remove: %s not in ledger, ignoring", item_id)
            return
        if entry.quantity > 1:
            self._set_entry_quantity(entry, entry.quantity - 1)
        else:
            self.remove(item_id)

    def adjust(self, item_id: str, delta: int) -> None:
        """Shift a quantity by delta, never below 1. Use remove() to drop an item."""
        entry = self._entries.get(item_id)
        if entry is None:
            logger.debug("adjust: %s not in ledger, ignoring", item_id)
            return
        self._set_entry_quantity(entry, max(1, entry.quantity + delta))

    def set_quantity(self, item_id: str, quantity: int) -> None:
        """Overwrite a quantity directly; 0 or less removes the entry."""
        entry = self._entries.get(item_id)
        if entry is None:
            logger.debug("set_quantity: %s not in ledger, ignoring", item_id)
            return
        if quantity < 1:
            self.remove(item_id)
        else:
            self._set_entry_quantity(entry, quantity)

    def remove(self, item_id: str) -> None:
        if self._entries.pop(item_id, None) is not None:
            self.version += 1

    def clear(self) -> None:
        if self._entries:
            self._entries.clear()
            self.version += 1

    def recompute_for_guest_count(self, guest_count: int) -> int:
        """
        Replace the quantity of every entry that has a serving capacity with
        the suggestion for guest_count. Entries without one are left alone.

        Manually adjusted quantities are overwritten too. Whether planners
        expect their overrides to survive a guest-count change is an open
        product question; until it is answered, the latest guest count wins.

        Returns:
            Number of entries whose quantity changed
        """
        changed = 0
        for entry in list(self._entries.values()):
            if not entry.item.has_serving_capacity():
                continue
            quantity = suggest_quantity(guest_count, entry.item.serving_capacity)
            if quantity != entry.quantity:
                self._set_entry_quantity(entry, quantity)
                changed += 1

        logger.info(
            "recompute_for_guest_count: guest_count=%s, %d of %d entries changed",
            guest_count,
            changed,
            len(self._entries),
        )
        return changed

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def export_cart(self, default_category_label: str = DEFAULT_CATEGORY_LABEL) -> list[CartLine]:
        """
        Copy entries out for the externally owned cart/order.

        The ledger is left untouched; clearing it afterwards is up to the caller.
        """
        return [
            CartLine(
                item_id=entry.item_id,
                name=entry.item.name,
                unit_customer_price=entry.unit_customer_price,
                quantity=entry.quantity,
                category_label=entry.item.category_name or default_category_label,
            )
            for entry in self._entries.values()
        ]
