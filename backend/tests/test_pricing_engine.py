"""
Tests for pricing_engine.py.
"""

from decimal import Decimal

from planner.models.catalog import CatalogItem, MarginMode
from planner.models.selection import SelectionEntry
from planner.services import pricing_engine
from planner.services.selection_ledger import SelectionLedger


def _flat_item(item_id: str, price) -> CatalogItem:
    # Zero fixed margin so customer price == base price
    return CatalogItem(
        id=item_id,
        name=item_id.title(),
        base_price=Decimal(str(price)),
        margin_mode=MarginMode.FIXED,
        margin_value=0,
        serving_capacity=4,
    )


def _ledger_50x2_30x3() -> SelectionLedger:
    ledger = SelectionLedger()
    ledger.add_or_replace(_flat_item("samosa", 50), 2)
    ledger.add_or_replace(_flat_item("lassi", 30), 3)
    return ledger


class TestLineCost:
    def test_price_times_quantity(self, biryani):
        entry = SelectionEntry(
            item_id=biryani.id, item=biryani, quantity=9, unit_customer_price=Decimal("110")
        )
        assert pricing_engine.line_cost(entry) == Decimal("990")


class TestTotals:
    def test_total_and_item_count(self):
        ledger = _ledger_50x2_30x3()
        assert pricing_engine.total(ledger) == Decimal("190")
        assert pricing_engine.item_count(ledger) == 2
        assert pricing_engine.total_units(ledger) == 5

    def test_empty_ledger(self):
        ledger = SelectionLedger()
        assert pricing_engine.total(ledger) == Decimal("0")
        assert pricing_engine.item_count(ledger) == 0
        assert pricing_engine.total_units(ledger) == 0

    def test_total_follows_mutations(self):
        ledger = _ledger_50x2_30x3()
        ledger.decrement_or_remove("samosa")
        assert pricing_engine.total(ledger) == Decimal("140")
        ledger.remove("lassi")
        assert pricing_engine.total(ledger) == Decimal("50")

    def test_total_independent_of_insertion_order(self):
        forward = _ledger_50x2_30x3()
        backward = SelectionLedger()
        backward.add_or_replace(_flat_item("lassi", 30), 3)
        backward.add_or_replace(_flat_item("samosa", 50), 2)
        assert pricing_engine.total(forward) == pricing_engine.total(backward)

    def test_uses_locked_price_not_current_catalog_price(self, biryani):
        ledger = SelectionLedger()
        ledger.add_or_replace(biryani, 2)
        ledger.increment_or_add(biryani.model_copy(update={"base_price": Decimal("1000")}))
        assert pricing_engine.total(ledger) == Decimal("330")  # 3 x 110


class TestLedgerLines:
    def test_lines(self):
        lines = pricing_engine.ledger_lines(_ledger_50x2_30x3())
        assert [(l.item_id, l.name, l.quantity, l.line_cost) for l in lines] == [
            ("samosa", "Samosa", 2, Decimal("100")),
            ("lassi", "Lassi", 3, Decimal("90")),
        ]


class TestSummarize:
    def test_summary_totals_match_lines(self):
        summary = pricing_engine.summarize(_ledger_50x2_30x3(), 40)
        assert summary.guest_count == 40
        assert summary.item_count == 2
        assert summary.total_units == 5
        assert summary.total == Decimal("190")
        assert summary.total == sum(line.line_cost for line in summary.lines)

    def test_guest_count_clamped(self):
        assert pricing_engine.summarize(SelectionLedger(), -1).guest_count == 1


class TestSuggestionCost:
    def test_uses_customer_price(self, biryani):
        assert pricing_engine.suggestion_cost(biryani, 9) == Decimal("990")
