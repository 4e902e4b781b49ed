"""Unit tests for the AvailabilityChecker domain service."""

import pytest

from purposefood.domain.exceptions import RepositoryError
from purposefood.domain.model.availability import DeliveryType
from purposefood.domain.model.delivery import IMMEDIATE_DELIVERY_WINDOW
from purposefood.domain.model.order import OrderLineItem
from purposefood.domain.model.product import Product
from purposefood.domain.service.availability_checker import AvailabilityChecker
from tests.fakes import FakeProductRepository


def _checker(*products: Product, **repo_kwargs) -> AvailabilityChecker:
    return AvailabilityChecker(FakeProductRepository(list(products), **repo_kwargs))


def _lines(*pairs: tuple[str, int]) -> list[OrderLineItem]:
    return [OrderLineItem.of(pid, qty) for pid, qty in pairs]


class TestImmediate:

    def test_enough_stock_is_immediate(self):
        checker = _checker(Product(id="1", name="Brownie", stock_current=10, preparation_time=3))
        summary = checker.check(_lines(("1", 10)))

        line = summary.availability[0]
        assert line.delivery_type is DeliveryType.IMMEDIATE
        assert line.available is True
        assert line.preparation_time == 0
        assert line.stock_current == 10
        assert summary.delivery_estimate == IMMEDIATE_DELIVERY_WINDOW
        assert summary.total_production_time == 0
        assert summary.can_proceed is True

    def test_custom_immediate_window(self):
        checker = AvailabilityChecker(
            FakeProductRepository([Product(id="1", name="Brownie", stock_current=5)]),
            immediate_window="within the hour",
        )
        assert checker.check(_lines(("1", 1))).delivery_estimate == "within the hour"


class TestPartial:

    def test_some_stock_is_partial(self):
        checker = _checker(Product(id="1", name="Brownie", stock_current=3, preparation_time=1.5))
        summary = checker.check(_lines(("1", 5)))

        line = summary.availability[0]
        assert line.delivery_type is DeliveryType.PARTIAL
        assert line.immediate_quantity == 3
        assert line.production_quantity == 2
        assert line.preparation_time == 1.5
        assert summary.has_low_stock is True
        assert summary.has_out_of_stock is False
        assert summary.total_production_time == 1.5
        assert summary.delivery_estimate == "1.5h - 2.5h"


class TestProduction:

    @pytest.mark.parametrize("stock", [0, -4])
    def test_no_stock_needs_production_but_proceeds(self, stock):
        checker = _checker(Product(id="1", name="Cake", stock_current=stock, preparation_time=5))
        summary = checker.check(_lines(("1", 1)))

        line = summary.availability[0]
        assert line.delivery_type is DeliveryType.PRODUCTION
        assert line.available is True
        assert line.stock_current == 0
        assert line.immediate_quantity is None
        assert summary.has_out_of_stock is True
        assert summary.can_proceed is True
        assert summary.delivery_estimate == "5h - 9h"

    def test_longest_preparation_time_wins(self):
        checker = _checker(
            Product(id="1", name="Cake", stock_current=0, preparation_time=3),
            Product(id="2", name="Pie", stock_current=1, preparation_time=1),
        )
        summary = checker.check(_lines(("1", 1), ("2", 4)))

        assert summary.total_production_time == 3
        assert summary.delivery_estimate == "3h - 5h"


class TestUnavailable:

    def test_inactive_product_blocks_order(self):
        checker = _checker(
            Product(id="1", name="Cake", stock_current=50, preparation_time=2, is_active=False)
        )
        summary = checker.check(_lines(("1", 1)))

        line = summary.availability[0]
        assert line.available is False
        assert line.delivery_type is None
        assert line.product_name == "Cake"
        assert line.message == "Product unavailable"
        assert summary.has_out_of_stock is True
        assert summary.can_proceed is False

    def test_missing_product_blocks_order(self):
        summary = _checker().check(_lines(("404", 1)))

        line = summary.availability[0]
        assert line.available is False
        assert line.product_name == "Product not found"
        assert summary.can_proceed is False

    def test_lookup_error_does_not_abort_remaining_lines(self):
        checker = _checker(
            Product(id="1", name="Cake", stock_current=5),
            Product(id="2", name="Pie", stock_current=5),
            failing_reads={"1"},
        )
        summary = checker.check(_lines(("1", 1), ("2", 1)))

        first, second = summary.availability
        assert first.available is False
        assert "read of 1 failed" in first.error
        assert second.delivery_type is DeliveryType.IMMEDIATE
        assert summary.can_proceed is False

    def test_unreachable_store_raises(self):
        checker = _checker(Product(id="1", name="Cake"), unreachable=True)
        with pytest.raises(RepositoryError, match="unreachable"):
            checker.check(_lines(("1", 1)))


class TestSummary:

    def test_empty_order(self):
        summary = _checker().check([])
        assert summary.availability == ()
        assert summary.can_proceed is True
        assert summary.delivery_estimate == IMMEDIATE_DELIVERY_WINDOW

    def test_results_follow_input_order(self):
        checker = _checker(
            Product(id="1", name="Cake", stock_current=5),
            Product(id="2", name="Pie", stock_current=5),
        )
        summary = checker.check(_lines(("2", 1), ("1", 1)))
        assert [line.product_id for line in summary.availability] == ["2", "1"]

    def test_repeated_checks_are_identical(self):
        checker = _checker(
            Product(id="1", name="Cake", stock_current=2, preparation_time=2),
            Product(id="2", name="Pie", stock_current=0, preparation_time=4),
        )
        lines = _lines(("1", 3), ("2", 1))
        assert checker.check(lines) == checker.check(lines)

    def test_mixed_order_scenario(self):
        checker = _checker(
            Product(id="A", name="Bread", stock_current=10, stock_minimum=5, preparation_time=0),
            Product(id="B", name="Cake", stock_current=0, stock_minimum=2, preparation_time=2),
        )
        summary = checker.check(_lines(("A", 2), ("B", 3)))

        a, b = summary.availability
        assert a.delivery_type is DeliveryType.IMMEDIATE
        assert b.delivery_type is DeliveryType.PRODUCTION
        assert summary.has_out_of_stock is True
        assert summary.has_low_stock is False
        assert summary.total_production_time == 2
        assert summary.delivery_estimate == "2h - 3h"
        assert summary.can_proceed is True

    def test_check_does_not_write(self):
        repo = FakeProductRepository([Product(id="1", name="Cake", stock_current=1)])
        AvailabilityChecker(repo).check(_lines(("1", 5)))
        assert repo.stock_writes == []
        assert repo.get_by_id("1").stock_current == 1
