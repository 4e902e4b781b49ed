"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from purposefood.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


@pytest.fixture
def catalog(run):
    assert run("product", "add", "--name", "Brownie", "--price", "8.00",
               "--stock", "10", "--min-stock", "5").exit_code == 0
    assert run("product", "add", "--name", "Carrot Cake", "--stock", "0",
               "--min-stock", "2", "--prep-time", "2").exit_code == 0
    assert run("product", "add", "--name", "Old Pie", "--inactive").exit_code == 0


class TestProductCommands:

    def test_add_and_list(self, run, catalog):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Brownie" in result.output
        assert "R$8.00" in result.output

    def test_update_creates_notification(self, run, catalog):
        result = run("product", "update", "--id", "1", "--set", "stock_minimum=3")
        assert result.exit_code == 0
        assert "updated: stock_minimum" in result.output

        listing = run("notification", "list")
        assert "Brownie was updated: stock_minimum" in listing.output

    def test_update_rejects_bad_assignment(self, run, catalog):
        result = run("product", "update", "--id", "1", "--set", "stock_minimum")
        assert result.exit_code != 0
        assert "Expected 'field=value'" in result.output

    def test_update_rejects_invalid_value(self, run, catalog):
        result = run("product", "update", "--id", "1", "--set", "preparation_time=-1")
        assert result.exit_code == 1
        assert "cannot be negative" in result.output


class TestOrderCommands:

    def test_check_mixed_order(self, run, catalog):
        result = run("order", "check", "--items", "1:2,2:3")
        assert result.exit_code == 0
        assert "immediate" in result.output
        assert "production" in result.output
        assert "Estimated delivery: 2h - 3h" in result.output

    def test_check_inactive_product_fails(self, run, catalog):
        result = run("order", "check", "--items", "3:1")
        assert result.exit_code == 1
        assert "cannot proceed" in result.output

    def test_check_bad_items_format(self, run, catalog):
        result = run("order", "check", "--items", "1-2")
        assert result.exit_code != 0
        assert "Expected 'ProductID:Quantity'" in result.output

    def test_apply_deducts_stock_and_notifies(self, run, catalog):
        result = run("order", "apply", "--order-id", "A-1", "--items", "1:6,2:3,9:1")
        assert result.exit_code == 0
        assert "2 of 3 line(s) applied" in result.output
        assert "product 1: 10 -> 4" in result.output
        assert "product 2: 0 -> -3" in result.output

        inventory = run("inventory", "show")
        assert "low_stock" in inventory.output
        assert "out_of_stock" in inventory.output

        notifications = run("notification", "list", "--unread")
        assert "Low stock" in notifications.output
        assert "Production needed" in notifications.output

        assert run("notification", "read", "--id", "1").exit_code == 0
        unread = run("notification", "list", "--unread")
        assert "Low stock" not in unread.output

    def test_read_unknown_notification(self, run):
        result = run("notification", "read", "--id", "7")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCorruptData:

    def test_malformed_product_file_is_reported(self, run, tmp_path):
        (tmp_path / "products.json").write_text('[{"id": "1", "price": "abc"}]')
        result = run("order", "check", "--items", "1:1")
        assert result.exit_code == 1
        assert "Error: Malformed product record" in result.output
        assert "Traceback" not in result.output
