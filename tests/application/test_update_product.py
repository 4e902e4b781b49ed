"""Integration tests for the UpdateProduct use case."""

import pytest

from purposefood.application.update_product import UpdateProductHandler
from purposefood.domain.exceptions import EntityNotFoundError, ValidationError
from purposefood.domain.model.notification import NotificationType
from purposefood.domain.model.product import Product
from tests.fakes import FakeNotificationRepository, FakeProductRepository


def _setup():
    product_repo = FakeProductRepository([Product(id="1", name="Brownie", stock_minimum=2)])
    notification_repo = FakeNotificationRepository()
    handler = UpdateProductHandler(product_repo, notification_repo)
    return handler, product_repo, notification_repo


class TestUpdateProduct:

    def test_updates_and_notifies(self):
        handler, product_repo, notification_repo = _setup()
        product = handler.handle("1", {"stock_minimum": "6", "is_active": "no"})

        assert product.stock_minimum == 6
        assert product.is_active is False
        (notification,) = notification_repo.list_all()
        assert notification.type is NotificationType.PRODUCT_UPDATED

    def test_invalid_value_rejected_before_write(self):
        handler, product_repo, notification_repo = _setup()
        with pytest.raises(ValidationError, match="preparation_time"):
            handler.handle("1", {"stock_minimum": "6", "preparation_time": "-2"})

        assert product_repo.get_by_id("1").stock_minimum == 2
        assert notification_repo.list_all() == []

    def test_unknown_field_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown product field"):
            handler.handle("1", {"flavour": "chocolate"})

    def test_empty_update_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Nothing to update"):
            handler.handle("1", {})

    def test_unknown_product_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("99", {"name": "Ghost"})
