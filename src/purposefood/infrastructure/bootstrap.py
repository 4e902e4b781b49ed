"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions and receives its
repositories explicitly.
"""

from __future__ import annotations

from purposefood.infrastructure.config import Settings
from purposefood.infrastructure.persistence.json_notification_repository import (
    JsonNotificationRepository,
)
from purposefood.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def notification_repository(settings: Settings) -> JsonNotificationRepository:
    return JsonNotificationRepository(settings.data_dir / "notifications.json")
