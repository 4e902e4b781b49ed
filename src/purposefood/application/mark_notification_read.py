"""Application service: Mark Notification Read use case."""

from __future__ import annotations

from purposefood.domain.exceptions import EntityNotFoundError
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)


class MarkNotificationReadHandler:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def handle(self, notification_id: int) -> None:
        notification = self._notification_repo.get_by_id(notification_id)
        if notification is None:
            raise EntityNotFoundError(f"Notification #{notification_id} not found")

        notification.mark_read()
        self._notification_repo.save(notification)
