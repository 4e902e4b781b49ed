"""Application service: List Notifications use case (query)."""

from __future__ import annotations

from purposefood.application.dto import NotificationDTO
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)


class ListNotificationsHandler:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def handle(self, unread_only: bool = False) -> list[NotificationDTO]:
        notifications = self._notification_repo.list_all()
        if unread_only:
            notifications = [n for n in notifications if not n.is_read]
        return [NotificationDTO.from_domain(n) for n in notifications]
