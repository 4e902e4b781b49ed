"""Abstract repository for notifications (append-only sink)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from purposefood.domain.model.notification import Notification


class NotificationRepository(ABC):

    @abstractmethod
    def insert_batch(self, notifications: list[Notification]) -> None:
        """Append notifications in one operation, assigning their IDs."""

    @abstractmethod
    def list_all(self) -> list[Notification]:
        """Return every notification, oldest first."""

    @abstractmethod
    def get_by_id(self, notification_id: int) -> Notification | None:
        """Return a notification by its ID, or None if not found."""

    @abstractmethod
    def save(self, notification: Notification) -> None:
        """Persist a change to an existing notification's read state."""
