"""Domain service: persist notifications raised by a stock or catalog change.

Shared by every "mutate then notify" path.  A failed insert is logged
and reported through the return value; it never undoes the mutation
that raised the notifications.
"""

from __future__ import annotations

import logging

from purposefood.domain.exceptions import RepositoryError
from purposefood.domain.model.notification import Notification
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)

logger = logging.getLogger(__name__)


class NotificationPublisher:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def publish(self, notifications: list[Notification]) -> bool:
        """Insert *notifications* as one batch.  Returns False on failure."""
        if not notifications:
            return True
        try:
            self._notification_repo.insert_batch(notifications)
        except RepositoryError as exc:
            logger.error(
                "Could not store %d notification(s): %s", len(notifications), exc
            )
            return False
        logger.info("Stored %d notification(s)", len(notifications))
        return True
