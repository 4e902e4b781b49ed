"""JSON-file-backed implementation of NotificationRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from purposefood.domain.exceptions import EntityNotFoundError, RepositoryError
from purposefood.domain.model.notification import Notification, NotificationType
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)


class JsonNotificationRepository(NotificationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- NotificationRepository interface -------------------------------------

    def insert_batch(self, notifications: list[Notification]) -> None:
        records = self._load_raw()
        first_id = max((r["id"] for r in records), default=0) + 1
        ids = range(first_id, first_id + len(notifications))
        for new_id, notification in zip(ids, notifications):
            records.append({**self._to_raw(notification), "id": new_id})
        self._persist_raw(records)

        # IDs are only handed out once the batch is on disk
        for new_id, notification in zip(ids, notifications):
            notification.id = new_id

    def list_all(self) -> list[Notification]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def get_by_id(self, notification_id: int) -> Notification | None:
        for raw in self._load_raw():
            if raw["id"] == notification_id:
                return self._to_domain(raw)
        return None

    def save(self, notification: Notification) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == notification.id:
                records[i] = self._to_raw(notification)
                self._persist_raw(records)
                return
        raise EntityNotFoundError(f"Notification #{notification.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(n: Notification) -> dict:
        return {
            "id": n.id,
            "type": n.type.value,
            "title": n.title,
            "message": n.message,
            "data": n.data,
            "is_read": n.is_read,
            "created_at": n.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Notification:
        return Notification(
            id=raw["id"],
            type=NotificationType(raw["type"]),
            title=raw["title"],
            message=raw["message"],
            data=raw.get("data", {}),
            is_read=raw.get("is_read", False),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except (OSError, TypeError) as exc:
            raise RepositoryError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
