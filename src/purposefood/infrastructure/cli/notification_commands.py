"""CLI commands for the notification center."""

from __future__ import annotations

import click

from purposefood.application.list_notifications import ListNotificationsHandler
from purposefood.application.mark_notification_read import MarkNotificationReadHandler
from purposefood.domain.exceptions import DomainException
from purposefood.infrastructure.bootstrap import notification_repository
from purposefood.infrastructure.config import Settings


@click.command("list")
@click.option("--unread", is_flag=True, help="Only unread notifications.")
@click.pass_obj
def notification_list(settings: Settings, unread: bool) -> None:
    """List notifications, oldest first."""
    handler = ListNotificationsHandler(notification_repo=notification_repository(settings))
    try:
        notifications = handler.handle(unread_only=unread)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not notifications:
        click.echo("No notifications.")
        return

    for n in notifications:
        marker = " " if n.is_read else "*"
        click.echo(f"{marker} #{n.id:<4} {n.created_at}  [{n.type}] {n.title}: {n.message}")


@click.command("read")
@click.option("--id", "notification_id", required=True, type=int, help="Notification ID.")
@click.pass_obj
def notification_read(settings: Settings, notification_id: int) -> None:
    """Mark a notification as read."""
    handler = MarkNotificationReadHandler(notification_repo=notification_repository(settings))
    try:
        handler.handle(notification_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Notification #{notification_id} marked as read")
