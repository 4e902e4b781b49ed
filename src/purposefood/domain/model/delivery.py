"""Delivery-time estimate policy shared by the availability check."""

from __future__ import annotations

IMMEDIATE_DELIVERY_WINDOW = "30-60 minutes"


def production_window(hours: float) -> tuple[float, float]:
    """Return the (earliest, latest) delivery bracket for *hours* of production.

    Up to 2h adds one hour of slack, up to 4h adds two, anything longer
    adds four.
    """
    if hours <= 2:
        return hours, hours + 1
    if hours <= 4:
        return hours, hours + 2
    return hours, hours + 4


def format_hours(hours: float) -> str:
    """Render hours without exponent notation, dropping a trailing ".0"."""
    text = f"{hours:.2f}".rstrip("0").rstrip(".")
    return f"{text}h"


def delivery_estimate(
    total_production_time: float,
    needs_production: bool,
    immediate_window: str = IMMEDIATE_DELIVERY_WINDOW,
) -> str:
    if not needs_production:
        return immediate_window
    earliest, latest = production_window(total_production_time)
    return f"{format_hours(earliest)} - {format_hours(latest)}"
