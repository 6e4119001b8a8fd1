"""Datetime utilities."""

from datetime import date, datetime


def local_today() -> date:
    """Return today's date on the server's local calendar (bookings are dated by it)."""
    return datetime.now().date()
