"""Display formatting for currency, dates, phone numbers and statuses."""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class DateFormat(Enum):
    """Output formats accepted by ``format_date``."""
    DISPLAY_DATE = "display_date"
    DISPLAY_DATETIME = "display_datetime"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"


def format_currency(amount: Any, symbol: str = "R") -> str:
    """Format an amount in Rand, e.g. ``R 1,250.00``.

    Missing or non-numeric amounts render as ``R 0.00``.
    """
    try:
        value = float(amount)
    except (TypeError, ValueError):
        value = 0.0
    return f"{symbol} {value:,.2f}"


def _to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: Any, fmt: DateFormat = DateFormat.DISPLAY_DATE) -> str:
    """Format a datetime or ISO string for display."""
    if not value:
        return "Not set"
    moment = _to_datetime(value)
    if moment is None:
        return "Invalid date"

    if fmt == DateFormat.DISPLAY_DATE:
        return f"{moment:%b} {moment.day}, {moment.year}"
    if fmt == DateFormat.DISPLAY_DATETIME:
        hour = moment.hour % 12 or 12
        meridiem = "AM" if moment.hour < 12 else "PM"
        return f"{moment:%b} {moment.day}, {moment.year}, {hour}:{moment:%M} {meridiem}"
    if fmt == DateFormat.DATE:
        return moment.strftime("%Y-%m-%d")
    if fmt == DateFormat.TIME:
        return moment.strftime("%H:%M")
    return moment.strftime("%Y-%m-%dT%H:%M")


def format_relative_time(value: Any, now: datetime | None = None) -> str:
    """Describe how long ago something happened, e.g. ``3 hours ago``."""
    if not value:
        return "Unknown"
    moment = _to_datetime(value)
    if moment is None:
        return "Invalid date"
    if now is None:
        now = datetime.now(timezone.utc) if moment.tzinfo else datetime.now()
    seconds = int((now - moment).total_seconds())

    if seconds < 60:
        return "Just now"
    for unit, size, limit in (("minute", 60, 3600), ("hour", 3600, 86400), ("day", 86400, 604800)):
        if seconds < limit:
            count = seconds // size
            return f"{count} {unit}{'s' if count != 1 else ''} ago"
    return format_date(moment)


def format_phone_number(phone: str | None) -> str:
    """Format South African numbers; anything else is returned unchanged."""
    if not phone:
        return ""
    digits = re.sub(r"\D", "", phone)
    if digits.startswith("27"):
        local = digits[2:]
        if len(local) == 9:
            return f"+27 {local[:2]} {local[2:5]} {local[5:]}"
    elif digits.startswith("0") and len(digits) == 10:
        return f"{digits[:3]} {digits[3:6]} {digits[6:]}"
    return phone


def format_status_label(status: str | Enum | None) -> str:
    """Turn ``IN_PROGRESS`` into ``In Progress``."""
    if status is None:
        return "Unknown"
    raw = status.value if isinstance(status, Enum) else str(status)
    return raw.replace("_", " ").replace("-", " ").title()
