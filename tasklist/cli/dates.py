"""Due date parsing and display helpers."""

import calendar
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from tasklist.tasks.models import utc_now

DEFAULT_DATE_FORMAT = "%b %d, %Y"

_RELATIVE_DAYS = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


def parse_due_date(text: str, base: Optional[datetime] = None) -> datetime:
    """Parse user input into an aware due date.

    Accepts ``YYYY-MM-DD`` (keeps the time of day of ``base``, like a date
    picker bound to an existing value), full ISO-8601 timestamps, the words
    today/tomorrow/yesterday and ``+N``/``-N`` day offsets.

    Raises:
        ValueError: if the text is not a recognised date
    """
    if base is None:
        base = utc_now()
    value = text.strip().lower()
    if not value:
        raise ValueError("Empty date")

    try:
        if value in _RELATIVE_DAYS:
            return base + timedelta(days=_RELATIVE_DAYS[value])

        if value[0] in "+-" and value[1:].isdigit():
            return base + timedelta(days=int(value))

        if len(value) == 10:
            day = datetime.strptime(value, "%Y-%m-%d")
            # Offset is resolved for the chosen day, not the base day
            local = datetime.combine(day.date(), base.astimezone().time()).astimezone()
            return local.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Date out of range: {text}") from e

    parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_due_date(value: datetime, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a due date in local time."""
    return value.astimezone().strftime(fmt)


def month_weeks(value: datetime) -> List[List[int]]:
    """Weeks of the month containing ``value`` (0 for padding days)."""
    local = value.astimezone()
    return calendar.Calendar(firstweekday=0).monthdayscalendar(local.year, local.month)
