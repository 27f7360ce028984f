"""Calendar-day keys for habit tracking.

A day key is the "YYYY-MM-DD" string of the calendar day a moment falls on
in local time. Habit completions are stored as day keys, so two moments on
the same local day must map to the same key.
"""

from datetime import date, datetime, tzinfo

DAY_KEY_FORMAT = "%Y-%m-%d"


def to_local(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Express a moment as wall-clock time in the local zone.

    Args:
        moment: Datetime (timezone-aware or naive)
        tz: Target zone. None means the system local zone.

    Returns:
        Timezone-aware datetime in the target zone. Naive input is taken to
        already be wall-clock time in that zone.
    """
    if moment.tzinfo is None:
        if tz is None:
            return moment.astimezone()
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def day_key(moment: datetime | date, tz: tzinfo | None = None) -> str:
    """Return the local calendar day of a moment as "YYYY-MM-DD"."""
    if not isinstance(moment, datetime):
        return moment.strftime(DAY_KEY_FORMAT)
    return to_local(moment, tz).strftime(DAY_KEY_FORMAT)


def parse_day_key(key: str) -> date:
    """Parse a day key back into a date.

    Raises:
        ValueError: If key is not a "YYYY-MM-DD" string
    """
    return datetime.strptime(key, DAY_KEY_FORMAT).date()
