import re
from datetime import datetime
from typing import Optional

from fabrik.core.errors import MalformedDate

# Layout of dates on the menu page
DATE_LAYOUT = "%d.%m.%Y"
_DATE_SHAPE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")

# Row tokens of the weekly table, Monday=0. Friday's row is tagged "last"
# instead of "8" in the source markup.
ROW_TOKENS = {
    0: "0",
    1: "2",
    2: "4",
    3: "6",
    4: "last",
}

def parse_date(raw: str) -> datetime:
    """
    Parse a DD.MM.YYYY string into a naive local-midnight datetime.
    Examples: '05.06.2024' -> 2024-06-05 00:00, '5.6.2024' -> MalformedDate
    """
    if raw is None or not _DATE_SHAPE.fullmatch(raw):
        raise MalformedDate(f"not a DD.MM.YYYY date: {raw!r}")
    try:
        return datetime.strptime(raw, DATE_LAYOUT)
    except ValueError as e:
        raise MalformedDate(f"impossible date {raw!r}: {e}") from e

def row_token(weekday: int) -> Optional[str]:
    """Row selector for a weekday index (Monday=0), None on weekends"""
    return ROW_TOKENS.get(weekday)

def start_of_day(now: datetime) -> datetime:
    """Truncate to local midnight of the same calendar day"""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)

def is_weekend(now: datetime) -> bool:
    return now.weekday() >= 5
