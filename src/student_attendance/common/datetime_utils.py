from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Union

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def to_date_key(value: DateLike) -> str:
    """Canonical attendance map key for a local calendar day."""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    return parse_iso_date(value).isoformat()


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def today_local() -> date:
    """Current local calendar day.

    Note: Wrapped so tests can patch/mocked easier. No timezone is attached;
    the host's local day boundary decides what "today" is.
    """
    return date.today()


def iter_days_back(start: date, count: int) -> Iterator[date]:
    """Yield start, start - 1 day, ... (count days in total)."""
    for offset in range(count):
        yield start - timedelta(days=offset)
