# File: vasa/models/common.py

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Optional, Type, TypeVar, Union

MINUTES_PER_DAY = 24 * 60

E = TypeVar("E", bound=Enum)


def new_id() -> str:
    """Generate a fresh opaque record identifier."""
    return uuid.uuid4().hex


def parse_iso_date(value: Union[str, date, None]) -> Optional[date]:
    """Robustly parse 'YYYY-MM-DD' (or a full ISO timestamp) into a date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except ValueError:
        # Fallback for timestamps such as '2025-06-10T00:00:00Z'
        try:
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        except ValueError:
            return None


def coerce_enum(enum_cls: Type[E], value, default: Optional[E] = None) -> E:
    """Accept an enum member, its value, or its name ('Priority.HIGH' too)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            name = value.split('.')[-1].upper().replace('-', '_').replace(' ', '_')
            if name in enum_cls.__members__:
                return enum_cls[name]
    if default is not None:
        return default
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r}")


def to_minute_of_day(hour: int, minute: int = 0) -> int:
    """Convert an hour/minute pair into minutes since midnight.

    Minute values of 60 are allowed and roll into the next hour, matching the
    planner's minute picker (0, 15, 30, 45, 60).
    """
    return hour * 60 + minute


def format_clock(minute_of_day: int) -> str:
    """Render minutes since midnight as a 12-hour clock string, e.g. '9:05 AM'."""
    hour, minute = divmod(minute_of_day, 60)
    ampm = "PM" if hour % 24 >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {ampm}"
