from datetime import datetime

import pytz


def _clinic_zone(tz_name: str):
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def clinic_now(tz_name: str) -> datetime:
    """Current wall-clock time in the clinic timezone, naive like the stored timestamps."""
    return datetime.now(_clinic_zone(tz_name)).replace(tzinfo=None)


def to_clinic_time(value: datetime, tz_name: str) -> datetime:
    """Convert an aware datetime into naive clinic time; naive values are taken as clinic time already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(_clinic_zone(tz_name)).replace(tzinfo=None)
