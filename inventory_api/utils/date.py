from datetime import date, datetime, timedelta, timezone
from typing import Union

from inventory_api.config import settings

DATE_FORMAT = "%Y-%m-%d"


def current_timestamp() -> datetime:
    """Current time in the shop's local offset, stored without tzinfo."""
    tz = timezone(timedelta(hours=settings.TIMEZONE_OFFSET_HOURS))
    return datetime.now(tz).replace(tzinfo=None)


def parse_date(value: Union[str, date]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("La fecha debe tener el formato AAAA-MM-DD.")
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValueError("La fecha debe tener el formato AAAA-MM-DD.")


def format_date(value: Union[date, datetime]) -> str:
    return value.strftime(DATE_FORMAT)
