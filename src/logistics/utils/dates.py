"""Date helpers for ECPay's ``YYYY/MM/DD HH:MM:SS`` wire format.

ECPay interprets every timestamp as Taiwan local time (UTC+8, no DST).
Naive datetimes are formatted as-is; aware datetimes are converted first.
"""

import time
from datetime import date, datetime, timedelta, timezone

TAIPEI = timezone(timedelta(hours=8), name="Asia/Taipei")

DATETIME_FORMAT = "%Y/%m/%d %H:%M:%S"
DATE_FORMAT = "%Y/%m/%d"


def _to_taipei(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(TAIPEI)


def format_datetime(value: datetime) -> str:
    return _to_taipei(value).strftime(DATETIME_FORMAT)


def format_date(value: date) -> str:
    if isinstance(value, datetime):
        value = _to_taipei(value)
    return value.strftime(DATE_FORMAT)


def current_datetime() -> str:
    return format_datetime(datetime.now(TAIPEI))


def current_date() -> str:
    return format_date(datetime.now(TAIPEI))


def current_timestamp() -> int:
    """Unix timestamp in whole seconds."""
    return int(time.time())


def datetime_value(value):
    """Field renderer: format datetimes, keep pre-formatted strings verbatim."""
    if isinstance(value, datetime):
        return format_datetime(value)
    return value


def date_value(value):
    """Field renderer: format dates, keep pre-formatted strings verbatim."""
    if isinstance(value, date):
        return format_date(value)
    return value
