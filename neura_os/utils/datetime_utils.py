from datetime import datetime

import pytz

UTC = pytz.utc

def now_utc() -> datetime:
    return datetime.now(UTC)

def isoformat_utc(dt: datetime = None) -> str:
    """ISO-8601 timestamp in UTC with a trailing Z"""
    dt = dt or now_utc()
    return dt.astimezone(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")
