import asyncio
import logging
import math
import random
import time
from datetime import datetime, timedelta, timezone
from typing import Optional


logger = logging.getLogger(__name__)


def get_timestamp() -> str:
    """ISO8601 timestamp for now in UTC, e.g. ``2024-05-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def get_short_timestamp() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def get_random_money() -> str:
    """Random monetary value in [4.00, 14.00), truncated to two decimals."""
    cents = math.floor((4.0 + random.random() * 10) * 100)
    return f"{min(cents, 1399) / 100:.2f}"


def get_random_int(max: float = 10) -> int:
    """Random integer in ``[0, floor(max))``; 0 when ``max`` is below 1."""
    return math.floor(random.random() * math.floor(max))


def get_future_date(duration: Optional[int] = None) -> datetime:
    if duration is None:
        duration = get_random_int(7)
    result = datetime.now() + timedelta(days=duration)
    logger.debug(f"get_future_date returns {result}")
    return result


async def wait(ms: Optional[float] = None) -> None:
    """Sleep for ``ms`` milliseconds (one second when not given)."""
    logger.debug(f"waiting {ms} milliseconds")
    await asyncio.sleep((ms or 1000) / 1000)
