"""RFC 2822 publish date parsing."""

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

from errors import DateUnparseableError

WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')

# Numeric offset or one of the obsolete zone names RFC 2822 still accepts
ZONE_PATTERN = re.compile(r'\s(?:[+-]\d{4}|UT|GMT|Z|[ECMP][SD]T)$')


def parse_pub_date(value: str, title: Optional[str] = None) -> datetime:
    """
    Parse an RFC 2822 ``pubDate`` into a timezone-aware datetime.

    The source offset is kept as is. A ``-0000`` zone, which marks an
    unknown local offset, is read as UTC. A missing zone is an error. A
    leading day name must be a valid one but is not cross-checked against
    the date, so exports with a stale weekday still convert.

    Raises:
        DateUnparseableError: If ``value`` is not an RFC 2822 date
    """
    if not isinstance(value, str):
        raise DateUnparseableError(value, title)

    text = value.strip()
    if not ZONE_PATTERN.search(text):
        raise DateUnparseableError(value, title)
    if ',' in text and text.split(',', 1)[0].strip() not in WEEKDAYS:
        raise DateUnparseableError(value, title)

    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError) as e:
        raise DateUnparseableError(value, title) from e
    if parsed is None:
        raise DateUnparseableError(value, title)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ['parse_pub_date']
