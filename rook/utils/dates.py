from __future__ import absolute_import

import time

from datetime import datetime, timedelta


epoch = datetime(1970, 1, 1)


def to_datetime(value):
    return epoch + timedelta(seconds=value)


def iso8601(value=None):
    """
    Formats a UTC time (a naive datetime or an epoch timestamp, defaults
    to now) with second precision and no timezone designator, e.g.
    ``2014-03-07T00:17:47``.
    """
    if value is None:
        value = time.time()
    if not isinstance(value, datetime):
        value = to_datetime(value)
    return value.strftime('%Y-%m-%dT%H:%M:%S')
