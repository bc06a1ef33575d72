"""
rook.utils
~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from rook.conf import defaults


def merge_dicts(*dicts):
    """
    Merges mappings left to right, later values win on collision.
    """
    out = {}
    for d in dicts:
        if not d:
            continue

        for k, v in d.items():
            out[k] = v
    return out


def get_auth_header(protocol, timestamp, client, api_key,
                    api_secret=None, separator=', '):
    header = [
        ('sentry_version', protocol),
        ('sentry_client', client),
        ('sentry_timestamp', timestamp),
        ('sentry_key', api_key),
    ]
    if api_secret:
        header.append(('sentry_secret', api_secret))

    return 'Sentry %s' % separator.join('%s=%s' % (k, v) for k, v in header)


def get_level_name(level):
    """
    Normalizes a level given either as a name or as a ``logging`` level
    number.

    >>> get_level_name(logging.WARNING)
    'warning'
    """
    if isinstance(level, int):
        try:
            return defaults.LEVELS[level]
        except KeyError:
            pass
    elif level in defaults.LEVELS.values():
        return level
    raise ValueError('Invalid level: %r' % (level,))
