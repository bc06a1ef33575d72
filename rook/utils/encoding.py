"""
rook.utils.encoding
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


def to_unicode(value):
    if isinstance(value, bytes):
        return value.decode('utf-8', 'replace')
    try:
        value = str(value)
    except (UnicodeEncodeError, UnicodeDecodeError):
        value = '(Error decoding value)'
    except Exception:  # in some cases we get a different exception
        try:
            value = str(repr(type(value)))
        except Exception:
            value = '(Error decoding value)'
    return value


def to_bytes(value):
    if isinstance(value, bytes):
        return value
    return to_unicode(value).encode('utf-8')
