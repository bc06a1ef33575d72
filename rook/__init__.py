"""
rook
~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'RemoteConfig', 'parse_dsn')

VERSION = '0.5.0'

from rook.base import *  # NOQA
from rook.conf import *  # NOQA
