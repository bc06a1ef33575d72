"""
rook.conf
~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from rook.conf.remote import RemoteConfig, parse_dsn

__all__ = ('RemoteConfig', 'parse_dsn')
