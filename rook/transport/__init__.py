"""
rook.transport
~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from rook.transport.base import Request, Transport  # NOQA
from rook.transport.exceptions import InvalidScheme, DuplicateScheme  # NOQA
from rook.transport.http import HTTPTransport  # NOQA
from rook.transport.queued import (  # NOQA
    QueuedTransport, QueuedHTTPTransport, ThreadedHTTPTransport)
from rook.transport.requests import RequestsHTTPTransport  # NOQA
from rook.transport.udp import UDPTransport  # NOQA
from rook.transport.registry import TransportRegistry, default_transports  # NOQA
