"""
rook.transport.registry
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from rook.transport.base import check_options
from rook.transport.exceptions import DuplicateScheme, InvalidScheme
from rook.transport.http import HTTPTransport
from rook.transport.queued import QueuedHTTPTransport, ThreadedHTTPTransport
from rook.transport.requests import RequestsHTTPTransport
from rook.transport.udp import UDPTransport


class TransportRegistry(object):
    def __init__(self, transports=None):
        # setup a default list of senders
        self._schemes = {}

        if transports:
            for transport in transports:
                self.register_transport(transport)

    def register_transport(self, transport):
        if not hasattr(transport, 'scheme') or not hasattr(transport.scheme, '__iter__'):
            raise AttributeError('Transport %s must have a scheme list' % transport.__name__)

        for scheme in transport.scheme:
            self.register_scheme(scheme, transport)

    def register_scheme(self, scheme, cls):
        """
        It is possible to inject new schemes at runtime
        """
        if scheme in self._schemes:
            raise DuplicateScheme(scheme)

        self._schemes[scheme] = cls

    def supported_scheme(self, scheme):
        return scheme in self._schemes

    def get_transport_cls(self, scheme):
        try:
            return self._schemes[scheme]
        except KeyError:
            raise InvalidScheme('No transport registered for %r' % scheme)

    def get_transport(self, remote, **options):
        """
        Builds the transport registered for the remote's scheme. Options
        from the DSN query string (e.g. ``?timeout=30``) are overridden by
        the explicit ones.
        """
        cls = self.get_transport_cls(remote.scheme)
        kwargs = dict(remote.options)
        kwargs.update(options)
        check_options(cls, remote, kwargs)
        return cls(remote, **kwargs)


default_transports = [
    HTTPTransport,
    RequestsHTTPTransport,
    UDPTransport,
    QueuedHTTPTransport,
    ThreadedHTTPTransport,
]
