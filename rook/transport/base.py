"""
rook.transport.base
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import inspect
import socket

from collections import namedtuple

import rook
from rook.conf import defaults
from rook.exceptions import ConfigError, TransportError
from rook.transport.exceptions import InvalidScheme
from rook.utils import get_auth_header
from rook.utils.dates import iso8601

# A fully prepared outbound message. ``body`` is always bytes.
Request = namedtuple('Request', ('method', 'url', 'headers', 'body'))


def describe_error(exc):
    """
    Turns a low level network failure into a short human readable
    message, e.g. ``connection refused`` or ``timeout``.
    """
    if isinstance(exc, socket.timeout):
        return 'timeout'
    strerror = getattr(exc, 'strerror', None)
    if strerror:
        return strerror.lower()
    return str(exc) or exc.__class__.__name__


def check_options(cls, remote, options):
    """
    Raises ``ConfigError`` when ``cls`` cannot be built for ``remote`` with
    ``options``, typically an unknown option in the DSN query string.
    """
    try:
        inspect.signature(cls).bind(remote, **options)
    except TypeError as e:
        raise ConfigError('invalid options for %s: %s' % (cls.__name__, e))


class Transport(object):
    """
    All transport implementations need to subclass this class.

    A transport owns the parsed remote it delivers to. The public
    contract is a single method, ``send(data)``, taking the serialized
    event and returning ``(True, None)`` on success or ``(None, message)``
    on failure; it never raises for delivery errors.

    Subclasses implement ``build_request`` (prepare headers and body, this
    is where the auth header is generated) and ``deliver``, which performs
    the network I/O and raises ``TransportError`` on failure.
    """

    scheme = []
    protocols = ()
    client_name = 'rook-python'
    protocol_version = defaults.PROTOCOL_VERSION

    def __init__(self, remote):
        self.check_scheme(remote)
        self.remote = remote

    def check_scheme(self, remote):
        if remote.protocol not in self.protocols:
            raise InvalidScheme(
                '%s cannot deliver to %s endpoints' % (
                    self.__class__.__name__, remote.protocol))

    @property
    def client_string(self):
        return '%s/%s' % (self.client_name, rook.VERSION)

    def get_auth_header(self, timestamp=None, separator=', '):
        return get_auth_header(
            protocol=self.protocol_version,
            timestamp=iso8601(timestamp),
            client=self.client_string,
            api_key=self.remote.public_key,
            api_secret=self.remote.secret_key,
            separator=separator,
        )

    def build_request(self, data):
        raise NotImplementedError

    def deliver(self, request):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a server
        """
        raise NotImplementedError

    def send(self, data):
        try:
            self.deliver(self.build_request(data))
        except TransportError as e:
            return None, e.message
        return True, None

    def close(self):
        pass
