"""
rook.utils.http
~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import http.client
import socket
import ssl

from rook.conf import defaults


def get_ssl_context(verify_ssl=False, ca_certs=None):
    if verify_ssl:
        return ssl.create_default_context(cafile=ca_certs)
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class ValidHTTPSConnection(http.client.HTTPSConnection):
    """
    Opens the TCP connection to ``host`` (which may be a bare address)
    while the TLS handshake, SNI and certificate check included, is done
    against ``server_hostname``.
    """

    def __init__(self, host, port, server_hostname=None, context=None,
                 timeout=defaults.TIMEOUT):
        http.client.HTTPSConnection.__init__(self, host, port,
                                             timeout=timeout, context=context)
        self.server_hostname = server_hostname or host
        self.ssl_context = context

    def connect(self):
        sock = socket.create_connection(
            address=(self.host, self.port),
            timeout=self.timeout,
        )
        self.sock = self.ssl_context.wrap_socket(
            sock, server_hostname=self.server_hostname)


def get_connection(protocol, host, port, timeout=defaults.TIMEOUT,
                   verify_ssl=False, ca_certs=None, target=None):
    """
    Returns an unopened connection to ``host:port``, or to ``target:port``
    when a separate address to connect to is given. The TLS handshake (and
    certificate check when ``verify_ssl`` is set) happens on first use.
    """
    address = target or host
    if protocol == 'https':
        return ValidHTTPSConnection(
            address, port, server_hostname=host, timeout=timeout,
            context=get_ssl_context(verify_ssl, ca_certs))
    return http.client.HTTPConnection(address, port, timeout=timeout)
