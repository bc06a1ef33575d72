"""
rook.transport.http
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import http.client

from rook.conf import defaults
from rook.exceptions import TransportError
from rook.transport.base import Request, Transport, describe_error
from rook.utils.encoding import to_bytes
from rook.utils.http import get_connection

ERR_BAD_STATUS = 'Server response status not 200: %s'


class HTTPTransport(Transport):
    """
    Blocking transport: opens a new connection for every message and
    waits for the server's answer. Anything but a ``200`` is a failure.
    """

    scheme = ['http', 'https', 'sync+http', 'sync+https']
    protocols = ('http', 'https')

    def __init__(self, remote, timeout=defaults.TIMEOUT,
                 verify_ssl=defaults.VERIFY_SSL, ca_certs=defaults.CA_BUNDLE,
                 target=None):
        super(HTTPTransport, self).__init__(remote)

        if isinstance(timeout, str):
            timeout = float(timeout)
        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.ca_certs = ca_certs
        # address to connect to, when it is not the DSN host
        self.target = target

    def get_headers(self, body):
        headers = {
            'Content-Type': 'application/json',
            'Content-Length': str(len(body)),
            'User-Agent': self.client_string,
            'X-Sentry-Auth': self.get_auth_header(),
            'Connection': 'close',
        }
        if self.target:
            headers['Host'] = self.remote.netloc
        return headers

    def build_request(self, data):
        body = to_bytes(data)
        return Request('POST', self.remote.server_url, self.get_headers(body),
                       body)

    def deliver(self, request):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        conn = get_connection(
            self.remote.protocol, self.remote.host, self.remote.port,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
            ca_certs=self.ca_certs,
            target=self.target,
        )
        try:
            conn.request(request.method, self.remote.request_path,
                         body=request.body, headers=request.headers)
            response = conn.getresponse()
            body = response.read()
        except (OSError, http.client.HTTPException) as e:
            raise TransportError(describe_error(e))
        finally:
            conn.close()

        if response.status != 200:
            raise TransportError(ERR_BAD_STATUS % response.status)
        return body
