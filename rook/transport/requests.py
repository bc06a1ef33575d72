"""
rook.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from rook.conf import defaults
from rook.exceptions import TransportError
from rook.transport.http import ERR_BAD_STATUS, HTTPTransport

try:
    import requests
    from requests.adapters import HTTPAdapter
    has_requests = True
except ImportError:
    has_requests = False


class RequestsHTTPTransport(HTTPTransport):
    """
    HTTP transport backed by a ``requests`` session, so connections to the
    server are pooled and kept alive between messages.
    """

    scheme = ['requests+http', 'requests+https']

    def __init__(self, remote, timeout=defaults.TIMEOUT, verify_ssl=True,
                 ca_certs=defaults.CA_BUNDLE, keepalive=True,
                 keepalive_pool=defaults.KEEPALIVE_POOL):
        if not has_requests:
            raise ImportError('RequestsHTTPTransport requires requests.')

        super(RequestsHTTPTransport, self).__init__(remote,
                                                    timeout=timeout,
                                                    verify_ssl=verify_ssl,
                                                    ca_certs=ca_certs)

        if isinstance(keepalive, str):
            keepalive = bool(int(keepalive))
        if isinstance(keepalive_pool, str):
            keepalive_pool = int(keepalive_pool)

        self.keepalive = keepalive
        self.session = requests.Session()
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=keepalive_pool)
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    def get_headers(self, body):
        headers = super(RequestsHTTPTransport, self).get_headers(body)
        if self.keepalive:
            headers['Connection'] = 'keep-alive'
        return headers

    def deliver(self, request):
        if self.verify_ssl:
            # If SSL verification is enabled use the provided CA bundle to
            # perform the verification.
            verify = self.ca_certs or True
        else:
            verify = False

        try:
            response = self.session.request(
                request.method, request.url, data=request.body,
                headers=request.headers, timeout=self.timeout, verify=verify)
        except requests.RequestException as e:
            raise TransportError(str(e))

        if response.status_code != 200:
            raise TransportError(ERR_BAD_STATUS % response.status_code)
        return response.content

    def close(self):
        self.session.close()
