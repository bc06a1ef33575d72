"""
rook.transport.udp
~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from rook.conf import defaults
from rook.exceptions import TransportError
from rook.transport.base import Request, Transport, describe_error
from rook.utils.encoding import to_bytes, to_unicode

try:
    # Google App Engine blacklists parts of the socket module, this will prevent
    # it from blowing up.
    from socket import socket, AF_INET, AF_INET6, SOCK_DGRAM, has_ipv6, getaddrinfo, error as socket_error
    has_socket = True
except Exception:
    has_socket = False


class UDPTransport(Transport):
    """
    Fire and forget: a message is delivered once the local network stack
    accepted the datagram. No answer is read back.
    """

    scheme = ['udp']
    protocols = ('udp',)
    protocol_version = defaults.UDP_PROTOCOL_VERSION

    def __init__(self, remote, timeout=defaults.TIMEOUT):
        if not has_socket:
            raise ImportError('UDPTransport requires the socket module')
        super(UDPTransport, self).__init__(remote)

        if isinstance(timeout, str):
            timeout = float(timeout)
        self.timeout = timeout

    def _get_addr_info(self, host, port):
        """
        Selects the address to connect to, based on the supplied host/port
        information. This method prefers v4 addresses, and will only return
        a v6 address if it's the only option.
        """
        addresses = getaddrinfo(host, port, 0, SOCK_DGRAM)
        v4_addresses = [info for info in addresses if info[0] == AF_INET]
        if has_ipv6:
            v6_addresses = [info for info in addresses if info[0] == AF_INET6]
            if v6_addresses and not v4_addresses:
                # The only time we return a v6 address is if it's the only option
                return v6_addresses[0]
        if not v4_addresses:
            raise TransportError('no address found for %s' % host)
        return v4_addresses[0]

    def build_request(self, data):
        body = '%s\n\n%s\n' % (self.get_auth_header(separator=','),
                               to_unicode(data))
        return Request(None, self.remote.server_url, {}, to_bytes(body))

    def deliver(self, request):
        try:
            addr_info = self._get_addr_info(self.remote.host, self.remote.port)
            self._send_data(request.body, addr_info)
        except socket_error as e:
            raise TransportError(describe_error(e))

    def _send_data(self, data, addr_info):
        af = addr_info[0]
        addr = addr_info[4]
        udp_socket = socket(af, SOCK_DGRAM)
        try:
            udp_socket.settimeout(self.timeout)
            udp_socket.sendto(data, addr)
        finally:
            # Always close up the socket when we're done
            udp_socket.close()
