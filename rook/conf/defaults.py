"""
rook.conf.defaults
~~~~~~~~~~~~~~~~~~

Represents the default values for all client settings.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging

# Connection timeout (in seconds) for the network transports
TIMEOUT = 1

# Path to a CA bundle used when verifying certificates. ``None`` uses the
# system trust store.
CA_BUNDLE = None

VERIFY_SSL = False

# The maximum number of pending messages held by a queued transport
QUEUE_LIMIT = 50

# Size of the connection pool kept by the requests transport
KEEPALIVE_POOL = 10

# Sentry protocol version spoken over HTTP(S) and over UDP
PROTOCOL_VERSION = '6'
UDP_PROTOCOL_VERSION = '2.0'

LEVEL = 'error'

LOGGER = 'root'

# Value reported as ``server_name`` unless get_server_name() is overridden
NAME = 'undefined'

# Default ports when the DSN omits them. There is no registered port for the
# UDP endpoint, 80 is kept for compatibility with older clients.
PORTS = {
    'http': 80,
    'https': 443,
    'udp': 80,
}

LEVELS = {
    logging.CRITICAL: 'fatal',
    logging.ERROR: 'error',
    logging.WARNING: 'warning',
    logging.INFO: 'info',
    logging.DEBUG: 'debug',
}
