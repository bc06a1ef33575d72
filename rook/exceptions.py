from __future__ import absolute_import


class ConfigError(ValueError):
    """
    Raised when the client cannot be configured, for instance because of
    a malformed DSN.
    """


class InvalidDsn(ConfigError):
    pass


class TransportError(Exception):
    """
    A delivery attempt failed. Transports raise this internally, it is
    turned into a ``(None, message)`` pair before leaving ``send``.
    """

    def __init__(self, message):
        super(TransportError, self).__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class QueueFull(TransportError):
    def __init__(self, message='failed to send message asynchronously: queue is full'):
        super(QueueFull, self).__init__(message)
