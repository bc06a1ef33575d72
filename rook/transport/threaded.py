"""
rook.transport.threaded
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import atexit
import logging
import os
import threading

from queue import Queue

DEFAULT_TIMEOUT = 10

logger = logging.getLogger('rook.errors')


class AsyncWorker(object):
    """
    A daemon thread running queued callables one after the other. At
    interpreter exit it waits up to ``shutdown_timeout`` seconds for the
    pending jobs.
    """
    _terminator = object()

    def __init__(self, shutdown_timeout=DEFAULT_TIMEOUT):
        self._queue = Queue(-1)
        self._lock = threading.Lock()
        self._thread = None
        self._thread_for_pid = None
        self.options = {
            'shutdown_timeout': shutdown_timeout,
        }
        self.start()

    def is_alive(self):
        if self._thread_for_pid != os.getpid():
            return False
        return self._thread is not None and self._thread.is_alive()

    def _ensure_thread(self):
        if self.is_alive():
            return
        self.start()

    def main_thread_terminated(self):
        with self._lock:
            if not self.is_alive():
                return
            size = self._queue.qsize()

        timeout = self.options['shutdown_timeout']
        if size:
            logger.info('rook is attempting to send %s pending jobs, '
                        'waiting up to %s seconds', size, timeout)
        self.stop(timeout=timeout)

    def start(self):
        """
        Starts the task thread.
        """
        with self._lock:
            if not self.is_alive():
                self._thread = threading.Thread(
                    target=self._target, name='rook.AsyncWorker')
                self._thread.daemon = True
                self._thread.start()
                self._thread_for_pid = os.getpid()
        atexit.register(self.main_thread_terminated)

    def stop(self, timeout=None):
        """
        Stops the task thread. Synchronous!
        """
        with self._lock:
            if self._thread:
                self._queue.put_nowait(self._terminator)
                self._thread.join(timeout=timeout)
                self._thread = None
                self._thread_for_pid = None

    def queue(self, callback, *args, **kwargs):
        self._ensure_thread()
        self._queue.put_nowait((callback, args, kwargs))

    def _target(self):
        while True:
            record = self._queue.get()
            if record is self._terminator:
                break
            callback, args, kwargs = record
            try:
                callback(*args, **kwargs)
            except Exception:
                logger.error('Failed processing job', exc_info=True)
