"""
rook.transport.queued
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import os
import threading

from collections import deque

from rook.conf import defaults
from rook.exceptions import QueueFull, TransportError
from rook.runtime import ThreadedRuntime
from rook.transport.base import Transport, check_options
from rook.transport.http import HTTPTransport

logger = logging.getLogger('rook.errors')


class QueuedTransport(Transport):
    """
    Wraps a blocking transport for hosts where network I/O is not always
    allowed.

    When the runtime reports a phase that allows I/O the message is sent
    right away through the wrapped transport (unless ``async_`` is set).
    Otherwise the prepared request is appended to an in-memory FIFO queue
    and a drain task is scheduled on the runtime. At most one drain task
    exists at a time per instance: timers and threads are a scarce resource
    and a burst of errors must not exhaust them.

    Delivery is at most once. The drain task makes a single attempt per
    message and drops it whatever the outcome. When the queue holds
    ``queue_limit`` messages new ones are refused.
    """

    def __init__(self, transport, runtime=None,
                 queue_limit=defaults.QUEUE_LIMIT, async_=False):
        if isinstance(queue_limit, str):
            queue_limit = int(queue_limit)
        if isinstance(async_, str):
            async_ = bool(int(async_))

        self.transport = transport
        self.remote = transport.remote
        self.runtime = runtime or ThreadedRuntime()
        self.queue_limit = queue_limit
        self.async_ = async_

        self._reset()

    def _reset(self):
        self._queue = deque()
        self._task_running = False
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._pid = os.getpid()

    def _check_fork(self):
        # A forked child inherits the queue and the running flag but not the
        # drain task, the parent still owns the queued messages.
        if self._pid != os.getpid():
            self._reset()

    @property
    def client_string(self):
        return self.transport.client_string

    @property
    def queue_size(self):
        with self._lock:
            return len(self._queue)

    @property
    def task_running(self):
        with self._lock:
            return self._task_running

    def build_request(self, data):
        return self.transport.build_request(data)

    def deliver(self, request):
        return self.transport.deliver(request)

    def send(self, data, phase=None):
        if phase is None:
            phase = self.runtime.current_phase()

        if not self.async_ and self.runtime.allows_io(phase):
            return self.transport.send(data)

        try:
            self.enqueue(self.build_request(data))
        except TransportError as e:
            return None, e.message
        return True, None

    def enqueue(self, request):
        self._check_fork()
        with self._lock:
            if len(self._queue) >= self.queue_limit:
                raise QueueFull()
            self._queue.append(request)
            if self._task_running:
                return
            # Flag the task as running before it is actually scheduled, more
            # messages may come in before it gets a chance to run.
            self._task_running = True

        try:
            self.runtime.schedule(self.drain, 0)
        except Exception as e:
            with self._lock:
                self._discard(request)
                self._task_running = False
                self._idle.notify_all()
            raise TransportError(
                'failed to schedule async sender task: %s' % e)

    def _discard(self, request):
        for idx, queued in enumerate(self._queue):
            if queued is request:
                del self._queue[idx]
                return

    def drain(self):
        """
        Body of the drain task: delivers queued messages in order until the
        queue is empty, then clears the running flag.
        """
        while True:
            with self._lock:
                if not self._queue:
                    self._task_running = False
                    self._idle.notify_all()
                    return
                # Keep the message queued while it is in flight, an empty
                # queue means there is nothing left for this task to do.
                request = self._queue[0]

            try:
                self.deliver(request)
            except TransportError as e:
                logger.error('failed to send message asynchronously: %s. '
                             'Drop the message.', e)
            except Exception:
                logger.error('failed to send message asynchronously. '
                             'Drop the message.', exc_info=True)

            with self._lock:
                self._queue.popleft()

    def flush(self, timeout=None):
        """
        Waits until the queue is empty and no drain task is running.
        Returns ``False`` if ``timeout`` expired first.
        """
        self._check_fork()
        with self._idle:
            return self._idle.wait_for(
                lambda: not self._queue and not self._task_running, timeout)

    def close(self):
        self.transport.close()


class QueuedHTTPTransport(QueuedTransport):
    scheme = ['queued+http', 'queued+https']

    def __init__(self, remote, runtime=None, queue_limit=defaults.QUEUE_LIMIT,
                 **options):
        # ``async`` comes straight from the DSN query string
        async_ = options.pop('async', options.pop('async_', False))
        check_options(HTTPTransport, remote, options)
        super(QueuedHTTPTransport, self).__init__(
            HTTPTransport(remote, **options),
            runtime=runtime,
            queue_limit=queue_limit,
            async_=async_,
        )


class ThreadedHTTPTransport(QueuedHTTPTransport):
    """
    Always hands messages over to a background thread, the caller never
    waits on the network.
    """
    scheme = ['threaded+http', 'threaded+https']

    def __init__(self, remote, runtime=None, queue_limit=defaults.QUEUE_LIMIT,
                 **options):
        options['async_'] = True
        options.pop('async', None)
        super(ThreadedHTTPTransport, self).__init__(
            remote, runtime=runtime, queue_limit=queue_limit, **options)
