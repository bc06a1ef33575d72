"""
rook.runtime
~~~~~~~~~~~~

Host runtime integration for queued transports.

Some hosts only allow blocking network I/O during given execution phases:
inside a running asyncio event loop a blocking socket would stall every
other task, and module initialisation is a bad place to wait on a remote
server. A runtime answers two questions for the queued transport: which
phase the caller is currently in, and how to run a drain task later.

>>> runtime = ThreadedRuntime()
>>> with runtime.phase(PHASE_INIT):
...     client.captureMessage('queued, sent by a worker thread')

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import asyncio
import threading
import time

from contextlib import contextmanager

from rook.transport.threaded import AsyncWorker, DEFAULT_TIMEOUT

PHASE_INIT = 'init'
PHASE_MAIN = 'main'
PHASE_REQUEST = 'request'
PHASE_TIMER = 'timer'
PHASE_EVENT_LOOP = 'event_loop'
PHASE_SHUTDOWN = 'shutdown'

IO_PHASES = frozenset([PHASE_MAIN, PHASE_REQUEST, PHASE_TIMER])


class Runtime(object):
    io_phases = IO_PHASES

    def __init__(self):
        self._local = threading.local()

    def default_phase(self):
        return PHASE_MAIN

    def current_phase(self):
        phases = getattr(self._local, 'phases', None)
        if phases:
            return phases[-1]
        return self.default_phase()

    @contextmanager
    def phase(self, name):
        """
        Declares the phase the current thread is in for the duration of
        the block. Phases nest.
        """
        phases = self._local.__dict__.setdefault('phases', [])
        phases.append(name)
        try:
            yield
        finally:
            phases.pop()

    def allows_io(self, phase=None):
        if phase is None:
            phase = self.current_phase()
        return phase in self.io_phases

    def schedule(self, func, delay=0):
        """
        Arranges for ``func`` to be called later, from a context where
        blocking I/O is allowed. Raises when the task cannot be scheduled.
        """
        raise NotImplementedError


class ThreadedRuntime(Runtime):
    def __init__(self, shutdown_timeout=DEFAULT_TIMEOUT):
        super(ThreadedRuntime, self).__init__()
        self.shutdown_timeout = shutdown_timeout
        self._worker = None
        self._worker_lock = threading.Lock()

    def get_worker(self):
        with self._worker_lock:
            if self._worker is None:
                self._worker = AsyncWorker(self.shutdown_timeout)
            return self._worker

    def schedule(self, func, delay=0):
        if delay:
            self.get_worker().queue(self._delayed, func, delay)
        else:
            self.get_worker().queue(func)

    @staticmethod
    def _delayed(func, delay):
        time.sleep(delay)
        func()


class AsyncioRuntime(Runtime):
    """
    Reports the ``event_loop`` phase whenever an event loop is running in
    the calling thread, and runs tasks in that loop's default executor.
    """

    def __init__(self, loop=None):
        super(AsyncioRuntime, self).__init__()
        self._loop = loop

    def default_phase(self):
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return PHASE_MAIN
        return PHASE_EVENT_LOOP

    def get_loop(self):
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def schedule(self, func, delay=0):
        loop = self.get_loop()
        if loop.is_closed():
            raise RuntimeError('event loop is closed')
        loop.call_soon_threadsafe(self._submit, loop, func, delay)

    @staticmethod
    def _submit(loop, func, delay):
        if delay:
            loop.call_later(delay, loop.run_in_executor, None, func)
        else:
            loop.run_in_executor(None, func)
