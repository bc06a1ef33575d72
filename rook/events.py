"""
rook.events
~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import sys

from rook.utils.encoding import to_unicode
from rook.utils.stacks import (
    get_culprit, get_frame_culprit, get_stack_info, get_stack_trace,
    iter_traceback_frames)

__all__ = ('BaseEvent', 'Exception', 'Message')


class BaseEvent(object):
    def __init__(self, client):
        self.client = client
        self.logger = logging.getLogger(__name__)

    def to_string(self, data):
        raise NotImplementedError

    def capture(self, **kwargs):
        return {
        }


class Exception(BaseEvent):
    """
    Exceptions store the following metadata:

    - value: 'My exception value'
    - type: 'ClassName'
    - module '__builtin__' (i.e. __builtin__.TypeError)
    - stacktrace: the frames leading to the error, outermost first

    The exception may be given as an ``exc_info`` tuple, an exception
    instance, or as a list of exception dicts already in the Sentry format
    (in which case the stacktrace is taken from the call site).
    """
    name = 'exception'

    def to_string(self, data):
        exc = data[self.name][0]
        return exc.get('value') or exc.get('type') or ''

    def capture(self, exception=None, trace_level=1, **kwargs):
        __traceback_hide__ = True  # NOQA

        if isinstance(exception, list):
            return self.capture_values(exception, trace_level)

        if exception is None or exception is True:
            exc_info = sys.exc_info()
        elif isinstance(exception, BaseException):
            exc_info = (type(exception), exception, exception.__traceback__)
        else:
            exc_info = exception

        if not exc_info or exc_info[0] is None:
            raise ValueError('No exception found')

        return self.capture_exc_info(exc_info, trace_level)

    def capture_values(self, values, trace_level):
        __traceback_hide__ = True  # NOQA

        if not values:
            raise ValueError('No exception found')

        values = [dict(value) for value in values]
        values[0]['stacktrace'] = get_stack_trace(trace_level)
        return {
            'culprit': get_culprit(trace_level),
            self.name: values,
        }

    def capture_exc_info(self, exc_info, trace_level):
        __traceback_hide__ = True  # NOQA

        exc_type, exc_value, exc_traceback = exc_info

        try:
            frames = list(iter_traceback_frames(exc_traceback))
            if frames:
                stack_info = get_stack_info(frames)
                culprit = get_frame_culprit(frames[-1][0])
            else:
                # never raised, report where it is being captured
                stack_info = get_stack_trace(trace_level)
                culprit = get_culprit(trace_level)

            exc_module = getattr(exc_type, '__module__', None)
            if exc_module:
                exc_module = str(exc_module)
            exc_type = getattr(exc_type, '__name__', '<unknown>')

            return {
                'culprit': culprit,
                self.name: [{
                    'value': to_unicode(exc_value),
                    'type': str(exc_type),
                    'module': exc_module,
                    'stacktrace': stack_info,
                }],
            }
        finally:
            try:
                del exc_type, exc_value, exc_traceback
            except NameError as e:
                self.logger.exception(e)


class Message(BaseEvent):
    """
    Messages store the following metadata:

    - message: 'My message from foo about bar'
    - culprit: the function the message was captured from
    - stacktrace: only when ``stack`` is set
    """
    name = 'message'

    def to_string(self, data):
        return data[self.name]

    def capture(self, message, stack=False, trace_level=1, **kwargs):
        __traceback_hide__ = True  # NOQA

        data = {
            self.name: to_unicode(message),
            'culprit': get_culprit(trace_level),
        }
        if stack:
            data['stacktrace'] = get_stack_trace(trace_level)
        return data
