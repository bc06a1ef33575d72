"""
rook.utils.stacks
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import sys


def _getitem_from_frame(f_locals, key, default=None):
    """
    f_locals is not guaranteed to have .get(), but it will always
    support __getitem__. Even if it doesnt, we return ``default``.
    """
    try:
        return f_locals[key]
    except Exception:
        return default


def is_hidden_frame(frame):
    f_locals = getattr(frame, 'f_locals', {})
    return bool(_getitem_from_frame(f_locals, '__traceback_hide__'))


def get_frame_culprit(frame):
    """
    Returns the name of the function running in ``frame``, or
    ``file:first_line`` when the code object is anonymous (a module body,
    a lambda, a comprehension).
    """
    f_code = frame.f_code
    if f_code.co_name.startswith('<'):
        return '%s:%d' % (f_code.co_filename, f_code.co_firstlineno)
    return f_code.co_name


def iter_traceback_frames(tb):
    """
    Given a traceback object, it will iterate over all
    frames that do not contain the ``__traceback_hide__``
    local variable.
    """
    while tb:
        if not is_hidden_frame(tb.tb_frame):
            yield tb.tb_frame, tb.tb_lineno
        tb = tb.tb_next


def iter_stack_frames(frame=None):
    """
    Walks the call stack outwards from ``frame`` (defaults to the caller's
    frame), innermost first, skipping frames that contain the
    ``__traceback_hide__`` local variable.
    """
    if frame is None:
        frame = sys._getframe(1)

    while frame is not None:
        if not is_hidden_frame(frame):
            yield frame, frame.f_lineno
        frame = frame.f_back


def get_stack_info(frames):
    """
    Given a list of ``(frame, lineno)`` pairs, returns a JSON-ready
    stacktrace interface in the same order.
    """
    results = []
    for frame, lineno in frames:
        if is_hidden_frame(frame):
            continue

        f_code = frame.f_code
        results.append({
            'filename': f_code.co_filename,
            'function': f_code.co_name,
            'lineno': lineno,
        })
    return {'frames': results}


def get_stack_trace(trace_level=1, frame=None):
    """
    Returns the stacktrace interface for the current call stack,
    outermost frame first. ``trace_level`` 1 starts at the innermost
    visible frame, each extra level drops one more frame off the inner
    end.
    """
    if frame is None:
        frame = sys._getframe(1)
    frames = list(iter_stack_frames(frame))[max(trace_level, 1) - 1:]
    frames.reverse()
    return get_stack_info(frames)


def get_culprit(trace_level=1, frame=None):
    if frame is None:
        frame = sys._getframe(1)
    for level, (f, _) in enumerate(iter_stack_frames(frame), 1):
        if level >= trace_level:
            return get_frame_culprit(f)
    return None
