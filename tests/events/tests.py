# -*- coding: utf-8 -*-
from __future__ import absolute_import

import sys

import pytest

from rook.events import Exception as ExceptionEvent, Message
from rook.utils.testutils import InMemoryClient, TestCase


class MessageTest(TestCase):
    def setUp(self):
        self.event = Message(InMemoryClient())

    def test_capture(self):
        data = self.event.capture('hello')
        assert data == {'message': 'hello', 'culprit': 'test_capture'}

    def test_capture_non_text(self):
        data = self.event.capture(b'bytes')
        assert data['message'] == 'bytes'

    def test_stack(self):
        data = self.event.capture('hello', stack=True)
        assert data['stacktrace']['frames'][-1]['function'] == 'test_stack'

    def test_to_string(self):
        assert self.event.to_string({'message': 'hello'}) == 'hello'


class ExceptionTest(TestCase):
    def setUp(self):
        self.event = ExceptionEvent(InMemoryClient())

    def test_exc_info(self):
        try:
            raise ValueError('invalid')
        except ValueError:
            data = self.event.capture(sys.exc_info())

        assert data['culprit'] == 'test_exc_info'
        exc = data['exception'][0]
        assert exc['type'] == 'ValueError'
        assert exc['value'] == 'invalid'
        assert exc['module'] == 'builtins'
        assert exc['stacktrace']['frames'][-1]['function'] == 'test_exc_info'

    def test_no_exception(self):
        with pytest.raises(ValueError):
            self.event.capture()

    def test_empty_values(self):
        with pytest.raises(ValueError):
            self.event.capture([])

    def test_values_are_copied(self):
        values = [{'type': 'E', 'value': 'v'}]
        data = self.event.capture(values)
        assert values == [{'type': 'E', 'value': 'v'}]
        assert data['exception'][0]['value'] == 'v'
        assert 'stacktrace' in data['exception'][0]

    def test_to_string(self):
        assert self.event.to_string({'exception': [{'value': 'v'}]}) == 'v'
        assert self.event.to_string({'exception': [{'type': 'E'}]}) == 'E'
