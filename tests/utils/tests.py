from __future__ import absolute_import

import logging
import re

from datetime import datetime

import pytest

from rook.utils import get_auth_header, get_level_name, merge_dicts
from rook.utils.dates import iso8601
from rook.utils.testutils import TestCase


class MergeDictsTest(TestCase):
    def test_later_values_win(self):
        defaults = {'a': '0', 'b': '2'}
        assert merge_dicts(defaults, {'a': '1'}) == {'a': '1', 'b': '2'}

    def test_idempotent(self):
        once = merge_dicts({'a': '0', 'b': '2'}, {'a': '1'})
        assert merge_dicts(once, once) == once

    def test_skips_empty(self):
        assert merge_dicts(None, {'a': 1}, {}) == {'a': 1}

    def test_does_not_modify_inputs(self):
        defaults = {'a': '0'}
        merge_dicts(defaults, {'a': '1'})
        assert defaults == {'a': '0'}


class GetAuthHeaderTest(TestCase):
    def test_with_secret(self):
        header = get_auth_header(protocol='6', timestamp='2014-03-07T00:17:47',
                                 client='rook-python/1.0', api_key='public',
                                 api_secret='secret')
        assert header == (
            'Sentry sentry_version=6, sentry_client=rook-python/1.0, '
            'sentry_timestamp=2014-03-07T00:17:47, sentry_key=public, '
            'sentry_secret=secret')

    def test_without_secret(self):
        header = get_auth_header(protocol='6', timestamp='2014-03-07T00:17:47',
                                 client='rook-python/1.0', api_key='public')
        assert 'sentry_key=public' in header
        assert 'sentry_secret' not in header

    def test_separator(self):
        header = get_auth_header(protocol='2.0', timestamp='ts', client='c',
                                 api_key='pub', api_secret='sec', separator=',')
        assert header == ('Sentry sentry_version=2.0,sentry_client=c,'
                          'sentry_timestamp=ts,sentry_key=pub,sentry_secret=sec')


class GetLevelNameTest(TestCase):
    def test_names(self):
        for name in ('fatal', 'error', 'warning', 'info', 'debug'):
            assert get_level_name(name) == name

    def test_logging_levels(self):
        assert get_level_name(logging.CRITICAL) == 'fatal'
        assert get_level_name(logging.WARNING) == 'warning'
        assert get_level_name(logging.DEBUG) == 'debug'

    def test_invalid(self):
        with pytest.raises(ValueError):
            get_level_name('loud')
        with pytest.raises(ValueError):
            get_level_name(42)


class Iso8601Test(TestCase):
    def test_datetime(self):
        assert iso8601(datetime(2014, 3, 7, 0, 17, 47, 1234)) == '2014-03-07T00:17:47'

    def test_timestamp(self):
        assert iso8601(1394151467.51) == '2014-03-07T00:17:47'

    def test_now(self):
        assert re.match(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$', iso8601())
