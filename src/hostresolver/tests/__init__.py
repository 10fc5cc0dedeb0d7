# -*- coding: utf-8 -*-
"""
Tests for hostresolver.

Each test case gets fresh configuration settings, no process-wide
resolver, and an empty list of event subscribers.
"""
import unittest
from unittest import mock

from zope import event

from hostresolver import api
from hostresolver._config import config
from hostresolver._config import make_settings


class TestCase(unittest.TestCase):

    def setUp(self):
        super(TestCase, self).setUp()
        patcher = mock.patch.object(config, 'settings', make_settings())
        patcher.start()
        self.addCleanup(patcher.stop)

        patcher = mock.patch.object(api, '_resolver', None)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.events = []
        patcher = mock.patch.object(event, 'subscribers', [self.events.append])
        patcher.start()
        self.addCleanup(patcher.stop)

    def events_of(self, kind):
        return [e for e in self.events if isinstance(e, kind)]
