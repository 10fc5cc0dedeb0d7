# -*- coding: utf-8 -*-
import unittest
from unittest import mock

from zope.interface import verify

from hostresolver._interfaces import IHostNameResolver
from hostresolver.events import HostNameResolved
from hostresolver.resolver import local

from hostresolver.tests import TestCase


class TestLocalResolver(TestCase):

    def setUp(self):
        super(TestLocalResolver, self).setUp()
        self.resolver = local.Resolver()
        patcher = mock.patch('platform.node', return_value='myhost')
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_implements(self):
        verify.verifyObject(IHostNameResolver, self.resolver)
        self.assertFalse(self.resolver.uses_network)

    def test_ignores_argument(self):
        for value in ('example.com', '10.0.0.1', '', None, 42):
            self.assertEqual(self.resolver.resolve_host_name(value), 'myhost')

    def test_no_node_name(self):
        with mock.patch('platform.node', return_value=''):
            self.assertEqual(self.resolver.resolve_host_name('example.com'),
                             'localhost')

    def test_event(self):
        self.resolver.resolve_host_name(None)
        resolved, = self.events_of(HostNameResolved)
        self.assertIsNone(resolved.host_name_or_address)
        self.assertEqual(resolved.host_name, 'myhost')

    def test_close(self):
        self.resolver.close()
        self.assertEqual(self.resolver.resolve_host_name(None), 'myhost')


class TestLocalResolverLive(unittest.TestCase):

    def test_non_empty(self):
        self.assertTrue(local.Resolver().resolve_host_name(None))


if __name__ == '__main__':
    unittest.main()
