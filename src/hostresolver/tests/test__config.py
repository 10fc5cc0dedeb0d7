# -*- coding: utf-8 -*-
import os
import unittest
from unittest import mock

from hostresolver import _config
from hostresolver.resolver import local
from hostresolver.resolver import native


class TestResolverSetting(unittest.TestCase):

    def setUp(self):
        self.config = _config.Config()

    def test_default_prefers_native(self):
        with mock.patch.dict(os.environ):
            os.environ.pop('HOSTRESOLVER_RESOLVER', None)
            self.assertIs(self.config.resolver, native.Resolver)

    def test_environment(self):
        with mock.patch.dict(os.environ, {'HOSTRESOLVER_RESOLVER': 'local'}):
            self.assertIs(self.config.resolver, local.Resolver)

    def test_environment_list_skips_unimportable(self):
        with mock.patch.dict(os.environ,
                             {'HOSTRESOLVER_RESOLVER': 'no_such.module.Resolver, local'}):
            self.assertIs(self.config.resolver, local.Resolver)

    def test_value_is_reified(self):
        with mock.patch.dict(os.environ, {'HOSTRESOLVER_RESOLVER': 'local'}):
            first = self.config.resolver
        with mock.patch.dict(os.environ, {'HOSTRESOLVER_RESOLVER': 'native'}):
            self.assertIs(self.config.resolver, first)

    def test_set_shortname(self):
        self.config.resolver = 'local'
        self.assertIs(self.config.resolver, local.Resolver)
        self.config.resolver = 'block'
        self.assertIs(self.config.resolver, native.Resolver)

    def test_set_dotted_name(self):
        self.config.resolver = 'hostresolver.resolver.local.Resolver'
        self.assertIs(self.config.resolver, local.Resolver)

    def test_set_class(self):
        class MyResolver(object):
            pass
        self.config.resolver = MyResolver
        self.assertIs(self.config.resolver, MyResolver)

    def test_set_factory_function(self):
        def make_resolver():
            return local.Resolver()
        self.config.resolver = make_resolver
        self.assertIs(self.config.resolver, make_resolver)

    def test_empty_list(self):
        with self.assertRaises(ImportError):
            self.config.resolver = []

    def test_property_is_read_only(self):
        prop = type(self.config).__dict__["resolver"]
        self.assertIsNone(prop.fset)
        self.config.resolver = "local"
        self.assertIs(self.config.settings["resolver"].get(), local.Resolver)

    def test_bad_name(self):
        with self.assertRaises(ImportError):
            self.config.resolver = 'nodots'
        with self.assertRaises(ImportError):
            self.config.resolver = 'hostresolver.resolver.local.Missing'

    def test_unknown_setting(self):
        with self.assertRaises(AttributeError):
            getattr(self.config, 'no_such_setting')
        with self.assertRaises(AttributeError):
            self.config.set('no_such_setting', 1)

    def test_dir(self):
        self.assertIn('resolver', dir(self.config))
        self.assertIn('resolv_conf', dir(self.config))
        self.assertIn('ignored_domains', dir(self.config))

    def test_documented(self):
        self.assertIn('HOSTRESOLVER_RESOLVER', _config.Resolver.__doc__)
        self.assertIn("'native'", _config.Resolver.__doc__)


class TestOtherSettings(unittest.TestCase):

    def setUp(self):
        self.config = _config.Config()

    def test_resolv_conf_default(self):
        with mock.patch.dict(os.environ):
            os.environ.pop('HOSTRESOLVER_RESOLV_CONF', None)
            self.assertEqual(self.config.resolv_conf, '/etc/resolv.conf')

    def test_resolv_conf_with_comma(self):
        self.config.resolv_conf = '/tmp/a,b.conf'
        self.assertEqual(self.config.resolv_conf, '/tmp/a,b.conf')

    def test_resolv_conf_empty(self):
        with self.assertRaises(ValueError):
            self.config.resolv_conf = '  '

    def test_ignored_domains_default(self):
        with mock.patch.dict(os.environ):
            os.environ.pop('HOSTRESOLVER_IGNORED_DOMAINS', None)
            self.assertEqual(self.config.ignored_domains, ('localdomain',))

    def test_ignored_domains_environment(self):
        with mock.patch.dict(os.environ,
                             {'HOSTRESOLVER_IGNORED_DOMAINS': 'LocalDomain., lan,'}):
            self.assertEqual(self.config.ignored_domains, ('localdomain', 'lan'))

    def test_ignored_domains_none(self):
        self.config.ignored_domains = None
        self.assertEqual(self.config.ignored_domains, ())

    def test_ignored_domains_bad(self):
        with self.assertRaises(ValueError):
            self.config.ignored_domains = [1]


if __name__ == '__main__':
    unittest.main()
