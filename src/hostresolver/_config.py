# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
hostresolver tunables.

This should be used as ``from hostresolver import config``. That variable
is an object of :class:`Config`.

Each tunable is a :class:`Setting` subclass. Declaring one registers it
and gives :class:`Config` a read-only property of the same name; values
are changed with :meth:`Config.set` or plain attribute assignment.
"""

from __future__ import print_function, absolute_import, division

import importlib
import os
import textwrap

from hostresolver._compat import string_types

__all__ = [
    'config',
]

ALL_SETTINGS = []


def _describe(setting_kind):
    parts = [textwrap.dedent(setting_kind.desc).strip()]
    shortnames = getattr(setting_kind, 'shortname_map', None)
    if shortnames is not None:
        parts.append(
            "This names an object to import: a dotted name, or several "
            "dotted names in preference order (comma separated in the "
            "environment), the first importable one winning. In code, "
            "the object itself may be given instead. Shorthand names are %r."
            % (sorted(shortnames),))
    validate_doc = getattr(setting_kind.validate, '__doc__', None)
    if validate_doc:
        parts.append(textwrap.dedent(validate_doc).strip())
    parts.append("The default value is ``%r``." % (setting_kind.default,))
    parts.append("The environment variable ``%s`` overrides the default."
                 % (setting_kind.environment_key,))
    return '\n\n'.join(parts)


class SettingType(type):
    # pylint:disable=bad-mcs-classmethod-argument

    def __new__(cls, name, bases, cls_dict):
        if not any(isinstance(base, SettingType) for base in bases):
            # The root class itself is not a setting.
            return type.__new__(cls, name, bases, cls_dict)

        cls_dict.setdefault('name', name.lower())
        cls_dict.setdefault('environment_key',
                            'HOSTRESOLVER_' + cls_dict['name'].upper())
        new_class = type.__new__(cls, name, bases, cls_dict)
        new_class.desc = new_class.__doc__ = _describe(new_class)
        ALL_SETTINGS.append(new_class)

        setting_name = new_class.name
        reader = property(lambda self: self.settings[setting_name].get(),
                          doc=new_class.__doc__)
        setattr(Config, setting_name, reader)
        return new_class


def validate_path(value):
    """
    This is a filesystem path.
    """
    if not isinstance(value, string_types) or not value.strip():
        raise ValueError("Not a valid path: %r" % (value,))
    return value.strip()

def validate_domain_list(value):
    """
    This is a list of DNS domain names, compared case-insensitively.

    In the environment variable, the names are separated by commas.
    """
    if value is None:
        return ()
    result = []
    for item in value:
        if not isinstance(item, string_types):
            raise ValueError("Not a valid domain name: %r" % (item,))
        item = item.strip().rstrip('.').lower()
        if item:
            result.append(item)
    return tuple(result)


class Setting(metaclass=SettingType):
    name = None
    default = None
    environment_key = None
    #: Whether strings are split on commas before validation.
    comma_separated = True

    desc = """\

    A long ReST description.

    The first line should be a single sentence.

    """

    def validate(self, value):
        raise NotImplementedError()

    def _convert(self, value):
        if self.comma_separated and isinstance(value, string_types):
            return value.split(',')
        return value

    def get(self):
        # An explicit set() wins; otherwise the environment is read once
        # and the result kept so later calls agree.
        if 'value' not in self.__dict__:
            raw = os.environ.get(self.environment_key, self.default)
            self.value = self.validate(self._convert(raw))
        return self.value

    def set(self, value):
        self.value = self.validate(self._convert(value))


def make_settings():
    """
    Return fresh instances of all classes defined in `ALL_SETTINGS`.
    """
    settings = {}
    for setting_kind in ALL_SETTINGS:
        assert setting_kind.name not in settings
        settings[setting_kind.name] = setting_kind()
    return settings


class Config(object):
    """
    Global configuration for hostresolver.

    There is one instance of this object at ``hostresolver.config``. If
    you are going to make changes in code, instead of using the
    documented environment variables, you need to make the changes
    before the first host name is resolved. For example::

        >>> from hostresolver import config
        >>> config.resolver = 'local'

        >>> from hostresolver import get_resolver
        >>> type(get_resolver()).__module__
        'hostresolver.resolver.local'

    """

    def __init__(self):
        self.settings = make_settings()

    def __setattr__(self, name, value):
        if name != "settings" and name in self.settings:
            self.set(name, value)
        else:
            super(Config, self).__setattr__(name, value)

    def set(self, name, value):
        if name not in self.settings:
            raise AttributeError("No configuration setting for: %r" % name)
        self.settings[name].set(value)

    def __dir__(self):
        return list(self.settings)


class ImportableSetting(object):

    shortname_map = {}

    def validate(self, value):
        if callable(value):
            return value
        dotted_names = [self.shortname_map.get(x.strip(), x.strip()) for x in value]
        if not dotted_names:
            raise ImportError('Cannot import from empty list: %r' % (value, ))
        for dotted_name in dotted_names[:-1]:
            try:
                return self._import(dotted_name)
            except ImportError:
                pass
        return self._import(dotted_names[-1])

    def _import(self, dotted_name):
        module_name, _, attr = dotted_name.rpartition('.')
        if not module_name:
            raise ImportError("Cannot import %r. "
                              "Required format: package.module.name, "
                              "or one of %r"
                              % (dotted_name, sorted(self.shortname_map)))
        module = importlib.import_module(module_name)
        try:
            return getattr(module, attr)
        except AttributeError:
            raise ImportError('Cannot import %r from %r' % (attr, module_name)) from None


class Resolver(ImportableSetting, Setting):

    desc = """\
    The callable that will be used to create the resolver returned
    by :func:`hostresolver.get_resolver`.

    The ``native`` resolver asks the platform's DNS facility. It cannot
    be imported where that facility does not exist, and the next
    entry is tried instead. The ``local`` resolver ignores its argument
    and answers with the name of this machine.
    """

    default = [
        'native',
        'local',
    ]

    shortname_map = {
        'native': 'hostresolver.resolver.native.Resolver',
        'local': 'hostresolver.resolver.local.Resolver',
    }

    shortname_map['block'] = shortname_map['native']


class ResolvConf(Setting):
    name = 'resolv_conf'
    comma_separated = False

    desc = """\
    The resolver configuration file consulted to find the DNS domain
    of this machine.

    The ``domain`` directive is preferred; otherwise the first entry of
    the ``search`` directive is used.
    """

    default = '/etc/resolv.conf'

    validate = staticmethod(validate_path)


class IgnoredDomains(Setting):
    name = 'ignored_domains'

    desc = """\
    DNS domains that are treated as if this machine had no domain
    at all when building its fully qualified host name.
    """

    default = 'localdomain'

    validate = staticmethod(validate_domain_list)


config = Config()
