# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
Information about the local computer's network identity.
"""
from __future__ import absolute_import

import logging

from hostresolver._config import config
from hostresolver.api import resolve_host_name
from hostresolver.api import spawn_in_pool
from hostresolver.exceptions import NetworkInformationError
from hostresolver.resolver import _machine_name

__all__ = [
    'get_machine_name',
    'get_domain_name',
    'get_host_name',
    'get_host_name_async',
]

logger = logging.getLogger(__name__)


def get_machine_name():
    """
    Return the name of this machine, as the operating system reports it.
    """
    return _machine_name()


def get_domain_name(path=None):
    """
    Return the DNS domain of this machine, or ``''`` if it has none.

    The domain is read from *path*, a file in ``resolv.conf(5)`` format
    (by default :attr:`hostresolver.config.resolv_conf`). A ``domain``
    directive is preferred over the first entry of ``search``; for each,
    the last occurrence wins. A trailing dot is removed.

    :raises NetworkInformationError: If the file cannot be read.
    """
    if path is None:
        path = config.resolv_conf
    try:
        with open(path) as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as ex:
        raise NetworkInformationError(
            "Cannot read the domain name from %s: %s" % (path, ex)) from ex

    domain = search = None
    for line in lines:
        parts = line.split()
        if len(parts) < 2 or parts[0][0] in '#;':
            continue
        if parts[0] == 'domain':
            domain = parts[1]
        elif parts[0] == 'search':
            search = parts[1]
    return (domain or search or '').rstrip('.')


def get_host_name():
    """
    Return the fully qualified host name of this machine.

    This is the machine name joined with the DNS domain, unless the
    domain is empty or one of :attr:`hostresolver.config.ignored_domains`,
    in which case it is just the machine name. If the domain cannot be
    determined, the machine name is resolved with
    :func:`hostresolver.resolve_host_name` instead, and if that fails
    too, the plain machine name is returned.
    """
    machine_name = get_machine_name()
    try:
        domain = get_domain_name()
    except NetworkInformationError as ex:
        logger.debug("No domain name (%s); resolving %r", ex, machine_name)
        try:
            return resolve_host_name(machine_name)
        except OSError as ex:
            logger.debug("Cannot resolve %r: %r", machine_name, ex)
            return machine_name

    if not domain or domain.lower() in config.ignored_domains:
        return machine_name
    if machine_name.lower().endswith('.' + domain.lower()):
        return machine_name
    return '%s.%s' % (machine_name, domain)


def get_host_name_async(pool=None):
    """
    Like :func:`get_host_name`, but runs in a native thread of *pool*
    and returns a :class:`gevent.event.AsyncResult`.
    """
    return spawn_in_pool(pool, get_host_name)
