# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
The host name resolution operations.

There is one process-wide resolver, created on first use from
:attr:`hostresolver.config.resolver` or installed explicitly with
:func:`set_resolver`. :func:`resolve_host_name` asks it directly;
:func:`resolve_host_name_async` runs exactly one such call on a native
threadpool so the caller is not blocked while the platform resolves.
"""
from __future__ import absolute_import

import logging

from hostresolver._config import config
from hostresolver.events import notify
from hostresolver.events import ResolverSelected

__all__ = [
    'get_resolver',
    'set_resolver',
    'resolve_host_name',
    'resolve_host_name_async',
]

logger = logging.getLogger(__name__)

_resolver = None


def get_resolver():
    """
    Return the resolver used by this module's functions, creating it
    from the configuration if needed.
    """
    global _resolver
    resolver = _resolver
    if resolver is None:
        # Resolvers are stateless; a racing creation only discards one instance.
        resolver_class = config.resolver
        resolver = resolver_class()
        logger.debug("Selected resolver %r", resolver)
        _resolver = resolver
        notify(ResolverSelected(resolver))
    return resolver


def set_resolver(resolver):
    """
    Install *resolver* as the process-wide resolver.

    The previous resolver, if any, is closed. Passing ``None`` discards
    the current resolver so that the next lookup selects one from the
    configuration again.
    """
    global _resolver
    old = _resolver
    _resolver = resolver
    if old is not None and old is not resolver:
        old.close()
    if resolver is not None:
        logger.debug("Installed resolver %r", resolver)
        notify(ResolverSelected(resolver))


def resolve_host_name(host_name_or_address):
    """
    Return the canonical DNS host name of *host_name_or_address*.

    With the native resolver this is a forward lookup for names and a
    reverse lookup for addresses. With the local resolver the argument
    is ignored and this machine's name is returned.

    :raises socket.herror: If the platform cannot find the host. This
        and any other platform failure is raised unchanged.
    """
    return get_resolver().resolve_host_name(host_name_or_address)


def _register_not_errors(hub):
    # A failed lookup is an answer for the caller, not a crash the hub
    # should report.
    from _socket import gaierror
    from _socket import herror
    if gaierror not in hub.NOT_ERROR:
        hub.NOT_ERROR += (gaierror, herror)


def spawn_in_pool(pool, func, *args):
    """
    Run ``func(*args)`` in *pool*, or in the current hub's threadpool
    if *pool* is None, and return a :class:`gevent.event.AsyncResult`.

    This must be called from the thread running the pool's hub.
    """
    from gevent.hub import get_hub
    if pool is None:
        hub = get_hub()
        pool = hub.threadpool
    else:
        hub = pool.hub
    _register_not_errors(hub)
    return pool.spawn(func, *args)


def resolve_host_name_async(host_name_or_address, pool=None):
    """
    Like :func:`resolve_host_name`, but the lookup runs in a native
    thread of *pool* (by default, the current hub's threadpool).

    Returns immediately with a :class:`gevent.event.AsyncResult`.
    Calling its ``get`` method waits cooperatively and returns the host
    name, or raises whatever the lookup raised. There is no
    cancellation, and outstanding lookups complete in no particular
    order.
    """
    resolver = get_resolver()
    return spawn_in_pool(pool, resolver.resolve_host_name, host_name_or_address)
