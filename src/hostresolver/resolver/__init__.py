# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
Host name resolvers.

Every resolver implements
:class:`hostresolver._interfaces.IHostNameResolver`. Which one is used
is chosen at startup from :attr:`hostresolver.config.resolver`:

* :class:`hostresolver.resolver.native.Resolver` asks the platform's DNS
  facility and is only importable where that facility exists;
* :class:`hostresolver.resolver.local.Resolver` ignores its argument and
  returns the name of this machine.
"""
import logging
import platform

from hostresolver.events import notify
from hostresolver.events import HostNameResolved
from hostresolver.events import HostNameResolutionFailed

__all__ = [
    'AbstractResolver',
]

logger = logging.getLogger(__name__)


def _machine_name():
    # platform.node() needs no socket support and returns '' when the
    # name cannot be determined.
    return platform.node() or 'localhost'


class AbstractResolver(object):
    """
    Shared behaviour of the resolvers: logging and event publication
    around :meth:`_resolve_host_name`, which subclasses implement.

    Exceptions from the subclass are re-raised unchanged, even if a
    subscriber to the failure event raises (that error is logged).
    """

    uses_network = True

    def close(self):
        pass

    def resolve_host_name(self, host_name_or_address):
        logger.debug("%r resolving %r", self, host_name_or_address)
        try:
            host_name = self._resolve_host_name(host_name_or_address)
        except Exception as ex:
            logger.debug("%r failed to resolve %r: %r", self, host_name_or_address, ex)
            try:
                notify(HostNameResolutionFailed(self, host_name_or_address, ex))
            except Exception: # pylint:disable=broad-except
                logger.exception("Subscriber failed handling the failure to resolve %r",
                                 host_name_or_address)
            raise
        notify(HostNameResolved(self, host_name_or_address, host_name))
        return host_name

    def _resolve_host_name(self, host_name_or_address):
        raise NotImplementedError()

    def __repr__(self):
        return '<%s.%s at 0x%x>' % (
            self.__class__.__module__,
            self.__class__.__name__,
            id(self),
        )
