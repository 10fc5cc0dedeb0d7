# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
A resolver for environments without DNS resolution.
"""
from zope.interface import implementer

from hostresolver._interfaces import IHostNameResolver
from hostresolver.resolver import AbstractResolver
from hostresolver.resolver import _machine_name

__all__ = [
    'Resolver',
]


@implementer(IHostNameResolver)
class Resolver(AbstractResolver):
    """
    Answers every lookup with the name of the local machine.

    The argument is ignored, so ``None``, empty strings and values of
    any type are accepted. This never raises.
    """

    uses_network = False

    def _resolve_host_name(self, host_name_or_address):
        return _machine_name()
