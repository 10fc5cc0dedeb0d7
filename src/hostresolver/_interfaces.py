# -*- coding: utf-8 -*-
# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
Interfaces hostresolver uses that don't belong any one place.

These mostly exist for documentation and testing purposes; concrete
resolvers declare them with :func:`zope.interface.implementer` and the
tests verify them with :mod:`zope.interface.verify`.
"""
from __future__ import absolute_import
from __future__ import division
from __future__ import print_function

from zope.interface import Interface
from zope.interface import Attribute

# pylint:disable=no-method-argument, unused-argument, no-self-argument

__all__ = [
    'IHostNameResolver',
]

class IHostNameResolver(Interface):
    """
    The common interface expected for all host name resolvers.

    A resolver is stateless: it has exactly one state (ready to
    resolve) and concurrent calls do not interact. Resolvers never
    cache, retry, or impose their own timeouts.
    """

    uses_network = Attribute(
        "Boolean indicating whether this resolver consults a DNS facility. "
        "If false, the argument to `resolve_host_name` is ignored and the "
        "local machine name is returned."
    )

    def resolve_host_name(host_name_or_address):
        """
        Return the canonical host name for *host_name_or_address*.

        *host_name_or_address* is a host name or a textual IPv4/IPv6
        address. No validation is done beyond what the underlying
        platform call does, and no normalization is applied to the
        result.

        Failures reported by the platform (for example
        :exc:`socket.herror` for an unknown host) propagate unchanged.
        """

    def close():
        """
        Release any resources held by the resolver.

        Resolvers in this package hold none, but replacing the
        process-wide resolver always calls this on the old one.
        """
