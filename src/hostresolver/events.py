# -*- coding: utf-8 -*-
# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
Publish/subscribe event infrastructure.

When certain "interesting" things happen while resolving host names,
hostresolver will "publish" an event (an object). That event is
delivered to interested "subscribers" (functions that take one
parameter, the event object).

:mod:`zope.event` provides the functionality of `notify` and
`subscribers`. See :mod:`zope.event.classhandler` for a simple
class-based approach to subscribing to a filtered list of events.

Exceptions raised by subscribers propagate to the code that published
the event, without running any remaining subscribers. The exception is
`HostNameResolutionFailed`: the resolution error always reaches the
caller, and a subscriber error is only logged.
"""
from __future__ import absolute_import
from __future__ import division
from __future__ import print_function


__all__ = [
    'subscribers',
    'notify',
    'IResolverSelected',
    'ResolverSelected',
    'IHostNameResolved',
    'HostNameResolved',
    'IHostNameResolutionFailed',
    'HostNameResolutionFailed',
]

from zope.event import subscribers
from zope.event import notify

from zope.interface import Interface
from zope.interface import implementer
from zope.interface import Attribute


class IResolverSelected(Interface):
    """
    The event emitted when the process-wide resolver is created from
    the configuration or installed explicitly.
    """

    resolver = Attribute("The resolver that will answer subsequent lookups.")


@implementer(IResolverSelected)
class ResolverSelected(object):
    """
    Implementation of `IResolverSelected`.
    """

    def __init__(self, resolver):
        self.resolver = resolver

    def __repr__(self):
        return "<%s resolver=%r>" % (self.__class__.__name__, self.resolver)


class IHostNameResolved(Interface):
    """
    The event emitted after a resolver answered a lookup.

    This event is emitted in the thread that ran the lookup, which is a
    threadpool worker for asynchronous calls.
    """

    resolver = Attribute("The resolver that answered.")
    host_name_or_address = Attribute("The argument given to the resolver.")
    host_name = Attribute("The host name that was returned.")


class IHostNameResolutionFailed(Interface):
    """
    The event emitted when a resolver raised an exception.

    The resolver re-raises the exception to the caller once this event
    has been published. If a subscriber raises while handling it, the
    remaining subscribers are skipped and the subscriber error is
    logged, not raised, so it never replaces the original exception.
    """

    resolver = Attribute("The resolver that failed.")
    host_name_or_address = Attribute("The argument given to the resolver.")
    exception = Attribute("The exception the platform raised.")


class _AbstractResolutionEvent(object):

    def __init__(self, resolver, host_name_or_address):
        self.resolver = resolver
        self.host_name_or_address = host_name_or_address


@implementer(IHostNameResolved)
class HostNameResolved(_AbstractResolutionEvent):
    """
    Implementation of `IHostNameResolved`.
    """

    def __init__(self, resolver, host_name_or_address, host_name):
        super(HostNameResolved, self).__init__(resolver, host_name_or_address)
        self.host_name = host_name

    def __repr__(self):
        return "<%s %r -> %r>" % (
            self.__class__.__name__,
            self.host_name_or_address,
            self.host_name,
        )


@implementer(IHostNameResolutionFailed)
class HostNameResolutionFailed(_AbstractResolutionEvent):
    """
    Implementation of `IHostNameResolutionFailed`.
    """

    def __init__(self, resolver, host_name_or_address, exception):
        super(HostNameResolutionFailed, self).__init__(resolver, host_name_or_address)
        self.exception = exception

    def __repr__(self):
        return "<%s %r raised %r>" % (
            self.__class__.__name__,
            self.host_name_or_address,
            self.exception,
        )
