# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
A resolver that directly uses the system's resolver functions.

Importing this module raises :exc:`ImportError` on platforms without a
DNS resolution facility, which makes the ``resolver`` setting move on to
its next choice.
"""
import _socket
from _socket import AF_INET
from _socket import AF_INET6

from zope.interface import implementer

from hostresolver._compat import hostname_types
from hostresolver._interfaces import IHostNameResolver
from hostresolver.resolver import AbstractResolver

for _name in ('gethostbyaddr', 'gethostbyname_ex', 'inet_pton'):
    if not hasattr(_socket, _name): # pragma: no cover
        raise ImportError("This platform has no DNS resolution facility (%s)" % (_name,))
del _name

__all__ = [
    'Resolver',
]

#: Names that denote this machine. They are looked up through its
#: configured host name, so the answer is this machine's canonical name
#: and not ``localhost``.
LOCAL_ALIASES = frozenset((
    '',
    'localhost',
    '127.0.0.1',
    '::1',
))


def _as_text(host_name_or_address):
    if isinstance(host_name_or_address, str):
        return host_name_or_address
    return bytes(host_name_or_address).decode('latin-1')


def _resolve_special(host_name_or_address):
    if host_name_or_address is None:
        return _socket.gethostname()

    if not isinstance(host_name_or_address, hostname_types):
        raise TypeError("argument 1 must be str, bytes or bytearray, not %s"
                        % (type(host_name_or_address),))

    if _as_text(host_name_or_address).strip().lower() in LOCAL_ALIASES:
        return _socket.gethostname()
    return host_name_or_address


def is_ip_address(host):
    """
    Is *host* a textual IPv4 or IPv6 address (and not a name)?
    """
    text = _as_text(host)
    for family in (AF_INET, AF_INET6):
        try:
            _socket.inet_pton(family, text)
        except (OSError, ValueError):
            continue
        return True
    return False


@implementer(IHostNameResolver)
class Resolver(AbstractResolver):
    """
    Resolves through the platform: addresses with a reverse lookup
    (:func:`socket.gethostbyaddr`), names with a forward lookup
    (:func:`socket.gethostbyname_ex`). Either way the canonical name of
    the entry found is returned.

    Nothing is cached, retried or timed out here; failures such as
    :exc:`socket.herror` and :exc:`socket.gaierror` propagate to the
    caller.
    """

    def _resolve_host_name(self, host_name_or_address):
        host = _resolve_special(host_name_or_address)
        if is_ip_address(host):
            return _socket.gethostbyaddr(host)[0]
        return _socket.gethostbyname_ex(host)[0]
