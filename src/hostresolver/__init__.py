# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
hostresolver resolves a host name or address to its canonical DNS
host name, degrading to the local machine name where the platform has
no resolver.

The lookup can be run without blocking the caller: see
:func:`resolve_host_name_async`.
"""

from __future__ import absolute_import

__version__ = '1.0.0.dev0'

__all__ = [
    'config',
    'get_host_name',
    'get_host_name_async',
    'get_machine_name',
    'get_resolver',
    'resolve_host_name',
    'resolve_host_name_async',
    'set_resolver',
]

from hostresolver._config import config
from hostresolver.api import get_resolver
from hostresolver.api import set_resolver
from hostresolver.api import resolve_host_name
from hostresolver.api import resolve_host_name_async
from hostresolver.netinfo import get_host_name
from hostresolver.netinfo import get_host_name_async
from hostresolver.netinfo import get_machine_name
