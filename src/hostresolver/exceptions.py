# -*- coding: utf-8 -*-
# Copyright (c) 2026 hostresolver contributors. See LICENSE for details.
"""
Exceptions.

Resolution failures are never wrapped: whatever the platform resolver
raises (:exc:`socket.herror`, :exc:`socket.gaierror`) reaches the
caller unchanged. The exceptions here belong to the surrounding
network-information helpers.
"""
from __future__ import absolute_import
from __future__ import division
from __future__ import print_function


__all__ = [
    'NetworkInformationError',
]


class NetworkInformationError(OSError):
    """
    Raised when information about this machine's network configuration
    (such as its DNS domain) cannot be read.

    This is an :exc:`OSError`, so existing handlers for socket and file
    errors also catch it.
    """
