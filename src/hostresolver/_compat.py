# -*- coding: utf-8 -*-
"""
internal hostresolver type bridges. Not for external use.
"""

from __future__ import print_function, absolute_import, division

## Important: This module should not have any other hostresolver imports


## Types

string_types = (str,)

hostname_types = tuple(set(string_types + (bytearray, bytes)))
