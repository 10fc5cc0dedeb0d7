#!/usr/bin/python
"""Resolve host names given on the command line concurrently.

Each lookup runs in gevent's native threadpool, so the main greenlet
keeps running while the platform resolver works.

You can choose between resolvers using the HOSTRESOLVER_RESOLVER
environment variable. To answer every lookup with this machine's name:

    HOSTRESOLVER_RESOLVER=local python resolve_host_names.py example.com
"""
from __future__ import print_function
import logging
import socket
import sys

import gevent

import hostresolver


def main(names):
    results = [(name, hostresolver.resolve_host_name_async(name)) for name in names]
    gevent.joinall([result for _, result in results], timeout=10)
    for name, result in results:
        try:
            print('%s = %s' % (name, result.get(block=False)))
        except (socket.herror, socket.gaierror) as ex:
            print('%s failed with %s' % (name, ex))
        except gevent.Timeout:
            print('%s did not finish' % (name,))
    print('this machine is %s' % (hostresolver.get_host_name(),))


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG if '-v' in sys.argv else logging.WARNING)
    main([arg for arg in sys.argv[1:] if arg != '-v'] or ['localhost', 'nonexistent.invalid'])
