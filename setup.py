#!/usr/bin/env python
"""hostresolver build & installation script"""
from __future__ import print_function
import os.path
import re

from setuptools import setup
from setuptools import find_packages

THIS_DIR = os.path.dirname(__file__)


def read(*names):
    """Read a file path relative to this file."""
    with open(os.path.join(THIS_DIR, *names)) as f:
        return f.read()

def read_version(name="src/hostresolver/__init__.py"):
    contents = read(name)
    version = re.search(r"__version__\s*=\s*'(.*)'", contents, re.M).group(1)
    assert version, "could not read version"
    return version


__version__ = read_version()


install_requires = [
    # The native threadpool that runs lookups without blocking the
    # caller, and the hub that delivers their results.
    'gevent >= 20.12.0',
    # For event notification.
    'zope.event',
    # For event definitions, and our own interfaces.
    'zope.interface',
]


setup(
    name='hostresolver',
    version=__version__,
    description='Canonical DNS host names, with a local machine name fallback',
    long_description=read('README.rst'),
    license='MIT',
    keywords='dns hostname resolver gethostbyaddr gevent',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=install_requires,
    extras_require={
        'test': [
            'coverage >= 5.0',
        ],
    },
    zip_safe=False,
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
    ],
    python_requires=">=3.8",
)
