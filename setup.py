#!/usr/bin/env python
"""
rook
====

rook is a Python client for `Sentry <http://getsentry.com/>`_ built around
pluggable transports. Besides the classic blocking HTTP transport it ships a
pooled ``requests`` transport, a UDP transport, and a queued transport which
defers delivery to a background task when the host (an asyncio event loop,
module initialisation, ...) does not allow blocking network I/O.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('rook/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = [
    'requests>=2.0',
]

tests_require = [
    'mock',
    'pytest>=3.2.0',
    'pytest-timeout',
    'responses',
]


setup(
    name='rook',
    version=version,
    author='Sentry',
    author_email='hello@getsentry.com',
    description='rook is a client for Sentry (https://getsentry.com)',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.7',
    extras_require={
        'tests': tests_require,
    },
    license='BSD',
    install_requires=install_requires,
    include_package_data=True,
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
