#!/usr/bin/env python
import os

from setuptools import setup, find_packages

with open('requirements.txt') as requirements:
    requires = [line.strip() for line in requirements if line.strip()]

version = os.environ.get('VERSION')

if version is None:
    with open(os.path.join('.', 'VERSION')) as version_file:
        version = version_file.read().strip()


setup_options = {
    'name': 'circular-api',
    'version': version,
    'description': 'Client library for the Circular ledger network access gateway',
    'author': 'Circular Global Ledgers',
    'packages': find_packages(include=['circular_api', 'circular_api.*']),
    'license': "Apache License 2.0",
    'install_requires': requires,
    'extras_require': {
        'tests': ['pytest>=6.0', 'pytest-mock>=3.0', 'pytest-asyncio>=0.21', 'freezegun>=1.0'],
    },
    'entry_points': {
        'console_scripts': [
            'circular=circular_api.__main__:main'
        ],
    },
    'python_requires': '>=3.7',
    'classifiers': [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3 :: Only'
    ]
}

setup(**setup_options)
