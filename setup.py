# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Setup and installation script for b64kit."""


# standard libs
import re
from setuptools import setup, find_packages


# get long description from README.rst
with open('README.rst', mode='r') as readme:
    long_description = readme.read()


# get package metadata by parsing __init__ module
with open('src/b64kit/__init__.py', mode='r') as source:
    content = source.read().strip()
    metadata = {key: re.search(key + r'\s*=\s*[\'"]([^\'"]*)[\'"]', content).group(1)
                for key in ['__version__', '__developer__', '__contact__',
                            '__description__', '__license__', '__keywords__']}


setup(
    name                 = 'b64kit',
    version              = metadata['__version__'],
    author               = metadata['__developer__'],
    author_email         = metadata['__contact__'],
    description          = metadata['__description__'],
    license              = metadata['__license__'],
    keywords             = metadata['__keywords__'],
    package_dir          = {'': 'src'},
    packages             = find_packages('src'),
    long_description     = long_description,
    long_description_content_type = 'text/x-rst',
    classifiers          = ['Development Status :: 4 - Beta',
                            'Topic :: Software Development :: Libraries',
                            'Programming Language :: Python :: 3',
                            'Programming Language :: Python :: 3.8',
                            'Programming Language :: Python :: 3.9',
                            'Programming Language :: Python :: 3.10',
                            'Operating System :: POSIX :: Linux', ],
    entry_points         = {'console_scripts': ['b64kit=b64kit.apps.b64kit:main']},
    python_requires      = '>=3.8',
    install_requires     = ['cmdkit>=2.6.1', 'rich>=9.4.0', ],
    extras_require       = {'test': ['pytest>=7.0.0', 'hypothesis>=6.0.0', ]},
)
