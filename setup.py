#!/usr/bin/env python

"""Set up the pycalconv calendar conversion package.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pycalconv

To install with the test requirements:

    pip install 'pycalconv[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pycalconv', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pycalconv/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

with open(readme) as f:
    long_description = f.read()

setup(
    name='pycalconv',
    version=VERSION,
    author='pycalconv developers',
    description='Jalali, Gregorian and Hijri calendar conversion',
    keywords='calendar jalali persian hijri gregorian julian day',
    packages=['pycalconv'],
    license='BSD License',
    long_description=long_description,
    python_requires='>=3.9',
    install_requires=['tzlocal>=4.0'],
    extras_require=dict(test=['pytest', 'jdcal']),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ],
)
