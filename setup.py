#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="pocketcalc",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="a two-register pocket calculator, driven by a key event stream",
    long_description="A pocket calculator engine: an operand editor nested inside an expression sequencer, with inactivity timeouts.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords=["calculator", "trio"],
    python_requires=">=3.11",
    install_requires=[
        "cattrs>=23.1.0",
        "msgspec",
        "trio>=0.22.0",
        "tricycle>=0.2.1",
    ],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "pocketcalc = pocketcalc.app:main",
        ],
    },
)
