#!/usr/bin/env python3

import sys
import setuptools
import exactq_version

with open("README.md", "r") as fd:
    long_description = fd.read()

setuptools.setup(
    name="exactq",
    version=exactq_version.version,
    author="Florian Schanda",
    author_email="florian@schanda.org.uk",
    description="Exact rational arithmetic with IEEE-754 conversions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/florianschanda/ExactQ",
    project_urls={
        "Bug Tracker"   : "https://github.com/florianschanda/ExactQ/issues",
        "Source Code"   : "https://github.com/florianschanda/ExactQ",
    },
    packages=setuptools.find_packages(exclude=["tests"]),
    py_modules=["exactq_version"],
    python_requires=">=3.6, <4",
    extras_require={
        "test" : ["pytest"],
        "docs" : ["sphinx"],
    },
    entry_points={
        "console_scripts" : [
            "exactq-eval = exactq.evaluator:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
    ],
)
