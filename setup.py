# coding=utf-8
"""Setup package 'bignumber'."""

import os
import re
from setuptools import setup

with open(os.path.join("src", "bignumber", "version.py")) as file:
    version = re.search(r"^version = '([^']+)'",
                        file.read(), re.MULTILINE).group(1)

with open('README.md') as file:
    long_description = file.read()

setup(
    name="bignumber",
    version=version,
    author="Michael Amrhein",
    author_email="michael@adrhinum.de",
    description="Immutable fractions with arbitrary-precision arithmetic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['bignumber'],
    python_requires=">=3.7",
    extras_require={
        'test': ["pytest", "hypothesis"],
        },
    license='BSD',
    keywords='rational fraction number datatype',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
