#!/usr/bin/env python3
"""
Setup script for minyaml.

minyaml is pure Python: it builds value trees from the events of PyYAML's
pure-Python parser, so there is no extension module to compile.

Install for development with:
    pip install -e .[test]
"""

import os
import re
from setuptools import setup


def get_version():
    """Read __version__ from the package without importing it."""
    init_py = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           'minyaml', '__init__.py')
    with open(init_py, encoding='utf-8') as f:
        match = re.search(r"^__version__ = '([^']+)'", f.read(), re.M)
    if match is None:
        raise RuntimeError("Unable to find __version__ in minyaml/__init__.py")
    return match.group(1)


setup(
    name='minyaml',
    version=get_version(),
    description='YAML 1.1 core schema loader with a pluggable builder registry',
    packages=['minyaml'],
    python_requires='>=3.7',
    install_requires=['PyYAML>=5.1'],
    extras_require={'test': ['pytest']},
)
