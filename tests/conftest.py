import sys
import os

import pytest

_tests_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir = os.path.abspath(os.path.join(_tests_dir, '..'))

# Run against the source tree even without 'pip install -e .'
sys.path.insert(0, _src_dir)

import minyaml  # noqa: E402


@pytest.fixture
def loader_class():
    """A MinLoader subclass with a private copy of the default registry."""
    class IsolatedLoader(minyaml.MinLoader):
        registry = minyaml.core_registry()
    return IsolatedLoader
