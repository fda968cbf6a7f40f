"""Tests for PyYAML loader protocol compatibility.

MinLoader implements the methods PyYAML's load functions call, so it can
be passed as Loader= to yaml.load and yaml.load_all.
"""

import datetime
import re

import pytest
import yaml

import minyaml


class TestLoaderProtocol:
    """Test MinLoader through PyYAML's entry points."""

    def test_loader_has_protocol_methods(self):
        """MinLoader provides the methods yaml.load relies on."""
        for name in ('check_data', 'get_data', 'get_single_data', 'dispose'):
            assert callable(getattr(minyaml.MinLoader, name))

    def test_yaml_load(self):
        """yaml.load with MinLoader."""
        doc = yaml.load('name: Alice\nage: 30\n', Loader=minyaml.MinLoader)
        assert doc == {'name': 'Alice', 'age': 30}

    def test_yaml_load_all(self):
        """yaml.load_all with MinLoader."""
        docs = list(yaml.load_all('--- 1\n--- 2\n', Loader=minyaml.MinLoader))
        assert docs == [1, 2]

    def test_yaml_load_core_types(self):
        """Core schema values come out as with minyaml.load."""
        text = 'a: 0o17\nb: 017\nc: 1:30\nd: 2002-12-14\ne: yes\n'
        doc = yaml.load(text, Loader=minyaml.MinLoader)
        assert doc == {'a': '0o17', 'b': 15, 'c': 90,
                       'd': datetime.date(2002, 12, 14), 'e': True}

    def test_yaml_add_constructor(self, loader_class):
        """yaml.add_constructor reaches MinLoader's registry."""
        yaml.add_constructor('!upper', lambda value, match: value.upper(),
                             Loader=loader_class)
        assert yaml.load('!upper abc', Loader=loader_class) == 'ABC'

    def test_yaml_add_implicit_resolver(self, loader_class):
        """yaml.add_implicit_resolver reaches MinLoader's registry."""
        class Dumper(yaml.SafeDumper):
            pass

        yaml.add_implicit_resolver('!hex', re.compile(r'^0h[0-9a-f]+$'),
                                   first=['0'], Loader=loader_class, Dumper=Dumper)
        loader_class.add_constructor('!hex', lambda value, match: int(value[2:], 16))
        assert yaml.load('color: 0hff0000', Loader=loader_class) == {'color': 0xff0000}
        assert yaml.load('color: "0hff0000"', Loader=loader_class) == {'color': '0hff0000'}

    def test_yaml_load_errors_are_minyaml_errors(self):
        """Errors keep their minyaml classes."""
        with pytest.raises(minyaml.UndefinedAliasError):
            yaml.load('a: *nope', Loader=minyaml.MinLoader)

    def test_same_values_as_safe_loader(self):
        """Ordinary documents load like PyYAML's SafeLoader."""
        text = (
            'name: test\n'
            'count: 3\n'
            'ratio: 0.5\n'
            'enabled: true\n'
            'items:\n'
            '  - one\n'
            '  - two\n'
            'nested: {key: value, empty: ~}\n'
        )
        assert yaml.load(text, Loader=minyaml.MinLoader) == \
            yaml.load(text, Loader=yaml.SafeLoader)
