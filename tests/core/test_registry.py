"""Tests for the builder registry and registration through loader classes."""

import re

import pytest

import minyaml
from minyaml.registry import Builder, Registry, core_registry
from minyaml.tags import (
    NULL_TAG, BOOL_TAG, TRUE_TAG, FALSE_TAG, INT_TAG, FLOAT_TAG,
    TIMESTAMP_TAG, STR_TAG, BINARY_TAG,
)


class TestCoreRegistry:
    """Test the seeded core schema registry."""

    def test_core_order(self):
        """Core builders are seeded in resolution order."""
        assert core_registry().tags() == [
            NULL_TAG, BOOL_TAG, TRUE_TAG, FALSE_TAG, INT_TAG, FLOAT_TAG,
            TIMESTAMP_TAG, STR_TAG, BINARY_TAG,
        ]

    def test_core_builders_are_builtin(self):
        """Every seeded builder is marked builtin."""
        assert all(builder.builtin for builder in core_registry())

    def test_str_and_binary_have_no_matcher(self):
        """str and binary are only reachable through explicit tags."""
        registry = core_registry()
        assert registry.lookup(STR_TAG).matcher is None
        assert registry.lookup(BINARY_TAG).matcher is None
        assert registry.lookup(BOOL_TAG).matcher is None

    def test_core_registry_returns_fresh_instances(self):
        """Each call builds an independent registry."""
        first = core_registry()
        first.add_constructor('!x', str)
        assert '!x' not in core_registry()

    def test_default_registry_is_core(self):
        """The default registry starts with the core schema tags."""
        assert minyaml.default_registry.tags()[:9] == core_registry().tags()


class TestLookupAndScan:
    """Test lookup by tag and implicit scanning."""

    def test_lookup_unknown(self):
        """Unknown tags look up to None."""
        assert core_registry().lookup('!nope') is None

    def test_contains(self):
        """Membership is by tag."""
        registry = core_registry()
        assert INT_TAG in registry
        assert '!nope' not in registry

    def test_scan_first_match_wins(self):
        """The first builder whose matcher succeeds is returned."""
        builder, match = core_registry().scan('42')
        assert builder.tag == INT_TAG
        assert match.group(0) == '42'

    def test_scan_no_match(self):
        """Plain text matches nothing."""
        assert core_registry().scan('hello') is None

    def test_scan_empty_is_null(self):
        """The empty scalar resolves to null."""
        builder, _ = core_registry().scan('')
        assert builder.tag == NULL_TAG

    def test_first_characters_prefilter(self):
        """A matcher is skipped when the first character is not listed."""
        builder = Builder('!point', re.compile(r'^\d+,\d+$'), first=list('0123456789'))
        assert builder.match('1,2')
        assert builder.match('x1,2') is None
        assert builder.match('') is None

    def test_first_characters_as_string(self):
        """A string of first characters behaves like a list of them."""
        builder = Builder('!any', re.compile(r'^.*$'), first='ab')
        assert builder.match('abc')
        assert builder.match('c') is None
        assert builder.match('') is None

    def test_empty_scalar_skips_prefiltered_resolver(self):
        """An empty scalar is never offered to a matcher with a first hint."""
        registry = Registry()
        registry.add_implicit_resolver('!any', re.compile(r'^.*$'), first='ab')
        assert registry.scan('') is None
        assert registry.scan('b')[0].tag == '!any'


class TestRegistration:
    """Test add_constructor and add_implicit_resolver on a registry."""

    def test_new_tag_appended(self):
        """A new tag is appended after every existing builder."""
        registry = core_registry()
        registry.add_constructor('!point', lambda value, match: value)
        assert registry.tags()[-1] == '!point'
        assert len(registry) == 10

    def test_existing_tag_updated_in_place(self):
        """Re-registering a known tag keeps its position."""
        registry = core_registry()
        position = registry.tags().index(INT_TAG)
        registry.add_constructor(INT_TAG, lambda value, match: 'int!')
        assert registry.tags().index(INT_TAG) == position
        assert len(registry) == 9
        builder = registry.lookup(INT_TAG)
        assert builder.builtin is False
        assert builder.matcher is not None

    def test_resolver_keeps_constructor(self):
        """Adding a resolver to a known tag keeps its constructor."""
        registry = core_registry()
        constructor = registry.lookup(STR_TAG).constructor
        registry.add_implicit_resolver(STR_TAG, re.compile(r'^str:'))
        builder = registry.lookup(STR_TAG)
        assert builder.constructor is constructor
        assert builder.builtin is True

    def test_non_callable_constructor(self):
        """A non-callable constructor is rejected and nothing changes."""
        registry = core_registry()
        with pytest.raises(minyaml.NonCallableConstructorError):
            registry.add_constructor('!x', 42)
        assert '!x' not in registry

    def test_non_callable_constructor_is_type_error(self):
        """NonCallableConstructorError is also a TypeError."""
        with pytest.raises(TypeError):
            core_registry().add_constructor('!x', None)

    def test_invalid_resolver(self):
        """A resolver without a match() routine is rejected."""
        registry = core_registry()
        with pytest.raises(minyaml.InvalidResolverError):
            registry.add_implicit_resolver('!x', 'not a regexp')
        assert '!x' not in registry

    def test_resolver_duck_typing(self):
        """Any object with a callable match() is a valid resolver."""
        class Always:
            def match(self, value):
                return True
        registry = core_registry()
        registry.add_implicit_resolver('!x', Always())
        assert '!x' in registry

    def test_copy_is_independent(self):
        """Registering on a copy leaves the original untouched."""
        original = core_registry()
        clone = original.copy()
        clone.add_constructor(INT_TAG, lambda value, match: 0)
        assert original.lookup(INT_TAG).builtin is True
        assert isinstance(clone, Registry)


class TestLoaderRegistration:
    """Test registration through loader classes."""

    def test_subclass_gets_private_copy(self):
        """Registering on a subclass does not affect the default registry."""
        class Loader(minyaml.MinLoader):
            pass

        Loader.add_constructor('!upper', lambda value, match: value.upper())
        assert '!upper' in Loader.registry
        assert '!upper' not in minyaml.default_registry
        assert minyaml.load('!upper abc', Loader=Loader) == 'ABC'

    def test_instance_registry(self):
        """A registry passed to the loader is used instead of the class one."""
        registry = core_registry()
        registry.add_constructor('!rev', lambda value, match: value[::-1])
        loader = minyaml.MinLoader('!rev abc', registry=registry)
        try:
            assert loader.get_single_data() == 'cba'
        finally:
            loader.dispose()

    def test_module_level_registration(self, loader_class):
        """minyaml.add_constructor registers on the given loader class."""
        minyaml.add_constructor('!twice', lambda value, match: value * 2,
                                Loader=loader_class)
        assert minyaml.load('!twice ab', Loader=loader_class) == 'abab'

    def test_module_level_resolver(self, loader_class):
        """minyaml.add_implicit_resolver makes plain scalars resolve."""
        minyaml.add_implicit_resolver('!point', re.compile(r'^(\d+),(\d+)$'),
                                      first=list('0123456789'),
                                      Loader=loader_class)
        minyaml.add_constructor(
            '!point',
            lambda value, match: (int(match.group(1)), int(match.group(2))),
            Loader=loader_class)
        assert minyaml.load('[1,2, "3,4"]', Loader=loader_class)[1] == 2
        assert minyaml.load('p: 3,4', Loader=loader_class) == {'p': (3, 4)}

    def test_resolver_without_constructor(self, loader_class):
        """A scalar resolved to a tag without constructor stays a string."""
        loader_class.add_implicit_resolver('!word', re.compile(r'^word$'))
        assert minyaml.load('word', Loader=loader_class) == 'word'
