"""Ordered registry of tag builders.

A builder pairs a tag with an optional implicit matcher and an optional
constructor. Order matters: implicit resolution walks the registry from
the first builder to the last and the first matching builder wins.
Registering a tag that is already known updates that builder in place;
a new tag is appended after every existing builder.
"""

import logging

from .constructor import (
    NULL_REGEXP, TRUE_REGEXP, FALSE_REGEXP,
    INT_REGEXP, FLOAT_REGEXP, TIMESTAMP_REGEXP,
    construct_yaml_null, construct_yaml_bool,
    construct_yaml_true, construct_yaml_false,
    construct_yaml_int, construct_yaml_float,
    construct_yaml_timestamp, construct_yaml_str,
    construct_yaml_binary,
)
from .error import InvalidResolverError, NonCallableConstructorError
from .tags import (
    NULL_TAG, BOOL_TAG, TRUE_TAG, FALSE_TAG, INT_TAG, FLOAT_TAG,
    TIMESTAMP_TAG, STR_TAG, BINARY_TAG,
)

_LOG = logging.getLogger(__name__)


class Builder:
    """A tag with its implicit matcher and constructor.

    Attributes:
        tag: The tag this builder answers to
        matcher: Object with a match(value) method, or None if the tag is
            only reachable through an explicit tag
        constructor: Callable building the value, or None
        first: Optional list of first characters the matcher applies to
        builtin: True while the constructor is the core schema one
    """

    def __init__(self, tag, matcher=None, constructor=None, first=None,
                 builtin=False):
        self.tag = tag
        self.matcher = matcher
        self.constructor = constructor
        self.first = None if first is None else list(first)
        self.builtin = builtin

    def match(self, value):
        """Return the matcher's result for `value`, or None."""
        if self.matcher is None:
            return None
        if self.first is not None and value[:1] not in self.first:
            return None
        return self.matcher.match(value)

    def copy(self):
        return Builder(self.tag, self.matcher, self.constructor, self.first,
                       self.builtin)

    def __repr__(self):
        return '%s(tag=%r, matcher=%r, constructor=%r)' % (
            self.__class__.__name__, self.tag, self.matcher, self.constructor)


class Registry:
    """Ordered collection of builders, looked up by tag or by matching."""

    def __init__(self, builders=()):
        self._builders = list(builders)

    def __iter__(self):
        return iter(self._builders)

    def __len__(self):
        return len(self._builders)

    def __contains__(self, tag):
        return self.lookup(tag) is not None

    def tags(self):
        return [builder.tag for builder in self._builders]

    def copy(self):
        """Return an independent registry with the same builders in order."""
        return self.__class__([builder.copy() for builder in self._builders])

    def register(self, tag, matcher=None, constructor=None, first=None):
        """Add or update the builder for `tag`.

        Only the fields that are given replace those of an existing builder.
        """
        builder = self.lookup(tag)
        if builder is None:
            builder = Builder(tag, matcher, constructor, first)
            self._builders.append(builder)
            _LOG.debug("Appended builder for %s at position %d",
                       tag, len(self._builders) - 1)
            return builder
        if constructor is not None:
            builder.constructor = constructor
            builder.builtin = False
        if matcher is not None:
            builder.matcher = matcher
            builder.first = None if first is None else list(first)
        _LOG.debug("Updated builder for %s", tag)
        return builder

    def add_constructor(self, tag, constructor):
        """Register a constructor for `tag`.

        Scalar constructors are called as constructor(value, match), where
        match is None for explicitly tagged scalars. Collection constructors
        are called as constructor(data) with the already built list or dict.
        """
        if not callable(constructor):
            raise NonCallableConstructorError("constructor argument is not callable")
        return self.register(tag, constructor=constructor)

    def add_implicit_resolver(self, tag, regexp, first=None):
        """Register an implicit matcher for `tag`.

        `regexp` is anything with a match(value) method, usually a compiled
        regular expression.
        """
        if not callable(getattr(regexp, 'match', None)):
            raise InvalidResolverError("resolver argument has no match() routine")
        return self.register(tag, matcher=regexp, first=first)

    def lookup(self, tag):
        """Return the builder registered for exactly `tag`, or None."""
        for builder in self._builders:
            if builder.tag == tag:
                return builder
        return None

    def scan(self, value):
        """Return (builder, match) for the first builder matching `value`."""
        for builder in self._builders:
            match = builder.match(value)
            if match:
                return builder, match
        return None


def core_registry():
    """Return a new registry seeded with the YAML 1.1 core schema."""
    return Registry([
        Builder(NULL_TAG, NULL_REGEXP, construct_yaml_null, builtin=True),
        Builder(BOOL_TAG, None, construct_yaml_bool, builtin=True),
        Builder(TRUE_TAG, TRUE_REGEXP, construct_yaml_true, builtin=True),
        Builder(FALSE_TAG, FALSE_REGEXP, construct_yaml_false, builtin=True),
        Builder(INT_TAG, INT_REGEXP, construct_yaml_int, builtin=True),
        Builder(FLOAT_TAG, FLOAT_REGEXP, construct_yaml_float, builtin=True),
        Builder(TIMESTAMP_TAG, TIMESTAMP_REGEXP, construct_yaml_timestamp, builtin=True),
        Builder(STR_TAG, None, construct_yaml_str, builtin=True),
        Builder(BINARY_TAG, None, construct_yaml_binary, builtin=True),
    ])


default_registry = core_registry()
