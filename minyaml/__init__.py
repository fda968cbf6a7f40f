"""
minyaml - YAML 1.1 core schema loader with a pluggable builder registry

This module turns YAML event streams into plain Python values: dicts,
lists, sets, pair lists, and core schema scalars. Tags resolve through an
ordered registry of builders that callers can extend with their own
constructors and implicit resolvers.

Key features:
- Core schema scalars: null, bool, int (binary, octal, hex, base 60),
  float, timestamp, str, binary
- Merge keys, !!set and !!pairs, and anchors that share one object
- PyYAML loader protocol: MinLoader works as ``yaml.load(..., Loader=...)``
- dump() and dump_all() writing YAML that loads back to an equal tree

Example:
    >>> import minyaml
    >>> doc = minyaml.load("base: &b {x: 1}\\nderived: {<<: *b, y: 2}")
    >>> doc['derived']
    {'x': 1, 'y': 2}
    >>> minyaml.load("{a}")
    {'a'}
"""

from minyaml.error import (
    Mark,
    YAMLError,
    MarkedYAMLError,
    MalformedInputError,
    ComposerError,
    UnexpectedEventError,
    UndefinedAliasError,
    MultipleDocumentsError,
    ConstructorError,
    UnknownTagError,
    InvalidScalarFormatError,
    RegistrationError,
    NonCallableConstructorError,
    InvalidResolverError,
)
from minyaml.events import (
    StreamStartEvent,
    StreamEndEvent,
    DocumentStartEvent,
    DocumentEndEvent,
    AliasEvent,
    ScalarEvent,
    SequenceStartEvent,
    SequenceEndEvent,
    MappingStartEvent,
    MappingEndEvent,
)
from minyaml.loader import DocumentLoader, EventLoader, MinLoader
from minyaml.registry import Builder, Registry, core_registry, default_registry
from minyaml.representer import MinDumper, dump, dump_all

__version__ = '0.3.0'


def load(stream, Loader=MinLoader):
    """
    Build the single document of a YAML stream.

    Args:
        stream: str, bytes or file-like object
        Loader: Loader class (MinLoader or a subclass)

    Returns:
        The document's value tree (None for an empty stream)

    Raises:
        MultipleDocumentsError: If the stream holds more than one document
    """
    loader = Loader(stream)
    try:
        return loader.get_single_data()
    finally:
        loader.dispose()


def load_all(stream, Loader=MinLoader):
    """Yield the value tree of every document in a YAML stream."""
    loader = Loader(stream)
    try:
        while loader.check_data():
            yield loader.get_data()
    finally:
        loader.dispose()


def add_constructor(tag, constructor, Loader=MinLoader):
    """
    Register a constructor for `tag` on a loader class.

    Scalar constructors receive (value, match); collection constructors
    receive the built list or dict.
    """
    Loader.add_constructor(tag, constructor)


def add_implicit_resolver(tag, regexp, first=None, Loader=MinLoader):
    """
    Register an implicit resolver for `tag` on a loader class.

    `first` optionally lists the characters a matching scalar can start
    with; other scalars skip the regexp.
    """
    Loader.add_implicit_resolver(tag, regexp, first)


__all__ = [
    'load',
    'load_all',
    'dump',
    'dump_all',
    'add_constructor',
    'add_implicit_resolver',
    'MinLoader',
    'EventLoader',
    'DocumentLoader',
    'MinDumper',
    'Builder',
    'Registry',
    'core_registry',
    'default_registry',
    'Mark',
    'YAMLError',
    'MarkedYAMLError',
    'MalformedInputError',
    'ComposerError',
    'UnexpectedEventError',
    'UndefinedAliasError',
    'MultipleDocumentsError',
    'ConstructorError',
    'UnknownTagError',
    'InvalidScalarFormatError',
    'RegistrationError',
    'NonCallableConstructorError',
    'InvalidResolverError',
    'StreamStartEvent',
    'StreamEndEvent',
    'DocumentStartEvent',
    'DocumentEndEvent',
    'AliasEvent',
    'ScalarEvent',
    'SequenceStartEvent',
    'SequenceEndEvent',
    'MappingStartEvent',
    'MappingEndEvent',
]
