"""Build values directly from an event stream.

Composer consumes events recursively and produces Python values: scalars
through the resolver, lists, dicts, sets, pair lists and caller-defined
collections. Anchored values are bound in a per-document AliasTable and
aliases hand back the very same object.
"""

from .error import ConstructorError, UndefinedAliasError, UnexpectedEventError
from .events import (
    DocumentEndEvent, AliasEvent, ScalarEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)
from .tags import MAP_TAG, SET_TAG, SEQ_TAG, PAIRS_TAG

MERGE_KEY = '<<'


def describe(event):
    if event is None:
        return 'the end of the stream'
    return event.__class__.__name__


def _mark(event):
    return None if event is None else event.start_mark


class AliasTable:
    """Anchor name to value association for one document."""

    def __init__(self):
        self._values = {}

    def __contains__(self, anchor):
        return anchor in self._values

    def __len__(self):
        return len(self._values)

    def bind(self, anchor, value):
        """Associate `value` with `anchor` (if any) and return it unchanged."""
        if anchor is not None:
            self._values[anchor] = value
        return value

    def resolve(self, anchor, mark=None):
        try:
            return self._values[anchor]
        except KeyError:
            raise UndefinedAliasError(
                None, None, "found undefined alias %r" % anchor, mark) from None


class Composer:
    """Builds values from events.

    Expects subclasses to provide:
    - check_event(*choices) -> bool
    - get_event() -> Event
    - peek_event() -> Event
    - resolve_scalar(value, tag, mark) and resolve_collection(tag, mark)
      (from a Resolver)
    """

    def __init__(self):
        self.aliases = None

    def compose_document(self):
        """Build the root value of the current document.

        The document start must already be consumed; the document end is
        left for the caller. A document without a root node is None.
        """
        self.aliases = AliasTable()
        try:
            if self.check_event(DocumentEndEvent):
                return None
            return self.compose_node()
        finally:
            self.aliases = None

    def compose_node(self):
        event = self.get_event()
        if isinstance(event, AliasEvent):
            return self.aliases.resolve(event.anchor, event.start_mark)
        if isinstance(event, ScalarEvent):
            data = self.compose_scalar(event)
        elif isinstance(event, SequenceStartEvent):
            data = self.compose_sequence_node(event)
        elif isinstance(event, MappingStartEvent):
            data = self.compose_mapping_node(event)
        else:
            raise UnexpectedEventError(
                None, None,
                "expected a collection, scalar or alias event, but found %s"
                % describe(event), _mark(event))
        return self.aliases.bind(event.anchor, data)

    def compose_scalar(self, event):
        builder, match = self.resolve_scalar(event.value, event.tag, event.start_mark)
        if builder is None or builder.constructor is None:
            return event.value
        try:
            return builder.constructor(event.value, match)
        except ConstructorError as exc:
            if exc.problem_mark is None:
                exc.problem_mark = event.start_mark
            raise

    def compose_sequence_node(self, start_event):
        tag = start_event.tag
        if tag is None or tag == SEQ_TAG:
            return self.compose_sequence()
        if tag == PAIRS_TAG:
            return self.compose_pairs(start_event)
        return self.construct_custom(tag, self.compose_sequence(), start_event)

    def compose_mapping_node(self, start_event):
        tag = start_event.tag
        if tag is None or tag in (MAP_TAG, SET_TAG):
            return self.compose_mapping(start_event)
        return self.construct_custom(tag, self.compose_mapping(start_event), start_event)

    def construct_custom(self, tag, data, start_event):
        builder = self.resolve_collection(tag, start_event.start_mark)
        return builder.constructor(data)

    def compose_sequence(self):
        sequence = []
        while not self.check_event(SequenceEndEvent):
            sequence.append(self.compose_node())
        self.get_event()
        return sequence

    def compose_pairs(self, start_event):
        """Build a list of (key, value) tuples from single-entry mappings."""
        pairs = []
        while not self.check_event(SequenceEndEvent):
            event = self.get_event()
            if not isinstance(event, MappingStartEvent):
                raise UnexpectedEventError(
                    "while constructing pairs", start_event.start_mark,
                    "expected a single-entry mapping, but found %s" % describe(event),
                    _mark(event))
            key = self.compose_node()
            value = self.compose_node()
            event = self.get_event()
            if not isinstance(event, MappingEndEvent):
                raise UnexpectedEventError(
                    "while constructing pairs", start_event.start_mark,
                    "expected the end of a single-entry mapping, but found %s"
                    % describe(event), _mark(event))
            pairs.append((key, value))
        self.get_event()
        return pairs

    def compose_mapping(self, start_event):
        """Build a dict, or a set when every bound value is None."""
        mapping = {}
        is_set = True
        while not self.check_event(MappingEndEvent):
            key_event = self.peek_event()
            key = self.compose_node()
            value = self.compose_node()
            if isinstance(key, str) and key == MERGE_KEY:
                self.merge_mapping(mapping, value, start_event, key_event)
            else:
                try:
                    mapping[key] = value
                except TypeError as exc:
                    raise ConstructorError(
                        "while constructing a mapping", start_event.start_mark,
                        "found unhashable key", _mark(key_event)) from exc
            is_set = is_set and value is None
        self.get_event()
        if is_set:
            return set(mapping)
        return mapping

    def merge_mapping(self, mapping, value, start_event, key_event):
        """Fold the mapping(s) of a merge key into `mapping`.

        Keys already present are kept; among merged mappings the first
        one listed wins.
        """
        sources = value if isinstance(value, list) else [value]
        for source in sources:
            if not isinstance(source, dict):
                raise UnexpectedEventError(
                    "while constructing a mapping", start_event.start_mark,
                    "expected a mapping or list of mappings for merging, but found %s"
                    % type(source).__name__, _mark(key_event))
            for key, item in source.items():
                if key not in mapping:
                    mapping[key] = item
