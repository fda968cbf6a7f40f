"""Event sources for the document builder.

EventSource wraps any iterable of minyaml events and offers the
check_event/peek_event/get_event protocol the builder consumes. Parser
feeds it from PyYAML's pure-Python reader, scanner and parser, translating
PyYAML events into minyaml events.
"""

import yaml
import yaml.parser
import yaml.reader
import yaml.scanner

from .error import Mark, MalformedInputError
from .events import (
    StreamStartEvent, StreamEndEvent,
    DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)
from .tags import NON_SPECIFIC_TAG, STR_TAG


class EventSource:
    """One-event lookahead over an iterable of events."""

    def __init__(self, events):
        self._events = iter(events)
        self._current = None

    def check_event(self, *choices):
        event = self.peek_event()
        if event is None:
            return False
        if not choices:
            return True
        return isinstance(event, choices)

    def peek_event(self):
        if self._current is None:
            self._current = next(self._events, None)
        return self._current

    def get_event(self):
        event = self.peek_event()
        self._current = None
        return event

    def dispose(self):
        pass


class Parser(EventSource):
    """Event source over a YAML stream (str, bytes or file-like object)."""

    def __init__(self, stream):
        EventSource.__init__(self, parse(stream))


class _PyYAMLParser(yaml.reader.Reader, yaml.scanner.Scanner, yaml.parser.Parser):

    def __init__(self, stream):
        yaml.reader.Reader.__init__(self, stream)
        yaml.scanner.Scanner.__init__(self)
        yaml.parser.Parser.__init__(self)


_SIMPLE_EVENTS = {
    yaml.StreamStartEvent: StreamStartEvent,
    yaml.StreamEndEvent: StreamEndEvent,
    yaml.DocumentStartEvent: DocumentStartEvent,
    yaml.DocumentEndEvent: DocumentEndEvent,
    yaml.SequenceEndEvent: SequenceEndEvent,
    yaml.MappingEndEvent: MappingEndEvent,
}


def _translate(event):
    start_mark = Mark.from_mark(event.start_mark)
    end_mark = Mark.from_mark(event.end_mark)
    if isinstance(event, yaml.ScalarEvent):
        tag = event.tag
        # Quoted and block scalars never resolve implicitly
        if tag == NON_SPECIFIC_TAG or (tag is None and not event.implicit[0]):
            tag = STR_TAG
        return ScalarEvent(event.value, tag, event.anchor, start_mark, end_mark)
    if isinstance(event, (yaml.SequenceStartEvent, yaml.MappingStartEvent)):
        tag = event.tag
        if tag == NON_SPECIFIC_TAG:
            tag = None
        if isinstance(event, yaml.SequenceStartEvent):
            return SequenceStartEvent(tag, event.anchor, start_mark, end_mark)
        return MappingStartEvent(tag, event.anchor, start_mark, end_mark)
    if isinstance(event, yaml.AliasEvent):
        return AliasEvent(event.anchor, start_mark, end_mark)
    return _SIMPLE_EVENTS[type(event)](start_mark, end_mark)


def parse(stream):
    """Yield minyaml events for a YAML stream.

    Errors raised by PyYAML or by reading the stream surface lazily, as
    MalformedInputError, from the event that could not be produced.
    """
    try:
        source = _PyYAMLParser(stream)
        while source.check_event():
            yield _translate(source.get_event())
    except yaml.MarkedYAMLError as exc:
        raise MalformedInputError(
            exc.context, Mark.from_mark(exc.context_mark),
            exc.problem, Mark.from_mark(exc.problem_mark),
            exc.note) from exc
    except yaml.YAMLError as exc:
        raise MalformedInputError(problem=str(exc)) from exc
    except OSError as exc:
        raise MalformedInputError(problem="failed to read stream: %s" % exc) from exc
