"""Loader classes.

A loader drives one event source through the document state machine:

    AWAIT_STREAM_START -> AWAIT_DOCUMENT_START -> AWAIT_ROOT_VALUE
        -> AWAIT_DOCUMENT_END -> AWAIT_DOCUMENT_START ... -> DONE

Any error moves the loader to FAILED, after which it refuses further work.
The public methods follow PyYAML's loader protocol, so the classes can be
passed as ``Loader=`` to ``yaml.load`` and ``yaml.load_all``.
"""

import logging

from .composer import Composer, describe
from .error import MultipleDocumentsError, UnexpectedEventError, YAMLError
from .events import (
    StreamStartEvent, StreamEndEvent,
    DocumentStartEvent, DocumentEndEvent,
)
from .parser import EventSource, Parser
from .registry import default_registry
from .resolver import Resolver

_LOG = logging.getLogger(__name__)


class DocumentLoader(Composer, Resolver):
    """Document-level orchestration on top of Composer and Resolver.

    Expects subclasses to provide an event source (check_event, peek_event,
    get_event).
    """

    AWAIT_STREAM_START = 'await-stream-start'
    AWAIT_DOCUMENT_START = 'await-document-start'
    AWAIT_ROOT_VALUE = 'await-root-value'
    AWAIT_DOCUMENT_END = 'await-document-end'
    DONE = 'done'
    FAILED = 'failed'

    def __init__(self, registry=None):
        Composer.__init__(self)
        Resolver.__init__(self, registry)
        self.state = self.AWAIT_STREAM_START
        self.document_mark = None

    def _fail(self):
        self.state = self.FAILED
        _LOG.debug("Aborted document construction")

    def _check_usable(self):
        if self.state == self.FAILED:
            raise YAMLError("loader cannot be used after a failed build")

    def check_data(self):
        """Check if there is another document in the stream.

        Consumes the stream start (once) and the next document start, which
        get_data() relies on. Calling it again before get_data() is
        harmless.
        """
        self._check_usable()
        if self.state == self.AWAIT_ROOT_VALUE:
            return True
        if self.state == self.DONE:
            return False
        try:
            if self.state == self.AWAIT_STREAM_START:
                event = self.get_event()
                if not isinstance(event, StreamStartEvent):
                    raise UnexpectedEventError(
                        None, None,
                        "expected the start of the stream, but found %s" % describe(event),
                        None if event is None else event.start_mark)
                self.state = self.AWAIT_DOCUMENT_START
            event = self.get_event()
            if isinstance(event, DocumentStartEvent):
                self.state = self.AWAIT_ROOT_VALUE
                self.document_mark = event.start_mark
                return True
            if not isinstance(event, StreamEndEvent):
                raise UnexpectedEventError(
                    None, None,
                    "expected a document start, but found %s" % describe(event),
                    None if event is None else event.start_mark)
        except Exception:
            self._fail()
            raise
        self.state = self.DONE
        return False

    def get_data(self):
        """Construct and return the next document, or None at the end."""
        if not self.check_data():
            return None
        try:
            data = self.compose_document()
            self.state = self.AWAIT_DOCUMENT_END
            event = self.get_event()
            if not isinstance(event, DocumentEndEvent):
                raise UnexpectedEventError(
                    "while constructing a document", self.document_mark,
                    "expected the end of the document, but found %s" % describe(event),
                    None if event is None else event.start_mark)
        except Exception:
            self._fail()
            raise
        self.state = self.AWAIT_DOCUMENT_START
        _LOG.debug("Constructed document of type %s", type(data).__name__)
        return data

    def get_single_data(self):
        """Ensure that the stream contains a single document and construct it."""
        data = self.get_data()
        if self.check_data():
            self._fail()
            raise MultipleDocumentsError(
                None, None, "expected a single document in the stream",
                self.document_mark)
        return data


class EventLoader(EventSource, DocumentLoader):
    """Loader over an iterable of minyaml events."""

    registry = default_registry

    def __init__(self, events, registry=None):
        EventSource.__init__(self, events)
        DocumentLoader.__init__(self, registry)


class MinLoader(Parser, DocumentLoader):
    """Loader over a YAML stream: a str, bytes or file-like object."""

    registry = default_registry

    def __init__(self, stream, registry=None):
        Parser.__init__(self, stream)
        DocumentLoader.__init__(self, registry)
