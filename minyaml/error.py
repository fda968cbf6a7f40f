"""Error classes for minyaml.

Provides Mark, YAMLError and MarkedYAMLError in the shape PyYAML users
expect, plus the construction error taxonomy.
"""

_LINE_BREAKS = '\0\r\n\x85\u2028\u2029'
_ELLIPSIS = ' ... '


class Mark:
    """A position in a YAML stream, copied from the parser.

    Lines and columns are 0-indexed; they are shown 1-indexed. `buffer`
    and `pointer` are only known for in-memory streams and enable the
    source snippet.
    """

    def __init__(self, name, index, line, column, buffer=None, pointer=None):
        self.name = name
        self.index = index
        self.line = line
        self.column = column
        self.buffer = buffer
        self.pointer = pointer

    @classmethod
    def from_mark(cls, mark):
        """Copy any PyYAML-like mark object, or return None."""
        if mark is None:
            return None
        return cls(mark.name, mark.index, mark.line, mark.column,
                   getattr(mark, 'buffer', None), getattr(mark, 'pointer', None))

    def same_position(self, other):
        return other is not None and \
            (self.name, self.line, self.column) == (other.name, other.line, other.column)

    def _line_bounds(self):
        start = max(self.buffer.rfind(ch, 0, self.pointer) for ch in _LINE_BREAKS) + 1
        ends = [self.buffer.find(ch, self.pointer) for ch in _LINE_BREAKS]
        ends = [end for end in ends if end >= 0]
        return start, min(ends) if ends else len(self.buffer)

    def get_snippet(self, indent=4, max_length=75):
        """Return the source line at this mark with a caret under it.

        Either side of the mark is cut to about half of `max_length`.
        """
        if self.buffer is None or self.pointer is None:
            return None
        start, end = self._line_bounds()
        reach = max_length // 2 - 1
        head = tail = ''
        if self.pointer - start > reach:
            start = self.pointer - reach + len(_ELLIPSIS)
            head = _ELLIPSIS
        if end - self.pointer > reach:
            end = self.pointer + reach - len(_ELLIPSIS)
            tail = _ELLIPSIS
        margin = ' ' * indent
        line = margin + head + self.buffer[start:end] + tail
        caret = margin + ' ' * (len(head) + self.pointer - start) + '^'
        return line + '\n' + caret

    def __str__(self):
        where = '  in "%s", line %d, column %d' % (self.name, self.line + 1, self.column + 1)
        snippet = self.get_snippet()
        if snippet is None:
            return where
        return '%s:\n%s' % (where, snippet)


class YAMLError(Exception):
    """Base exception for minyaml errors."""
    pass


class MarkedYAMLError(YAMLError):
    """YAML error with position marks.

    The message lists, one per line, whichever of context, context mark,
    problem, problem mark and note are set. The context mark is left out
    when it points where the problem mark does.
    """

    def __init__(self, context=None, context_mark=None,
                 problem=None, problem_mark=None, note=None):
        super().__init__(problem if problem is not None else context)
        self.context = context
        self.context_mark = context_mark
        self.problem = problem
        self.problem_mark = problem_mark
        self.note = note

    def __str__(self):
        context_mark = self.context_mark
        if context_mark is not None and self.problem is not None \
                and context_mark.same_position(self.problem_mark):
            context_mark = None
        parts = [self.context, context_mark, self.problem, self.problem_mark, self.note]
        return '\n'.join(str(part) for part in parts if part is not None)


class MalformedInputError(MarkedYAMLError):
    """The event source could not read or parse the stream."""
    pass


class ComposerError(MarkedYAMLError):
    """Structural error while assembling a document."""
    pass


class UnexpectedEventError(ComposerError):
    """An event arrived that does not fit the current structure."""
    pass


class UndefinedAliasError(ComposerError, KeyError):
    """An alias refers to an anchor not bound earlier in the document."""
    pass


class MultipleDocumentsError(ComposerError):
    """A single document was expected but the stream holds more."""
    pass


class ConstructorError(MarkedYAMLError):
    """A value could not be constructed for a node."""
    pass


class UnknownTagError(ConstructorError, TypeError):
    """No constructor is registered for an explicit tag."""
    pass


class InvalidScalarFormatError(ConstructorError, ValueError):
    """Scalar text does not fit the grammar of its tag."""
    pass


class RegistrationError(YAMLError, TypeError):
    """A resolver or constructor was registered incorrectly."""
    pass


class NonCallableConstructorError(RegistrationError):
    pass


class InvalidResolverError(RegistrationError):
    pass
