"""Event classes consumed by the document builder.

These mirror PyYAML's event hierarchy, reduced to the fields construction
needs: tag, anchor and scalar value. Tags are fully expanded
(``tag:yaml.org,2002:int``), never handles like ``!!int``.
"""


class Event:
    def __init__(self, start_mark=None, end_mark=None):
        self.start_mark = start_mark
        self.end_mark = end_mark

    def __repr__(self):
        attributes = [key for key in ['anchor', 'tag', 'value']
                      if hasattr(self, key)]
        arguments = ', '.join(['%s=%r' % (key, getattr(self, key))
                               for key in attributes])
        return '%s(%s)' % (self.__class__.__name__, arguments)


class NodeEvent(Event):
    def __init__(self, anchor=None, start_mark=None, end_mark=None):
        super().__init__(start_mark, end_mark)
        self.anchor = anchor


class CollectionStartEvent(NodeEvent):
    def __init__(self, tag=None, anchor=None, start_mark=None, end_mark=None):
        super().__init__(anchor, start_mark, end_mark)
        self.tag = tag


class CollectionEndEvent(Event):
    pass


class StreamStartEvent(Event):
    pass


class StreamEndEvent(Event):
    pass


class DocumentStartEvent(Event):
    pass


class DocumentEndEvent(Event):
    pass


class AliasEvent(NodeEvent):
    def __init__(self, anchor, start_mark=None, end_mark=None):
        super().__init__(anchor, start_mark, end_mark)


class ScalarEvent(NodeEvent):
    def __init__(self, value, tag=None, anchor=None,
                 start_mark=None, end_mark=None):
        super().__init__(anchor, start_mark, end_mark)
        self.tag = tag
        self.value = value


class SequenceStartEvent(CollectionStartEvent):
    pass


class SequenceEndEvent(CollectionEndEvent):
    pass


class MappingStartEvent(CollectionStartEvent):
    pass


class MappingEndEvent(CollectionEndEvent):
    pass
