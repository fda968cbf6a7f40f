"""Serialize value trees back to core schema YAML.

MinDumper is PyYAML's SafeDumper with two changes: implicit tag detection
asks a minyaml registry instead of PyYAML's resolver (so a scalar is only
written plain when minyaml would read it back as the same type), and the
value types minyaml builds that PyYAML does not know (booleans under the
true/false tags, pair lists) get representers. Shared containers are
written once with an anchor and referenced through aliases.
"""

import yaml

from .registry import default_registry
from .tags import (
    MAP_TAG, SEQ_TAG, PAIRS_TAG, STR_TAG, TRUE_TAG, FALSE_TAG,
)


class MinDumper(yaml.SafeDumper):
    """PyYAML dumper resolving implicit tags through a minyaml registry."""

    registry = default_registry

    def resolve(self, kind, value, implicit):
        if kind is yaml.ScalarNode:
            if implicit[0]:
                found = self.registry.scan(value)
                if found is not None:
                    return found[0].tag
            return STR_TAG
        if kind is yaml.SequenceNode:
            return SEQ_TAG
        return MAP_TAG

    def represent_bool(self, data):
        if data:
            return self.represent_scalar(TRUE_TAG, 'true')
        return self.represent_scalar(FALSE_TAG, 'false')

    def represent_list(self, data):
        if data and all(isinstance(item, tuple) and len(item) == 2 for item in data):
            return self.represent_pairs(data)
        return self.represent_sequence(SEQ_TAG, data)

    def represent_pairs(self, data):
        """Represent a list of (key, value) tuples as a !!pairs sequence."""
        value = []
        node = yaml.SequenceNode(PAIRS_TAG, value, flow_style=self.default_flow_style)
        if self.alias_key is not None:
            self.represented_objects[self.alias_key] = node
        for key, item in data:
            pair = [(self.represent_data(key), self.represent_data(item))]
            value.append(yaml.MappingNode(MAP_TAG, pair))
        return node


MinDumper.add_representer(bool, MinDumper.represent_bool)
MinDumper.add_representer(list, MinDumper.represent_list)


def dump_all(documents, stream=None, Dumper=MinDumper, default_flow_style=False, **kwds):
    """Serialize a sequence of value trees to YAML.

    Args:
        documents: Iterable of value trees
        stream: File-like object to write to, or None to return a string
        Dumper: Dumper class (MinDumper or a subclass)
        default_flow_style: Collection style, as in PyYAML
        **kwds: Further PyYAML emitter options (indent, width,
            allow_unicode, line_break, explicit_start, explicit_end, ...)

    Returns:
        The YAML text when `stream` is None, otherwise None
    """
    kwds.setdefault('sort_keys', False)
    return yaml.dump_all(documents, stream, Dumper=Dumper,
                         default_flow_style=default_flow_style, **kwds)


def dump(data, stream=None, Dumper=MinDumper, **kwds):
    """Serialize a single value tree to YAML.

    Example:
        >>> import minyaml
        >>> minyaml.dump({'name': 'Alice', 'tags': {'a'}})
        'name: Alice\\ntags: !!set\\n  a: null\\n'
    """
    return dump_all([data], stream, Dumper=Dumper, **kwds)
