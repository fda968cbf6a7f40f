"""Tag resolution against a builder registry."""

from .error import UnknownTagError
from .registry import default_registry


class Resolver:
    """Resolves scalar and collection tags to registry builders.

    The registry is a class attribute so that loader classes can carry
    their own set of builders. Registering through a class that does not
    define its own registry first gives it a private copy.
    """

    registry = default_registry

    def __init__(self, registry=None):
        if registry is not None:
            self.registry = registry

    @classmethod
    def _own_registry(cls):
        if 'registry' not in cls.__dict__:
            cls.registry = cls.registry.copy()
        return cls.registry

    @classmethod
    def add_constructor(cls, tag, constructor):
        """Add a constructor for a specific tag."""
        cls._own_registry().add_constructor(tag, constructor)

    @classmethod
    def add_implicit_resolver(cls, tag, regexp, first=None):
        """Add an implicit resolver, tried after every registered one."""
        cls._own_registry().add_implicit_resolver(tag, regexp, first)

    def resolve_scalar(self, value, tag, mark=None):
        """Return (builder, match) for a scalar, or (None, None).

        An explicit tag short-circuits implicit matching and must be known
        to the registry; the match is then None.
        """
        if tag is not None:
            builder = self.registry.lookup(tag)
            if builder is None:
                raise UnknownTagError(
                    None, None, "no constructor for tag %r" % tag, mark)
            return builder, None
        return self.registry.scan(value) or (None, None)

    def resolve_collection(self, tag, mark=None):
        """Return the caller-registered builder for a custom collection tag."""
        builder = self.registry.lookup(tag)
        if builder is None or builder.builtin or builder.constructor is None:
            raise UnknownTagError(
                None, None, "unknown collection tag %r" % tag, mark)
        return builder
