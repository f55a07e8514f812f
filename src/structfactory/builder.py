from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Sequence

from structfactory.core.exceptions import InvalidIdentifierError, RecordBuilderError
from structfactory.record import Record, RecordType

ANONYMOUS_TYPE_NAME = "Record"


def _field_property(name: str) -> property:
    def getter(self: Record) -> Any:
        return self.get(name)

    def setter(self: Record, value: Any) -> None:
        self.set(name, value)

    return property(getter, setter, doc=f"Record member {name!r}.")


class RecordTypeBuilder:
    """
    Mutable staging area for a record type.

    Extension closures receive the builder and attach members before the
    type is finalized:

        >>> def extension(builder):
        ...     @builder.method
        ...     def norm(self):
        ...         return abs(self.x) + abs(self.y)
        >>> Point = create("Point", "x", "y", extension=extension)

    ``build()`` produces the frozen record type; the builder refuses further
    changes afterwards.
    """

    def __init__(
        self,
        fields: Sequence[str],
        type_name: Optional[str] = None,
        *,
        fill_missing: bool = True,
        module: Optional[str] = None,
    ):
        self.fields = tuple(fields)
        self.type_name = type_name
        self.fill_missing = fill_missing
        self.module = module or __name__
        self._members: Dict[str, Any] = {}
        self._built: Optional[RecordType] = None

    @property
    def built(self) -> bool:
        return self._built is not None

    def define(self, name: str, member: Any) -> Any:
        """Attach ``member`` under ``name``, replacing any standard member."""
        if self._built is not None:
            raise RecordBuilderError(f"record type {self._built.__name__} is already built")
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidIdentifierError(name, reason="is not a valid member name")
        self._members[name] = member
        return member

    def method(self, fn: Optional[Callable[..., Any]] = None, *, name: Optional[str] = None) -> Any:
        """Decorator attaching ``fn`` as an instance method."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.define(name or func.__name__, func)
            return func

        if fn is not None:
            return decorator(fn)
        return decorator

    def property(self, fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Decorator attaching ``fn`` as a read-only property."""
        self.define(fn.__name__, property(fn))
        return fn

    def build(self) -> RecordType:
        if self._built is not None:
            return self._built

        class_name = self.type_name or ANONYMOUS_TYPE_NAME
        namespace: Dict[str, Any] = {
            "__module__": self.module,
            "__qualname__": class_name,
            "__doc__": f"{class_name}({', '.join(self.fields)})",
            "_fields": self.fields,
            "_field_index": MappingProxyType({name: pos for pos, name in enumerate(self.fields)}),
            "_type_name": self.type_name,
            "_fill_missing": self.fill_missing,
            "_extension": tuple(self._members),
        }
        for name in self.fields:
            namespace[name] = _field_property(name)
        namespace.update(self._members)
        namespace["_frozen"] = True

        self._built = RecordType(class_name, (Record,), namespace)
        return self._built
