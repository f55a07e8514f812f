"""
Record base class shared by every generated record type.

Each instance keeps an ordered list of slots sized to the declared field
count plus a populated bitmap. Integer keys address the populated slots in
declaration order; name keys address a field's own slot. Reads require the
slot to be populated, writes by name populate it.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from structfactory.core.exceptions import (
    ArityError,
    FrozenRecordTypeError,
    MemberIndexError,
    MemberNameError,
    MemberTypeError,
)

Key = Union[int, str]


class RecordType(type):
    """Metaclass of generated record types; a type is frozen once built."""

    def __setattr__(cls, name: str, value: Any) -> None:
        if cls.__dict__.get("_frozen", False):
            raise FrozenRecordTypeError(f"can't modify frozen record type {cls.__name__}")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if cls.__dict__.get("_frozen", False):
            raise FrozenRecordTypeError(f"can't modify frozen record type {cls.__name__}")
        super().__delattr__(name)

    def __repr__(cls) -> str:
        return f"<record type {cls.__name__}({', '.join(cls._fields)})>"


def _check_key(key: Any) -> None:
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise MemberTypeError(f"no implicit conversion of {type(key).__name__} into Integer")


def _dig(value: Any, keys: Sequence[Any]) -> Any:
    """Walk ``keys`` through nested records, mappings and sequences."""
    for i, key in enumerate(keys):
        if value is None:
            return None
        dig = getattr(value, "dig", None)
        if callable(dig):
            return dig(*keys[i:])
        if isinstance(value, Mapping):
            value = value.get(key)
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if isinstance(key, bool) or not isinstance(key, int):
                raise MemberTypeError(f"no implicit conversion of {type(key).__name__} into Integer")
            value = value[key] if -len(value) <= key < len(value) else None
        else:
            raise MemberTypeError(f"{type(value).__name__} does not have #dig method")
    return value


class _RecordView:
    """Restartable view over a record's populated slots."""

    __slots__ = ("_record", "_pairs")

    def __init__(self, record: "Record", pairs: bool = False):
        self._record = record
        self._pairs = pairs

    def __iter__(self) -> Iterator[Any]:
        record = self._record
        for pos in record._populated_positions():
            value = record._slots[pos]
            yield (record._fields[pos], value) if self._pairs else value

    def __len__(self) -> int:
        return self._record.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Record(metaclass=RecordType):
    __slots__ = ("_slots", "_populated")

    _fields: ClassVar[Tuple[str, ...]] = ()
    _field_index: ClassVar[Mapping[str, int]] = {}
    _type_name: ClassVar[Optional[str]] = None
    _extension: ClassVar[Tuple[str, ...]] = ()
    _fill_missing: ClassVar[bool] = True

    # Instances are mutable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: Any, **named: Any):
        fields = self._fields
        if len(values) > len(fields):
            raise ArityError("factory size differs")

        slots: List[Any] = [None] * len(fields)
        populated = [False] * len(fields)
        for pos, value in enumerate(values):
            slots[pos] = value
            populated[pos] = True

        for name, value in named.items():
            pos = self._field_index.get(name)
            if pos is None:
                raise MemberNameError(name)
            if populated[pos]:
                raise ArityError(f"multiple values for member {name!r}")
            slots[pos] = value
            populated[pos] = True

        if self._fill_missing:
            populated = [True] * len(fields)

        self._slots = slots
        self._populated = populated

    # -- accessors -----------------------------------------------------------

    def _populated_positions(self) -> List[int]:
        return [pos for pos, flag in enumerate(self._populated) if flag]

    def _position(self, key: Key, *, write: bool = False) -> int:
        _check_key(key)
        if isinstance(key, int):
            positions = self._populated_positions()
            size = len(positions)
            if key >= size or key < -size:
                raise MemberIndexError(key, size)
            return positions[key]

        pos = self._field_index.get(key)
        if pos is None or not (write or self._populated[pos]):
            raise MemberNameError(key)
        return pos

    def get(self, key: Key) -> Any:
        return self._slots[self._position(key)]

    def set(self, key: Key, value: Any) -> Any:
        pos = self._position(key, write=True)
        self._slots[pos] = value
        self._populated[pos] = True
        return value

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key, value: Any) -> None:
        self.set(key, value)

    @classmethod
    def members(cls) -> Tuple[str, ...]:
        """Declared field names, in declaration order."""
        return cls._fields

    # -- equality ------------------------------------------------------------

    def equals(self, other: Any) -> bool:
        return type(other) is type(self) and self.to_list() == other.to_list()

    def eql(self, other: Any) -> bool:
        return self.equals(other)

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    # -- enumeration ---------------------------------------------------------

    def each(self, visitor: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Iterate over populated values.

        Without a visitor a restartable view is returned; with one, the
        visitor is called on every value and the record itself is returned.
        """
        view = _RecordView(self)
        if visitor is None:
            return view
        for value in view:
            visitor(value)
        return self

    def each_pair(self, visitor: Optional[Callable[[str, Any], Any]] = None) -> Any:
        view = _RecordView(self, pairs=True)
        if visitor is None:
            return view
        for name, value in view:
            visitor(name, value)
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(_RecordView(self))

    def dig(self, key: Key, *keys: Any) -> Any:
        """
        Look ``key`` up and keep digging through the remaining ``keys``.

        Missing names and out-of-range offsets yield None instead of raising;
        a key of the wrong type still raises MemberTypeError.
        """
        try:
            value = self.get(key)
        except (MemberIndexError, MemberNameError):
            return None
        return _dig(value, keys)

    # -- queries -------------------------------------------------------------

    def size(self) -> int:
        return sum(self._populated)

    def length(self) -> int:
        return self.size()

    def __len__(self) -> int:
        return self.size()

    def select(self, predicate: Callable[[Any], Any]) -> List[Any]:
        return [value for value in self.each() if predicate(value)]

    def to_list(self) -> List[Any]:
        return list(self.each())

    def values(self) -> List[Any]:
        return self.to_list()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.each_pair())

    def values_at(self, *indices: int) -> List[Any]:
        """Values at ``indices``, in the order they were requested."""
        values = self.to_list()
        picked = []
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise MemberTypeError(f"no implicit conversion of {type(index).__name__} into Integer")
            if index >= len(values) or index < -len(values):
                raise MemberIndexError(index, len(values))
            picked.append(values[index])
        return picked

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self.each_pair())
        return f"{type(self).__name__}({body})"
