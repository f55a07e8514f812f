from __future__ import annotations

import keyword
from typing import Any, Iterable, Optional, Sequence, Tuple

from structfactory.core.exceptions import EmptyDeclarationError, InvalidIdentifierError

# Names used by the record protocol; a field with one of these names would
# shadow the operation on every instance.
RESERVED_MEMBERS: frozenset[str] = frozenset(
    {
        "get",
        "set",
        "members",
        "equals",
        "eql",
        "each",
        "each_pair",
        "dig",
        "size",
        "length",
        "select",
        "to_list",
        "values",
        "to_dict",
        "values_at",
    }
)


def is_type_name(value: Any) -> bool:
    """Return whether ``value`` reads as a capitalized type name."""
    return isinstance(value, str) and value.strip()[:1].isupper()


def check_field_name(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidIdentifierError(value)
    if not value.isidentifier() or keyword.iskeyword(value):
        raise InvalidIdentifierError(value, reason="is not a valid identifier")
    if value.startswith("_"):
        raise InvalidIdentifierError(value, reason="cannot start with an underscore")
    if value in RESERVED_MEMBERS:
        raise InvalidIdentifierError(value, reason="is reserved by the record protocol")
    return value


def check_type_name(value: str) -> str:
    name = value.strip()
    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidIdentifierError(value, reason="is not a valid type name")
    return name


def check_field_names(fields: Iterable[Any], type_name: Optional[str] = None) -> Tuple[str, ...]:
    """Validate bare field names, rejecting duplicates."""
    seen: list[str] = []
    for field in fields:
        name = check_field_name(field)
        if name in seen:
            raise InvalidIdentifierError(name, reason="is declared more than once")
        seen.append(name)
    if not seen:
        raise EmptyDeclarationError(type_name)
    return tuple(seen)


def split_declaration(fields: Sequence[Any]) -> Tuple[Optional[str], Tuple[str, ...]]:
    """
    Split a raw declaration into ``(type_name, fields)``.

    A capitalized string at position 0 is consumed as the type name; every
    remaining entry must be a bare field name.

    Raises:
        EmptyDeclarationError: If no fields remain.
        InvalidIdentifierError: If an entry is not a usable field name.
    """
    if not fields:
        raise EmptyDeclarationError()

    type_name: Optional[str] = None
    rest = list(fields)
    if is_type_name(rest[0]):
        type_name = check_type_name(rest.pop(0))

    return type_name, check_field_names(rest, type_name)
