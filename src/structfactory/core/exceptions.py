"""
Custom exception classes for structfactory.

Every error carries both the library base class and the builtin exception
a caller would naturally catch, so ``except IndexError`` keeps working on
record accessors.
"""

from typing import Any, Optional


class StructFactoryException(Exception):
    """Base exception class for all structfactory exceptions."""

    pass


class EmptyDeclarationError(StructFactoryException, ValueError):
    """Raised when a record type is declared without any fields."""

    def __init__(self, type_name: Optional[str] = None):
        self.type_name = type_name
        message = "wrong number of arguments (given 0, expected 1+)"
        if type_name:
            message += f" - no fields declared for {type_name!r}"
        super().__init__(message)


class InvalidIdentifierError(StructFactoryException, ValueError):
    """
    Raised when a field entry cannot be used as a record member.

    This covers non-string entries, strings that are not valid identifiers,
    reserved protocol names and duplicated fields.

    Example:
        >>> raise InvalidIdentifierError("1x", reason="not a valid identifier")
    """

    def __init__(self, identifier: Any, reason: str = "needs to be a bare identifier"):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"identifier {identifier!r} {reason}")


class ArityError(StructFactoryException, TypeError):
    """Raised when a record is constructed with more values than fields."""

    pass


class MemberIndexError(StructFactoryException, IndexError):
    """Raised when an integer key falls outside the populated slots."""

    def __init__(self, offset: int, size: int):
        self.offset = offset
        self.size = size
        bound = "large" if offset >= 0 else "small"
        super().__init__(f"offset {offset} is too {bound} for factory(size:{size})")


class MemberNameError(StructFactoryException, NameError):
    """Raised when a name key does not address a record slot."""

    def __init__(self, member: str):
        self.member = member
        super().__init__(f"no member {member!r} in factory")


class MemberTypeError(StructFactoryException, TypeError):
    """Raised when an accessor key is neither an integer nor a name."""

    pass


class RecordBuilderError(StructFactoryException, RuntimeError):
    """Raised when a builder is used after its type was finalized."""

    pass


class FrozenRecordTypeError(StructFactoryException, AttributeError):
    """Raised when a built record type is mutated."""

    pass


class RecordRegistryError(StructFactoryException, RuntimeError):
    """Raised on registry lookups that miss or on refused re-registration."""

    pass
