"""structfactory.

Runtime record types: declare the fields, get back a class whose instances
support positional/keyword construction, indexed and named access, equality
and a fixed set of enumeration queries.

    >>> from structfactory import create
    >>> Point = create("Point", "x", "y")
    >>> Point(1, 2).to_dict()
    {'x': 1, 'y': 2}
"""

from structfactory.builder import RecordTypeBuilder
from structfactory.core.exceptions import (
    ArityError,
    EmptyDeclarationError,
    FrozenRecordTypeError,
    InvalidIdentifierError,
    MemberIndexError,
    MemberNameError,
    MemberTypeError,
    RecordBuilderError,
    RecordRegistryError,
    StructFactoryException,
)
from structfactory.factory import RecordFactory, build_records, create
from structfactory.models.factory_config import FactoryConfig, FactoryOptions, RecordDeclaration
from structfactory.record import Record, RecordType
from structfactory.registry import RecordRegistry, default_registry, register_record

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "EmptyDeclarationError",
    "FactoryConfig",
    "FactoryOptions",
    "FrozenRecordTypeError",
    "InvalidIdentifierError",
    "MemberIndexError",
    "MemberNameError",
    "MemberTypeError",
    "Record",
    "RecordBuilderError",
    "RecordDeclaration",
    "RecordFactory",
    "RecordRegistry",
    "RecordRegistryError",
    "RecordType",
    "RecordTypeBuilder",
    "StructFactoryException",
    "build_records",
    "create",
    "default_registry",
    "register_record",
]
