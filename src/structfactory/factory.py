"""
Record factory.

``create("Point", "x", "y")`` validates the declaration, builds a frozen
record type through a ``RecordTypeBuilder`` (applying the caller's
extension on the way) and binds it under ``Point`` in the registry.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Mapping, Optional, Union

from structfactory.builder import RecordTypeBuilder
from structfactory.core.logger import get_logger, push_record_type, reset_record_type
from structfactory.core.validation import split_declaration
from structfactory.models.factory_config import FactoryConfig, FactoryOptions
from structfactory.record import RecordType
from structfactory.registry import RecordRegistry, default_registry

logger = get_logger(__name__)

Extension = Union[Callable[[RecordTypeBuilder], Any], Mapping[str, Any]]


def _apply_extension(builder: RecordTypeBuilder, extension: Optional[Extension]) -> None:
    if extension is None:
        return
    if isinstance(extension, Mapping):
        for name, member in extension.items():
            builder.define(name, member)
    elif callable(extension):
        extension(builder)
    else:
        raise TypeError(f"extension must be callable or a mapping, got {type(extension).__name__}")


def _caller_module(depth: int) -> Optional[str]:
    # Bypassed where sys._getframe is not defined
    try:
        return sys._getframe(depth + 1).f_globals.get("__name__", "__main__")
    except (AttributeError, ValueError):
        return None


class RecordFactory:
    """
    Creates record types and binds the named ones in a registry.

    Args:
        registry: Where named types are bound (``default_registry`` if None)
        options: Factory behaviour; see ``FactoryOptions``
    """

    def __init__(
        self,
        registry: Optional[RecordRegistry] = None,
        options: Optional[FactoryOptions] = None,
    ):
        self.registry = registry if registry is not None else default_registry
        self.options = options or FactoryOptions()

    def create(
        self,
        *fields: Any,
        extension: Optional[Extension] = None,
        module: Optional[str] = None,
    ) -> RecordType:
        """
        Build a record type from ``fields``.

        A capitalized string in first position names the type and is not a
        field. Nothing is built or registered when validation fails. The
        type's ``__module__`` is ``module``, or the calling module if None.

        Raises:
            EmptyDeclarationError: If no fields are declared
            InvalidIdentifierError: If a field is not a usable bare name
        """
        type_name, names = split_declaration(fields)
        if module is None:
            module = _caller_module(1)

        token = push_record_type(type_name)
        try:
            builder = RecordTypeBuilder(
                names,
                type_name,
                fill_missing=self.options.fill_missing,
                module=module,
            )
            _apply_extension(builder, extension)
            record_type = builder.build()
            logger.debug(f"Built record type with members {list(names)}")

            if type_name and self.options.register_named:
                self._bind(type_name, record_type)
            return record_type
        finally:
            reset_record_type(token)

    def _bind(self, type_name: str, record_type: RecordType) -> None:
        if type_name in self.registry:
            logger.warning(f"Rebinding record type {type_name!r}")
        self.registry.register(type_name, record_type, overwrite=True)
        logger.debug(f"Registered record type {type_name!r}")


def create(
    *fields: Any,
    extension: Optional[Extension] = None,
    registry: Optional[RecordRegistry] = None,
    options: Optional[FactoryOptions] = None,
) -> RecordType:
    """Shortcut for ``RecordFactory(registry, options).create(*fields, extension=...)``."""
    return RecordFactory(registry=registry, options=options).create(
        *fields, extension=extension, module=_caller_module(1)
    )


def build_records(config: FactoryConfig, registry: Optional[RecordRegistry] = None) -> Dict[str, RecordType]:
    """Create every record declared in ``config``; returns them keyed by display name."""
    factory = RecordFactory(registry=registry, options=config.options)
    built: Dict[str, RecordType] = {}
    for declaration in config.records:
        record_type = factory.create(*declaration.to_fields())
        built[declaration.name or f"{record_type.__name__}[{len(built)}]"] = record_type
    return built
