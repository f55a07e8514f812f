from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional

from structfactory.core.exceptions import RecordRegistryError
from structfactory.record import RecordType


class RecordRegistry:
    """Mapping of type names to record types.

    Factories bind named types here; pass a fresh instance to keep a group
    of declarations isolated from ``default_registry``.
    """

    def __init__(self, initial: Optional[Dict[str, RecordType]] = None):
        self._registry: Dict[str, RecordType] = dict(initial or {})

    def register(self, name: str, record_type: RecordType, *, overwrite: bool = False) -> None:
        if not isinstance(record_type, RecordType):
            raise RecordRegistryError(f"Only record types can be registered, got {record_type!r}")
        if not overwrite and name in self._registry:
            existing = self._registry[name]
            raise RecordRegistryError(f"Record type already registered for name={name!r}: {existing}")
        self._registry[name] = record_type

    def get(self, name: str) -> RecordType:
        try:
            return self._registry[name]
        except KeyError as exc:
            raise RecordRegistryError(f"No record type registered for name={name!r}") from exc

    def try_get(self, name: str) -> Optional[RecordType]:
        return self._registry.get(name)

    def unregister(self, name: str) -> Optional[RecordType]:
        return self._registry.pop(name, None)

    def names(self) -> List[str]:
        return list(self._registry)

    def clear(self) -> None:
        self._registry.clear()

    def __getitem__(self, name: str) -> RecordType:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)


default_registry = RecordRegistry()


def register_record(
    name: Optional[str] = None,
    *,
    registry: Optional[RecordRegistry] = None,
    overwrite: bool = False,
) -> Callable[[RecordType], RecordType]:
    def decorator(record_type: RecordType) -> RecordType:
        target = registry if registry is not None else default_registry
        target.register(
            name or record_type._type_name or record_type.__name__,
            record_type,
            overwrite=overwrite,
        )
        return record_type

    return decorator
