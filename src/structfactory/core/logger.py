import logging
import sys
import contextvars
from typing import Optional

# Context variable carrying the record type currently being built
_RECORD_TYPE: contextvars.ContextVar[str] = contextvars.ContextVar("record_type", default="-")


class _RecordTypeFilter(logging.Filter):
    """Logging filter that injects the record type under construction into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.record_type = _RECORD_TYPE.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | type=%(record_type)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure the root handler and the structfactory logger.

    The root logger stays at INFO so other libraries remain quiet; only the
    structfactory namespace follows the requested level.

    Args:
        level: Log level for structfactory logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("structfactory")

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _RecordTypeFilter) for f in h.filters):
            package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_RecordTypeFilter())
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)

    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "structfactory", level: str = "INFO") -> logging.Logger:
    """
    Get a module-specific logger writing to stdout with the record type context.
    """
    configure_root_logger(level)
    return logging.getLogger(name)


def push_record_type(type_name: Optional[str]) -> Optional[contextvars.Token]:
    """Set the record type in context and return a token for later reset."""
    if not type_name:
        return None
    return _RECORD_TYPE.set(type_name)


def reset_record_type(token: Optional[contextvars.Token]) -> None:
    """Reset the record type context using the provided token (if any)."""
    if token is None:
        return
    _RECORD_TYPE.reset(token)
