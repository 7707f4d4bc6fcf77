import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the class currently being extracted across the call chain
_TARGET: contextvars.ContextVar[str] = contextvars.ContextVar("target", default="-")


class _TargetFilter(logging.Filter):
    """Logging filter that injects the extraction target from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        try:
            record.target = _TARGET.get()
        except LookupError:
            record.target = "-"
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | target=%(target)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure root logger and paramobject-specific logger.

    Root logger stays at INFO to suppress library noise.
    Only paramobject namespace logs are set to the requested level.

    Args:
        level: Log level for paramobject logs (DEBUG, INFO, WARNING, ERROR).
               Other libraries stay at INFO. None keeps the current level
               once configured and defaults to INFO otherwise.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    # Check if we already configured our handler (has _TargetFilter)
    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _TargetFilter) for f in h.filters):
            # Already configured; just update paramobject logger level
            if level is not None:
                logging.getLogger("paramobject").setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    # stderr keeps stdout free for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_TargetFilter())
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    logging.getLogger("paramobject").setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


def get_logger(name: str = "paramobject", level: Optional[str] = None) -> logging.Logger:
    """
    Get a module-specific logger wired to the shared stderr handler and target context.

    When ``level`` is omitted the logger inherits the paramobject namespace level.
    """
    configure_root_logger(level)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


def push_target(target: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current extraction target in context and return a token for later reset."""
    if not target:
        return None
    return _TARGET.set(target)


def reset_target(token: Optional[contextvars.Token]) -> None:
    """Reset the target context using the provided token (if any)."""
    if token is None:
        return
    try:
        _TARGET.reset(token)
    except ValueError:
        # Token created in a different context; nothing to restore here
        pass
