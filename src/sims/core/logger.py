import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the content source being loaded across the call chain
_CONTENT_SOURCE: contextvars.ContextVar[str] = contextvars.ContextVar("content_source", default="-")


class _ContentSourceFilter(logging.Filter):
    """Logging filter that injects the content_source from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.content_source = _CONTENT_SOURCE.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | source=%(content_source)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure root logger and sims-specific logger.

    Root logger stays at INFO to suppress library noise.
    Only sims namespace logs are set to the requested level.

    Args:
        level: Log level for sims logs (DEBUG, INFO, WARNING, ERROR).
               None keeps the current sims level (INFO on first call).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()
    sims_logger = logging.getLogger("sims")

    # Check if we already configured our handler (has _ContentSourceFilter)
    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _ContentSourceFilter) for f in h.filters):
            if level is not None:
                sims_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    # stdout is reserved for command output (`sims-content show | jq`)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_ContentSourceFilter())
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    sims_logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


def get_logger(name: str = "sims") -> logging.Logger:
    """
    Get a module-specific logger in the sims namespace.

    Does not touch handlers or levels; entry points such as ``sims.cli`` call
    ``configure_root_logger``, library callers keep their own logging setup.
    """
    return logging.getLogger(name)


def push_content_source(source: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current content source in context and return a token for later reset."""
    if not source:
        return None
    return _CONTENT_SOURCE.set(source)


def reset_content_source(token: Optional[contextvars.Token]) -> None:
    """Reset the content source context using the provided token (if any)."""
    if token is None:
        return
    _CONTENT_SOURCE.reset(token)
