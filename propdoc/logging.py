"""Logger lookup for propdoc modules.

propdoc is a library: it never installs output handlers. Applications that
want the debug trail of the builder, resolver, filters or defaults binder
attach their own handlers to the ``propdoc`` logger.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "propdoc"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the propdoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


__all__ = ["get_logger"]
