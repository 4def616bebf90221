import logging
from typing import Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a package logger.

    Handlers are left to the application; a `NullHandler` on the package
    root keeps library logging silent unless configured.
    """
    root = logging.getLogger("fountain_tools")
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name or "fountain_tools")
