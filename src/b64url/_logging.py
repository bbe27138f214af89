"""
Logging helpers for b64url.

Loggers live under the ``b64url`` namespace. A NullHandler is attached to the
package root so nothing is printed unless the host application configures
logging.
"""

import logging

_ROOT_LOGGER_NAME = "b64url"

logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the b64url namespace."""
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
