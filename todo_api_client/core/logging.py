import logging

from todo_api_client.core.config import settings

ROOT_LOGGER = "todo_api_client"


def get_logger(name: str) -> logging.Logger:
    """
    Child logger under the package root, so callers can tune
    logging.getLogger("todo_api_client") in one place.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.setLevel(settings.LOG_LEVEL.upper())

    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


"""
Logging setup and it configures:
- Log format
- Log level (LOG_LEVEL setting), on the package root logger only
- Output destination

The main purpose:
Standardized client logging that a host application can reconfigure.
"""
