"""Logging for the mcflow solver.

What the package reports, by logger:

* ``mcflow.builder``: DEBUG when a solve starts (labels, node and edge counts)
  and when it finishes (flow, cost, number of paths); WARNING when a solve
  aborts on a negative-cost cycle or an exhausted iteration or time budget.
* ``mcflow.algorithms.mcmf``: DEBUG per augmentation (arcs, amount, unit
  cost) and a DEBUG summary with the terminal engine state.
* ``mcflow.algorithms.decompose``: DEBUG when a flow-carrying cycle is
  cancelled or stranded flow is dropped during path decomposition.

At the default INFO level a successful solve is silent. Every logger hangs
under ``mcflow``, which owns the single stdout handler. Set
``MCFLOW_LOG_LEVEL=DEBUG`` (or call :func:`enable_debug_logging`) to trace
augmentations.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "mcflow"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LEVEL_ENV_VAR = "MCFLOW_LOG_LEVEL"

_configured = False


def _level_from_env(default: int) -> int:
    name = os.environ.get(LEVEL_ENV_VAR)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``mcflow`` logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level used when ``MCFLOW_LOG_LEVEL`` is unset.
        format_string: Custom record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stdout ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_level_from_env(level))
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger that inherits the ``mcflow`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger, with its own level left at ``NOTSET``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``mcflow`` logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch every mcflow logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch every mcflow logger back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget prior setup. Used by tests."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
