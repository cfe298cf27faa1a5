r"""Contains the default sink for non-fatal diagnostics."""

from __future__ import annotations

__all__ = ["WarnCallback", "warn"]

import logging
from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

WarnCallback = Callable[[str], None]


def warn(message: str) -> None:
    r"""Emit a non-fatal warning on the ``arcedit.diagnostics`` logger.

    Args:
        message: The warning message.

    Example:
        ```pycon
        >>> from arcedit.diagnostics import warn
        >>> warn("The `deletes` parameter is deprecated.")

        ```
    """
    logger.warning(message)
