r"""Feature service response handling.

Feature services report most failures inside an HTTP 200 response, as
a JSON document with an ``error`` object. This module decodes the body
and turns such documents into ``FeatureServiceError``.
"""

from __future__ import annotations

__all__ = ["check_for_errors", "parse_response"]

import logging
from typing import TYPE_CHECKING, Any

from arcedit.exceptions import FeatureServiceError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def check_for_errors(
    payload: Any, url: str, method: str, response: httpx.Response | None = None
) -> None:
    """Raise if the decoded payload describes a service error.

    Args:
        payload: The decoded JSON body.
        url: The URL that was requested.
        method: The HTTP method that was used.
        response: The HTTP response, attached to the raised error.

    Raises:
        FeatureServiceError: If ``payload`` contains an ``error`` object.

    Example:
        ```pycon
        >>> from arcedit.core.response import check_for_errors
        >>> check_for_errors({"deleteResults": []}, url="https://svc", method="POST")

        ```
    """
    if not isinstance(payload, dict) or "error" not in payload:
        return
    error = payload["error"] or {}
    code = error.get("code")
    message = error.get("message") or "Unknown error"
    details = list(error.get("details") or [])
    logger.debug(f"{method} request to {url} returned service error {code}: {message}")
    raise FeatureServiceError(
        method=method,
        url=url,
        message=f"{code}: {message}" if code is not None else message,
        status_code=None if response is None else response.status_code,
        code=code,
        details=details,
        response=response,
    )


def parse_response(response: httpx.Response, url: str, method: str) -> Any:
    """Decode a successful response and check it for service errors.

    Args:
        response: The HTTP response to decode.
        url: The URL that was requested.
        method: The HTTP method that was used.

    Returns:
        The decoded JSON body.

    Raises:
        FeatureServiceError: If the body is not JSON or contains an
            ``error`` object.
    """
    try:
        payload = response.json()
    except ValueError as exc:
        raise FeatureServiceError(
            method=method,
            url=url,
            message=f"{method} request to {url} returned an invalid JSON body",
            status_code=response.status_code,
            response=response,
            cause=exc,
        ) from exc
    check_for_errors(payload, url=url, method=method, response=response)
    return payload
