r"""Contains the exceptions raised by the default request executor."""

from __future__ import annotations

__all__ = ["FeatureServiceError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class FeatureServiceError(Exception):
    r"""Raised when a feature service request fails.

    The failure can come from the network (timeouts, connection errors),
    from the HTTP layer (non-2xx status code), or from the service
    itself, which reports errors as a JSON ``error`` object inside an
    HTTP 200 response.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: A human-readable error message.
        status_code: The HTTP status code, if a response was received.
        code: The error code reported by the service, if any.
        details: Additional error details reported by the service.
        response: The ``httpx.Response`` object, if available.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from arcedit.exceptions import FeatureServiceError
        >>> error = FeatureServiceError(
        ...     method="POST",
        ...     url="https://svc/FeatureServer/0/deleteFeatures",
        ...     message="400: Unable to complete operation.",
        ...     code=400,
        ... )
        >>> error.code
        400

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        code: int | str | None = None,
        details: list[str] | None = None,
        response: httpx.Response | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or []
        self.response = response
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )
