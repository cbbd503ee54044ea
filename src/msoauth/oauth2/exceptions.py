from __future__ import annotations

from typing import Any

from authlib.common.errors import AuthlibBaseError


class IdentityProviderError(AuthlibBaseError):
    """Raised when a provider response carries an error object.

    Attributes:
        code: Provider error code (e.g. ``"request_token_expired"``), if any.
        message: Human readable error message.
        status_code: HTTP status of the response that carried the error.
        response_body: The decoded response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Any = None,
        *,
        code: str | None = None,
    ) -> None:
        super().__init__(error=code, description=message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        if self.code:
            return f"{self.code}: {self.message} (HTTP {self.status_code})"
        return f"{self.message} (HTTP {self.status_code})"
