from typing import Any

MALFORMED_RESPONSE = "malformed_response"


class MsgGoError(Exception):
    """Base class for every error raised by the MsgGO client."""


class InvalidArgumentError(MsgGoError, ValueError):
    """The client was constructed with an unusable argument."""


class TransportError(MsgGoError):
    """No usable response: the request failed on the wire or the body was not JSON."""

    def __init__(self, message: str, status_code: int = 0, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ApiError(MsgGoError):
    """The MsgGO API reported a failure."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        error_kind: str = MALFORMED_RESPONSE,
        response: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_kind = error_kind
        self.response = response or {}

    def get_response_field(self, field: str) -> Any:
        return self.response.get(field)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code}, error_kind={self.error_kind!r})"
        )
