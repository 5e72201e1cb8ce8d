from .client import AsyncMsgGoClient, MsgGoClient, interpret_response
from .config import DEFAULT_BASE_URL, Settings, load_config
from .exceptions import (
    MALFORMED_RESPONSE,
    ApiError,
    InvalidArgumentError,
    MsgGoError,
    TransportError,
)
from .models import ErrorDetail, InboxResponse

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AsyncMsgGoClient",
    "DEFAULT_BASE_URL",
    "ErrorDetail",
    "InboxResponse",
    "InvalidArgumentError",
    "MALFORMED_RESPONSE",
    "MsgGoClient",
    "MsgGoError",
    "Settings",
    "TransportError",
    "interpret_response",
    "load_config",
]
