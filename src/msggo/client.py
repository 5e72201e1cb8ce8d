import logging
import threading
from typing import Any

import httpx

from .config import DEFAULT_BASE_URL, Settings
from .exceptions import MALFORMED_RESPONSE, ApiError, InvalidArgumentError, TransportError
from .models import InboxResponse, event_body

logger = logging.getLogger(__name__)

ENDPOINT_INBOX = "/inbox"
API_KEY_HEADER = "X-MsgGO-Key"
DEFAULT_TIMEOUT = 30.0
BODY_PREVIEW_CHARS = 200


def interpret_response(response: httpx.Response) -> bool:
    """Turn an /inbox response into True or raise the matching error.

    Only an explicit ``ok: true`` counts as success. ``ok: false`` takes its
    detail from ``errors[0]``; anything without a boolean ``ok`` is malformed.
    """
    status = response.status_code
    try:
        decoded = response.json()
    except ValueError as e:
        if status >= 400:
            preview = response.text[:BODY_PREVIEW_CHARS]
            raise TransportError(
                f"Failed to decode JSON response. Status: {status}. Response: {preview}",
                status_code=status,
                body=preview,
            ) from e
        raise TransportError(f"Failed to decode JSON response: {e}", status_code=status) from e

    if not isinstance(decoded, dict) or not isinstance(decoded.get("ok"), bool):
        raise ApiError("Malformed response", 0, MALFORMED_RESPONSE)

    if decoded["ok"]:
        return True

    try:
        detail = InboxResponse.model_validate(decoded).first_error()
    except ValueError:
        detail = None
    if detail is None:
        raise ApiError("Malformed response", status, MALFORMED_RESPONSE, decoded)
    logger.warning("MsgGO rejected event: %s (%s, HTTP %d)", detail.message, detail.error, status)
    raise ApiError(detail.message, status, detail.error, decoded)


class _BaseClient:
    def __init__(
        self,
        api_key: str,
        base_url: str | None = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Any = None,
    ):
        if not api_key:
            raise InvalidArgumentError("API key cannot be empty.")
        if base_url is None:
            base_url = DEFAULT_BASE_URL
        if not base_url:
            raise InvalidArgumentError("API base URL cannot be empty.")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any):
        return cls(settings.api_key, settings.base_url, timeout=settings.timeout, **kwargs)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def url(self) -> str:
        return self._base_url + ENDPOINT_INBOX

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            API_KEY_HEADER: self._api_key,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"


class MsgGoClient(_BaseClient):
    """Blocking MsgGO client. One POST to ``{base_url}/inbox`` per event, no retries."""

    _http: httpx.Client | None = None

    def _get_http(self) -> httpx.Client:
        with self._lock:
            if self._http is None:
                self._http = httpx.Client(timeout=self._timeout, transport=self._transport)
            return self._http

    def event(self, data: Any = None) -> bool:
        """Send an event to MsgGO.

        Raises TransportError if no decodable response arrives and ApiError if
        the API reports a failure or answers with an unrecognized shape. The
        HTTP handle is closed on TransportError; the next call opens a new one.
        A payload value that cannot be encoded as JSON raises TypeError before
        anything is sent.
        """
        body = event_body(data)
        logger.debug("POST %s", self.url)
        try:
            try:
                response = self._get_http().post(self.url, json=body, headers=self._headers())
            except httpx.RequestError as e:
                raise TransportError(f"HTTP request failed: {e}") from e
            logger.debug("POST %s -> %d", self.url, response.status_code)
            return interpret_response(response)
        except TransportError:
            self.close()
            raise

    send_event = event

    def close(self) -> None:
        with self._lock:
            http, self._http = self._http, None
        if http is not None:
            http.close()

    def __enter__(self) -> "MsgGoClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncMsgGoClient(_BaseClient):
    """asyncio flavour of MsgGoClient backed by httpx.AsyncClient."""

    _http: httpx.AsyncClient | None = None

    def _get_http(self) -> httpx.AsyncClient:
        with self._lock:
            if self._http is None:
                self._http = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
            return self._http

    async def event(self, data: Any = None) -> bool:
        body = event_body(data)
        logger.debug("POST %s", self.url)
        try:
            try:
                response = await self._get_http().post(self.url, json=body, headers=self._headers())
            except httpx.RequestError as e:
                raise TransportError(f"HTTP request failed: {e}") from e
            logger.debug("POST %s -> %d", self.url, response.status_code)
            return interpret_response(response)
        except TransportError:
            await self.aclose()
            raise

    send_event = event

    async def aclose(self) -> None:
        with self._lock:
            http, self._http = self._http, None
        if http is not None:
            await http.aclose()

    async def __aenter__(self) -> "AsyncMsgGoClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
