import json

import httpx
import pytest


class Recorder:
    """Handler for httpx.MockTransport that replays one canned response and keeps every request."""

    def __init__(self, status_code: int = 200, body: object = None, text: str | None = None):
        self.status_code = status_code
        self.body = {"ok": True} if body is None else body
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, request=request)
        return httpx.Response(self.status_code, json=self.body, request=request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def recorder_factory():
    return Recorder
