from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    message: str
    error: str
    model_config = ConfigDict(extra="allow")


class InboxResponse(BaseModel):
    ok: bool
    errors: list[ErrorDetail] = Field(default_factory=list)
    model_config = ConfigDict(extra="allow")

    def first_error(self) -> ErrorDetail | None:
        return self.errors[0] if self.errors else None


def event_body(data: Any) -> dict[str, Any]:
    """Return a JSON-safe dict for an event given as a mapping or a pydantic model."""
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return dict(data)
