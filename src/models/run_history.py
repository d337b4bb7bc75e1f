"""Records handed to the run history and the error-notification channel."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


class RunHistoryEntry(BaseModel):
    """One finished ``run`` invocation, successful or not."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    name: str
    ok: bool
    duration_ms: int = Field(ge=0, serialization_alias="durationMs")
    user_tag: str = Field(serialization_alias="userTag")
    summary: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Config name must be non-empty."""
        if not value.strip():
            msg = "name must not be empty"
            raise ValueError(msg)
        return value


class ErrorNotification(BaseModel):
    """Payload sent when a ``run`` invocation fails before executing moves."""

    name: str
    user_tag: str = Field(serialization_alias="userTag")
    error: str
    duration_ms: int = Field(ge=0, serialization_alias="durationMs")

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
