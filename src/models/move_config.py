"""Move config document and the execution parameters derived from it."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_URL = "https://api.germanminer.de/v2/world/move/content"


class MoveConfig(BaseModel):
    """A config document after defaulting.

    ``moves`` holds the raw descriptors; positions are forwarded opaquely
    and only checked for presence when their step runs.
    """

    api_url: str | None = None
    load_chunks: bool = True
    moves: list[Any] = Field(default_factory=list)


class ExecutionParams(BaseModel):
    """Parameters shared by every step of one batch."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    api_url: str
    load_chunks: bool = True
