"""Aggregate outcome of one batch run."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

MAX_REPORTED_ERRORS = 8


class RunResult(BaseModel):
    """Counts and the first reported step errors of a batch.

    ``total == 0`` means the config was empty or malformed and must not be
    presented as a successful run.
    """

    ok: bool
    total: int = Field(ge=0)
    ok_count: int = Field(ge=0, serialization_alias="okCount")
    fail_count: int = Field(ge=0, serialization_alias="failCount")
    errors: list[str] = []

    @model_validator(mode="after")
    def validate_counts(self) -> RunResult:
        """Counts must add up and ``ok`` must agree with them."""
        if self.ok_count + self.fail_count != self.total:
            msg = "ok_count + fail_count must equal total"
            raise ValueError(msg)
        if self.ok != (self.fail_count == 0):
            msg = "ok must be true exactly when fail_count is 0"
            raise ValueError(msg)
        if len(self.errors) != min(self.fail_count, MAX_REPORTED_ERRORS):
            msg = f"errors must hold min(fail_count, {MAX_REPORTED_ERRORS}) entries"
            raise ValueError(msg)
        return self

    @property
    def is_empty(self) -> bool:
        """True when the config had no moves to run."""
        return self.total == 0

    @classmethod
    def empty(cls) -> RunResult:
        return cls(ok=True, total=0, ok_count=0, fail_count=0, errors=[])

    def to_payload(self) -> dict[str, object]:
        """camelCase dict for collaborators that consume the result."""
        return self.model_dump(by_alias=True)
