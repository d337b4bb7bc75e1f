"""Unit tests for the Pydantic models.

Tests validation logic and defaults by calling the real constructors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from src.models.config import Settings
from src.models.move_config import ExecutionParams
from src.models.run_history import ErrorNotification, RunHistoryEntry
from src.models.run_result import RunResult

if TYPE_CHECKING:
    from collections.abc import Callable


class TestRunResult:
    def test_empty(self) -> None:
        result = RunResult.empty()
        assert result.is_empty is True
        assert result.ok is True
        assert result.errors == []

    def test_payload_uses_camel_case(self) -> None:
        result = RunResult(ok=False, total=2, ok_count=1, fail_count=1, errors=["Step 2: timeout"])
        assert result.to_payload() == {
            "ok": False,
            "total": 2,
            "okCount": 1,
            "failCount": 1,
            "errors": ["Step 2: timeout"],
        }

    def test_counts_must_add_up(self) -> None:
        with pytest.raises(ValidationError, match="must equal total"):
            RunResult(ok=True, total=3, ok_count=2, fail_count=0, errors=[])

    def test_ok_must_match_fail_count(self) -> None:
        with pytest.raises(ValidationError, match="ok must be true"):
            RunResult(ok=True, total=1, ok_count=0, fail_count=1, errors=["Step 1: x"])

    def test_errors_capped_at_eight(self) -> None:
        with pytest.raises(ValidationError, match="errors must hold"):
            RunResult(
                ok=False,
                total=9,
                ok_count=0,
                fail_count=9,
                errors=[f"Step {i}: x" for i in range(1, 10)],
            )

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RunResult(ok=True, total=-1, ok_count=0, fail_count=0, errors=[])


class TestExecutionParams:
    def test_frozen(self) -> None:
        params = ExecutionParams(api_key="k", api_url="https://x.test")
        with pytest.raises(ValidationError):
            params.api_key = "other"  # type: ignore[misc]

    def test_load_chunks_default(self) -> None:
        assert ExecutionParams(api_key="k", api_url="https://x.test").load_chunks is True


class TestRunHistoryModels:
    def test_entry_timestamp_defaults_to_now(self) -> None:
        entry = RunHistoryEntry(name="a", ok=True, duration_ms=5, user_tag="u", summary="1/1 ok")
        assert entry.timestamp.tzinfo is not None

    def test_entry_rejects_blank_name(self) -> None:
        with pytest.raises(ValidationError, match="name must not be empty"):
            RunHistoryEntry(name=" ", ok=True, duration_ms=0, user_tag="u", summary="")

    def test_entry_rejects_negative_duration(self) -> None:
        with pytest.raises(ValidationError):
            RunHistoryEntry(name="a", ok=True, duration_ms=-1, user_tag="u", summary="")

    def test_notification_payload(self) -> None:
        notification = ErrorNotification(
            name="lager_1", user_tag="op#1", error="Config download failed (404)", duration_ms=42
        )
        assert notification.to_payload() == {
            "name": "lager_1",
            "userTag": "op#1",
            "error": "Config download failed (404)",
            "durationMs": 42,
        }


class TestSettings:
    def test_defaults(self, settings_factory: Callable[..., Settings]) -> None:
        settings = settings_factory()
        assert settings.api_url is None
        assert settings.allowed_role_ids == ""
        assert settings.request_timeout_seconds == 30.0
        assert settings.history_capacity == 20
        assert settings.log_level == "INFO"

    def test_required_values_optional_at_load(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.api_key is None
        assert settings.config_base_url is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "env-key")
        monkeypatch.setenv("CONFIG_BASE_URL", "https://configs.test/")
        monkeypatch.setenv("API_URL", "https://moves.test/move")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.api_key == "env-key"
        assert settings.config_base_url == "https://configs.test/"
        assert settings.api_url == "https://moves.test/move"

    def test_github_config_base_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_CONFIG_BASE", "https://raw.example.com/configs")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.config_base_url == "https://raw.example.com/configs"

    def test_blank_api_url_is_unset(self, settings_factory: Callable[..., Settings]) -> None:
        assert settings_factory(api_url="   ").api_url is None

    def test_log_level_upper_cased(self, settings_factory: Callable[..., Settings]) -> None:
        assert settings_factory(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self, settings_factory: Callable[..., Settings]) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            settings_factory(log_level="LOUD")

    def test_timeout_must_be_positive(self, settings_factory: Callable[..., Settings]) -> None:
        with pytest.raises(ValidationError, match="greater than 0"):
            settings_factory(request_timeout_seconds=0)

    @pytest.mark.parametrize("capacity", [0, 1001])
    def test_history_capacity_bounds(
        self, settings_factory: Callable[..., Settings], capacity: int
    ) -> None:
        with pytest.raises(ValidationError, match="history_capacity"):
            settings_factory(history_capacity=capacity)
