"""Shared test fixtures for the move runner."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest

from src.models.config import Settings

if TYPE_CHECKING:
    from collections.abc import Callable

_SETTINGS_ENV_VARS = (
    "API_KEY",
    "API_URL",
    "CONFIG_BASE_URL",
    "GITHUB_CONFIG_BASE",
    "ALLOWED_ROLE_IDS",
    "ERROR_WEBHOOK_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "HISTORY_CAPACITY",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of Settings."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _make_settings(**overrides: Any) -> Settings:
    """Build Settings without reading a .env file."""
    values: dict[str, Any] = {
        "api_key": "test-key",
        "config_base_url": "https://configs.example.com/moves/",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[call-arg]


@pytest.fixture
def settings() -> Settings:
    """Settings with the required values present."""
    return _make_settings()


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with overrides on top of the required values."""
    return _make_settings


@pytest.fixture
def config_fetcher() -> MagicMock:
    """Config fetcher returning an empty config unless reconfigured."""
    fetcher = MagicMock()
    fetcher.fetch_config.return_value = {"moves": []}
    return fetcher


@pytest.fixture
def move_client() -> MagicMock:
    """Move client reporting success for every step unless reconfigured."""
    client = MagicMock()
    client.move.return_value = {"success": True}
    return client


def _move(from_xyz: tuple[int, int, int], to_xyz: tuple[int, int, int]) -> dict[str, Any]:
    """Build one move descriptor."""
    return {
        "from": dict(zip(("x", "y", "z"), from_xyz, strict=True)),
        "to": dict(zip(("x", "y", "z"), to_xyz, strict=True)),
    }


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Three-move config chaining each destination into the next source."""
    return {
        "apiUrl": "https://moves.example.com/v1/move",
        "loadChunks": False,
        "moves": [
            _move((1, 2, 3), (4, 5, 6)),
            _move((4, 5, 6), (7, 8, 9)),
            _move((7, 8, 9), (10, 11, 12)),
        ],
    }
