"""Input validation for command arguments."""

from __future__ import annotations


def normalize_config_name(name: str | None) -> str | None:
    """Strip surrounding whitespace; None when nothing usable is left."""
    if name is None:
        return None
    cleaned = name.strip()
    return cleaned or None
