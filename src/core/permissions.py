"""Role allow-list checks for the run command."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def parse_allowed_role_ids(raw: str | None) -> frozenset[str]:
    """Parse a comma-separated list of role IDs, ignoring blank entries."""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def has_permission(member_roles: Iterable[str], allowed_role_ids: frozenset[str]) -> bool:
    """True if any of the member's roles is allowed.

    An empty allow-list admits everyone.
    """
    if not allowed_role_ids:
        return True
    return any(role in allowed_role_ids for role in member_roles)
