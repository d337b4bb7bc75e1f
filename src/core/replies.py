"""Reply texts for the chat-style command front end."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.models.run_history import RunHistoryEntry
    from src.models.run_result import RunResult

PERMISSION_DENIED = "[DENIED] You do not have permission to do that."


def render_start(name: str) -> str:
    return f"[START] Starting **{name}** (config is loaded live from the config store)..."


def render_result(name: str, result: RunResult) -> str:
    """Render the final reply for a settled run.

    An empty batch is reported as empty or malformed, never as success.
    """
    if result.is_empty:
        return f"[INFO] **{name}** is empty or malformed."
    if result.ok:
        return f"[SUCCESS] Done: **{result.ok_count}/{result.total}** succeeded."
    lines = [
        f"[WARNING] Done: **{result.ok_count}/{result.total}** ok, "
        f"**{result.fail_count}** failed.",
        "Errors:",
    ]
    lines.extend(f"- {error}" for error in result.errors)
    return "\n".join(lines)


def render_failure(error: BaseException | str) -> str:
    return f"[ERROR] Error: {error}"


def render_invalid_name() -> str:
    return "[ERROR] Config name must not be empty."


def render_status(entries: list[RunHistoryEntry]) -> str:
    """Render history entries, newest first."""
    if not entries:
        return "[INFO] No runs recorded yet."
    lines = [f"[INFO] Last {len(entries)} runs:"]
    for entry in entries:
        marker = "ok" if entry.ok else "failed"
        lines.append(
            f"  {entry.timestamp.strftime('%Y-%m-%d %H:%M:%S')} | {entry.name} | "
            f"{marker} | {entry.duration_ms} ms | {entry.user_tag} | {entry.summary}"
        )
    return "\n".join(lines)
