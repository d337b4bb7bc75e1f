"""Batch result aggregation functions."""

from __future__ import annotations

from src.models.run_result import MAX_REPORTED_ERRORS, RunResult


def build_run_result(total: int, ok_count: int, errors: list[str]) -> RunResult:
    """Aggregate step outcomes into a RunResult.

    ``errors`` holds every step failure in execution order; only the first
    MAX_REPORTED_ERRORS are kept on the result.
    """
    fail_count = len(errors)
    return RunResult(
        ok=fail_count == 0,
        total=total,
        ok_count=ok_count,
        fail_count=fail_count,
        errors=errors[:MAX_REPORTED_ERRORS],
    )


def format_run_summary(result: RunResult) -> str:
    """One-line summary stored in the run history."""
    if result.is_empty:
        return "empty or malformed config"
    if result.ok:
        return f"{result.ok_count}/{result.total} ok"
    return f"{result.ok_count}/{result.total} ok, {result.fail_count} failed"
