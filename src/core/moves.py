"""Pure functions for resolving a move config and classifying move results.

No I/O here: the services layer fetches documents and performs requests,
these helpers decide what to send and how to read the answers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.models.move_config import DEFAULT_API_URL, ExecutionParams, MoveConfig

UNKNOWN_REASON = "unknown"

_COORDINATES = ("x", "y", "z")


def normalize_base_url(base_url: str | None) -> str:
    """Strip whitespace and trailing slashes. Returns "" when nothing is left."""
    if not base_url:
        return ""
    return base_url.strip().rstrip("/")


def build_config_url(base_url: str, config_name: str) -> str:
    """Join a normalized base with ``<config_name>.json``."""
    return f"{base_url}/{config_name}.json"


def parse_move_config(document: Any) -> MoveConfig:
    """Apply the config defaulting rules to a raw JSON document.

    Anything that is not a JSON object is treated as an object with every
    field absent.
    """
    if not isinstance(document, Mapping):
        return MoveConfig()

    api_url = document.get("apiUrl")
    load_chunks = document.get("loadChunks")
    moves = document.get("moves")

    return MoveConfig(
        api_url=api_url if isinstance(api_url, str) and api_url else None,
        load_chunks=load_chunks if isinstance(load_chunks, bool) else True,
        moves=list(moves) if isinstance(moves, list) else [],
    )


def resolve_execution_params(
    config: MoveConfig,
    api_key: str,
    default_api_url: str | None = None,
) -> ExecutionParams:
    """Fix the parameters shared by every step of one batch."""
    return ExecutionParams(
        api_key=api_key,
        api_url=config.api_url or default_api_url or DEFAULT_API_URL,
        load_chunks=config.load_chunks,
    )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _position_values(position: Any, key: str) -> list[str]:
    if not isinstance(position, Mapping):
        msg = f"missing '{key}' position"
        raise ValueError(msg)
    missing = [axis for axis in _COORDINATES if position.get(axis) is None]
    if missing:
        msg = f"'{key}' position is missing {', '.join(missing)}"
        raise ValueError(msg)
    return [_query_value(position[axis]) for axis in _COORDINATES]


def split_move(move: Any) -> tuple[Mapping[str, Any], Mapping[str, Any]]:
    """Return the (from, to) positions of one descriptor.

    Raises:
        ValueError: the descriptor or one of its positions is missing.
    """
    if not isinstance(move, Mapping):
        msg = "move must be an object with 'from' and 'to'"
        raise ValueError(msg)
    _position_values(move.get("from"), "from")
    _position_values(move.get("to"), "to")
    return move["from"], move["to"]


def build_move_query(
    params: ExecutionParams,
    move_from: Mapping[str, Any],
    move_to: Mapping[str, Any],
) -> dict[str, str]:
    """Build the query parameters for one move request."""
    from_x, from_y, from_z = _position_values(move_from, "from")
    to_x, to_y, to_z = _position_values(move_to, "to")
    return {
        "key": params.api_key,
        "fromX": from_x,
        "fromY": from_y,
        "fromZ": from_z,
        "toX": to_x,
        "toY": to_y,
        "toZ": to_z,
        "loadChunks": "true" if params.load_chunks else "false",
    }


def _is_truthy(value: Any) -> bool:
    """JSON-client truthiness: empty objects and arrays count as true."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def classify_move_response(body: Any) -> tuple[bool, str | None]:
    """Decide whether a parsed move response reports success.

    Any body that is not an object with a truthy ``success`` field is a
    failure, including bodies that have no ``success`` field at all.
    """
    if isinstance(body, Mapping) and _is_truthy(body.get("success")):
        return True, None
    error = body.get("error") if isinstance(body, Mapping) else None
    return False, str(error) if _is_truthy(error) else UNKNOWN_REASON


def describe_exception(exc: BaseException) -> str:
    """Message used as a step's failure reason."""
    return str(exc) or type(exc).__name__


def format_step_error(index: int, reason: str) -> str:
    """Format a failure for the zero-based step ``index``."""
    return f"Step {index + 1}: {reason}"
