"""Request parameter cleanup and Stripe's bracketed form encoding."""

from typing import Any, Optional


def remove_null_and_empty_params(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Drop ``None`` values, empty strings and empty containers, recursively.

    Nested maps that end up empty after cleanup are dropped as well.
    """
    if params is None:
        return None

    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, dict):
            value = remove_null_and_empty_params(value)
        if value is None or value == "" or value == {} or value == []:
            continue
        cleaned[key] = value
    return cleaned


def encode_params(params: Optional[dict[str, Any]]) -> list[tuple[str, str]]:
    """
    Flatten nested params into form pairs.

    ``{"card": {"number": "4242"}, "expand": ["customer"]}`` becomes
    ``[("card[number]", "4242"), ("expand[0]", "customer")]``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        _flatten(key, value, pairs)
    return pairs


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((prefix, "true" if value else "false"))
    elif value is not None:
        pairs.append((prefix, str(value)))
