"""Text and JSON representations for linked lists."""

import json
from typing import Any, Iterable


def _render(value: Any, separator: str, active: set[int]) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return _join(value, value, separator, active)
    # Nested linked lists join like nested arrays
    to_array = getattr(value, "to_array", None)
    if callable(to_array):
        return _join(value, to_array(), separator, active)
    return str(value)


def _join(owner: Any, values: Iterable[Any], separator: str, active: set[int]) -> str:
    # A sequence already being rendered further up renders empty
    if id(owner) in active:
        return ""
    active.add(id(owner))
    try:
        return separator.join(_render(value, separator, active) for value in values)
    finally:
        active.discard(id(owner))


def join_values(values: Iterable[Any], separator: str = ",") -> str:
    """
    Join values the way an Array is converted to a string.

    None renders as an empty string, booleans as ``true``/``false`` and
    nested sequences are joined recursively with the same separator. A
    sequence that contains itself renders the inner reference as empty.

    Args:
        values: Values to join, in order
        separator: Text placed between rendered values

    Returns:
        The joined text
    """
    return _join(values, values, separator, set())


class LinkedArrayJSONEncoder(json.JSONEncoder):
    """JSON encoder that serializes any object exposing a ``to_json()`` hook."""

    def default(self, o: Any) -> Any:
        to_json = getattr(o, "to_json", None)
        if callable(to_json):
            return to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize ``obj`` to JSON, honoring ``to_json()`` hooks."""
    kwargs.setdefault("cls", LinkedArrayJSONEncoder)
    return json.dumps(obj, **kwargs)
