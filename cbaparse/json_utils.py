"""JSON serialization helpers backed by orjson."""

from __future__ import annotations

import orjson


def json_dumps(data: object, indent: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize.
        indent: Pretty print with two-space indentation.

    Returns:
        JSON representation of ``data``.
    """

    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=option).decode()


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object.
    """

    return orjson.loads(data)
