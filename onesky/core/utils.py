import math
from typing import Any, Mapping

INT64_MAX = 2 ** 63 - 1

def normalize_id(value: Any) -> int:
    """
    Coerce an identifier that may arrive as a JSON string, integer or float
    into a non-negative 64-bit integer.

    Strings are parsed as base-10, integers are kept, floats are truncated
    toward zero. Anything that cannot be converted yields 0; this never
    raises.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        digits = value.strip()
        if not (digits.isascii() and digits.isdigit()):
            return 0
        result = int(digits, 10)
    elif isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 0
        result = math.trunc(value)
    else:
        return 0

    if result < 0 or result > INT64_MAX:
        return 0
    return result

def lookup(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Get a key from a JSON object, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for k, v in data.items():
        if isinstance(k, str) and k.lower() == lowered:
            return v
    return default
