"""
Scalar transcoding between leaf values and the bytes that get sealed.

Strings travel as their raw UTF-8 bytes; every other scalar travels as
JSON text. Decoding is best effort: whatever parses as JSON comes back
typed, anything else comes back as a string. A string whose content is
itself a JSON literal ("42", "true", "null") therefore changes type across
a round trip. Data written by other clients relies on this behaviour.
"""

import json
import math
from typing import Any

from vessot.errors import UnsupportedValueError


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity, which are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def encode_scalar(value: Any) -> bytes:
    """Normalize a leaf value to bytes ready for sealing."""
    if isinstance(value, str):
        return value.encode("utf-8")
    try:
        text = json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise UnsupportedValueError(
            f"Cannot encode value of type {type(value).__name__}: {e}"
        ) from e
    return text.encode("utf-8")


def decode_scalar(data: bytes) -> Any:
    """Rebuild a typed value from decrypted bytes, falling back to text."""
    text = data.decode("utf-8", errors="replace")
    try:
        return json.loads(
            text, parse_constant=_reject_constant, parse_float=_finite_float,
        )
    except (ValueError, RecursionError):
        # deeply nested brackets exhaust the decoder before it can fail
        return text
