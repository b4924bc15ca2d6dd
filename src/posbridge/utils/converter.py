"""Numeric conversions for values coming back from RPC nodes and callers."""

from __future__ import annotations

from typing import Any, Optional


def to_int(value: Any) -> Optional[int]:
    """
    Coerce an integer-like value to ``int``.

    Accepts ints, ``0x`` hex strings, decimal strings and integral floats.
    ``None`` passes through.

    Raises:
        ValueError: If the value is not integer-like
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got bool {value!r}")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith(("0x", "-0x")):
            return int(text, 16)
        return int(text, 10)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    raise ValueError(f"expected an integer, got {type(value).__name__}")

