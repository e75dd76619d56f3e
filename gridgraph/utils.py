"""Small numeric helpers."""

from __future__ import annotations

import math
from typing import TypeVar

T = TypeVar("T")


def absdiff(x: T, y: T) -> T:
    """Return the absolute difference between two values."""
    return y - x if x < y else x - y  # type: ignore[operator]


def uint_sqrt(n: int) -> int | None:
    """Return the square root of ``n`` if it is a perfect square, else ``None``.

    Raises ``ValueError`` if ``n`` is negative.
    """
    if n < 0:
        raise ValueError("uint_sqrt() requires a non-negative integer")
    root = math.isqrt(n)
    return root if root * root == n else None