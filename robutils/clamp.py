"""Restrict a value to lie between two bounds."""

from __future__ import annotations

import operator
from typing import Callable, TypeVar

T = TypeVar("T")


def clamp(v: T, lo: T, hi: T, comp: Callable[[T, T], bool] | None = None) -> T:
    """Return lo if v is less than lo, hi if hi is less than v, otherwise v.

    comp(a, b) decides whether a is less than b; it defaults to ``<``.
    Raises ValueError if hi is less than lo.
    """
    less = operator.lt if comp is None else comp
    if less(hi, lo):
        raise ValueError("upper bound is less than lower bound")
    if less(v, lo):
        return lo
    if less(hi, v):
        return hi
    return v