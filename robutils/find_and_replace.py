"""Replace every occurrence of a substring."""

from __future__ import annotations

from typing import TypeVar

S = TypeVar("S", str, bytes)


def find_and_replace(input: S, find: S, replace: S) -> S:
    """Return a copy of input with every non-overlapping find replaced.

    Occurrences are found left to right; an empty find leaves input unchanged.
    """
    if find == replace or not find:
        return input
    return input.replace(find, replace)