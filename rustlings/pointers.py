"""A cons list and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell; the end of a list is None."""

    value: int
    next: "Cons | None" = None


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, None))


def abs_all(values: Sequence[int]):
    """Make every value non-negative.

    A list is owned and changed in place. Any other sequence is borrowed:
    it is returned as it is when nothing needs changing, otherwise a new
    list with the changes is returned.
    """
    if isinstance(values, list):
        for index, value in enumerate(values):
            if value < 0:
                values[index] = -value
        return values
    if any(value < 0 for value in values):
        return [abs(value) for value in values]
    return values