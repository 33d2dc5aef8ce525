"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = "0123456789"
_I32 = 32
_I64 = 64

EMPTY_MESSAGE = "cannot parse integer from empty string"
INVALID_DIGIT_MESSAGE = "invalid digit found in string"
POS_OVERFLOW_MESSAGE = "number too large to fit in target type"
NEG_OVERFLOW_MESSAGE = "number too small to fit in target type"


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly: no spaces, ASCII digits."""
    if not text:
        raise ValueError(EMPTY_MESSAGE)
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits:
        raise ValueError(INVALID_DIGIT_MESSAGE)
    upper = 2 ** (bits - 1) - 1
    lower = -(2 ** (bits - 1))
    value = 0
    for char in digits:
        if char not in _DIGITS:
            raise ValueError(INVALID_DIGIT_MESSAGE)
        value = value * 10 + _DIGITS.index(char)
        if not negative and value > upper:
            raise ValueError(POS_OVERFLOW_MESSAGE)
        if negative and -value < lower:
            raise ValueError(NEG_OVERFLOW_MESSAGE)
    return -value if negative else value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed quantity: 5 tokens per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, _I32)
    cost = quantity * cost_per_item + processing_fee
    if not -(2 ** 31) <= cost <= 2**31 - 1:
        raise OverflowError("attempt to compute a cost that does not fit in 32 bits")
    return cost


class CreationReason(enum.Enum):
    """Why a value is not a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value could not become a PositiveNonzeroInteger."""

    def __init__(self, reason: CreationReason):
        super().__init__(reason.value)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise CreationError(CreationReason.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationReason.ZERO)

    def __repr__(self) -> str:
        return f"PositiveNonzeroInteger({self.value})"


class ParsePosNonzeroError(ValueError):
    """Parsing text as a positive non-zero integer failed.

    Exactly one of ``creation`` and ``parse_int`` is set.
    """

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.creation: CreationError | None = (
            cause if isinstance(cause, CreationError) else None
        )
        self.parse_int: ValueError | None = (
            None if isinstance(cause, CreationError) else cause
        )


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        number = _parse_int(text, _I64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc


def parse_and_describe(text: str) -> str:
    """Parse text and describe the resulting integer; errors of either kind propagate."""
    number = _parse_int(text, _I64)
    return f"output={PositiveNonzeroInteger(number)!r}"