"""Small worked quizzes: apple prices, a string machine and report cards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


class CommandKind(enum.Enum):
    UPPERCASE = enum.auto()
    TRIM = enum.auto()
    APPEND = enum.auto()


@dataclass(frozen=True)
class Command:
    """An action applied to a string by transformer()."""

    kind: CommandKind
    times: int = 0

    @classmethod
    def uppercase(cls) -> "Command":
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> "Command":
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> "Command":
        if times < 0:
            raise ValueError("append count must not be negative")
        return cls(CommandKind.APPEND, times)


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times
    raise ValueError(f"unknown command {command.kind}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetic."""

    grade: Any
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )