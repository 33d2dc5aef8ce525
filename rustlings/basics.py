"""Basic functions: comparisons, branching, arithmetic and lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """10 off an even price, 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each value doubled."""
    doubled = []
    for value in values:
        doubled.append(value * 2)
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Each value doubled, by mapping."""
    return [value * 2 for value in values]


@dataclass
class Rectangle:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")