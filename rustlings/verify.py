"""Checking exercises one after another, with progress reporting."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import success, warn

BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, did not run cleanly, or is still pending."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


class _CheckFailed(Exception):
    """Compiling or running failed; the details were already printed."""


class _RunMode(enum.Enum):
    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def _spinner(message: str):
    return _console().status(message)


def _show_progress(position: int, total: int, percentage: float) -> None:
    if total and position < total:
        filled = BAR_WIDTH * position // total
        done, rest = "#" * filled, ">" + "-" * (BAR_WIDTH - filled - 1)
    else:
        done, rest = "#" * BAR_WIDTH, ""
    _console().print(
        Text.assemble(
            "Progress: [",
            (done, "green"),
            (rest, "red"),
            f"] {position}/{total} ({percentage:.1f} %)",
        )
    )


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool,
    success_hints: bool,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first that fails."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 0.0
    position = num_done
    _show_progress(position, total, percentage)

    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                passed = _compile_and_test(
                    exercise, _RunMode.INTERACTIVE, verbose, success_hints
                )
            elif exercise.mode is Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise, success_hints)
            else:
                passed = _compile_only(exercise, success_hints)
        except _CheckFailed:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)
        if total:
            percentage += 100.0 / total
        position += 1
        _show_progress(position, total, percentage)


def test(exercise: Exercise, verbose: bool) -> None:
    """Compile and run an exercise's test harness without prompting."""
    try:
        _compile_and_test(exercise, _RunMode.NON_INTERACTIVE, verbose, False)
    except _CheckFailed:
        raise VerificationFailed(exercise) from None


def _compile(exercise: Exercise, message: str) -> CompiledExercise:
    try:
        with _spinner(message):
            return exercise.compile()
    except ExerciseFailed as exc:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise _CheckFailed from exc


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _compile(exercise, f"Compiling {exercise}..."):
        pass
    return _prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _compile(exercise, f"Compiling {exercise}...") as compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseFailed as exc:
            warn(f"Ran {exercise} with errors")
            print(exc.output.stdout)
            print(exc.output.stderr)
            raise _CheckFailed from exc
    return _prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, run_mode: _RunMode, verbose: bool, success_hints: bool
) -> bool:
    message = f"Testing {exercise}..."
    with _compile(exercise, message) as compiled:
        try:
            with _spinner(message):
                output = compiled.run()
        except ExerciseFailed as exc:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(exc.output.stdout)
            raise _CheckFailed from exc
    if verbose:
        print(output.stdout)
    if run_mode is _RunMode.INTERACTIVE:
        return _prompt_for_completion(exercise, None, success_hints)
    return True


def _separator() -> Text:
    return Text("====================", style="bold")


def _prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    state = exercise.state()
    if state.done():
        return True

    verb = {Mode.COMPILE: "ran", Mode.TEST: "tested", Mode.CLIPPY: "compiled"}
    success(f"Successfully {verb[exercise.mode]} {exercise}!")

    no_emoji = "NO_EMOJI" in os.environ
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif no_emoji:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    console = _console()
    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
        print()
    if success_hints:
        print("Hints:")
        console.print(_separator())
        print(exercise.hint)
        console.print(_separator())
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        line = (
            Text(context_line.line, style="bold")
            if context_line.important
            else Text(context_line.line)
        )
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                line,
            )
        )
    return False