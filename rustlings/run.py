"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from rich.console import Console

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import VerificationFailed, test


def _spinner(message: str):
    return Console(highlight=False, soft_wrap=True, emoji=False).status(message)


def run(exercise: Exercise, verbose: bool) -> None:
    """Compile and run one exercise; raise VerificationFailed if it fails."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the changes made to the exercise file with git."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    try:
        with _spinner(f"Compiling {exercise}..."):
            compiled = exercise.compile()
    except ExerciseFailed as exc:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(exc.output.stderr)
        raise VerificationFailed(exercise) from exc

    with compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseFailed as exc:
            print(exc.output.stdout)
            print(exc.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise VerificationFailed(exercise) from exc

    print(output.stdout)
    success(f"Successfully ran {exercise}")