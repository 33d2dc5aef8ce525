"""Exercises: loading, compiling, running and checking their progress marker."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"


def temp_file() -> str:
    """Name of the binary built for the current process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the progress marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @classmethod
    def pending(cls, context) -> "State":
        return cls(tuple(context))

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or an exercise binary."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class CompiledExercise:
    """A successfully built exercise; closing it removes the binary."""

    def __init__(self, exercise: "Exercise"):
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed on a non-zero exit."""
        args = [temp_file()]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = subprocess.run(args, capture_output=True)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self):
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        return cls(
            name=data["name"],
            path=Path(data["path"]),
            mode=Mode(data["mode"]),
            hint=data["hint"],
        )

    def _rustc(self, *extra: str) -> list[str]:
        return [
            "rustc",
            *extra,
            str(self.path),
            "-o",
            temp_file(),
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
            *RUSTC_NO_DEBUG_ARGS,
        ]

    def _clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            if "NO_EMOJI" in os.environ:
                message = "Failed to write Clippy Cargo.toml file."
            else:
                message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
            raise OSError(f"{message} {exc}") from exc
        # Build a binary too so the exercise can be run; a failure here
        # shows up again in the clippy output.
        subprocess.run(self._rustc(), capture_output=True)
        # A clean is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ],
            capture_output=True,
        )

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output."""
        if self.mode is Mode.COMPILE:
            result = subprocess.run(self._rustc(), capture_output=True)
        elif self.mode is Mode.TEST:
            result = subprocess.run(self._rustc("--test"), capture_output=True)
        else:
            result = self._clippy()
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def state(self) -> State:
        """Done, or pending with the lines around the progress marker."""
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise OSError(
                f"We were unable to open the exercise file {self.path}! {exc}"
            ) from exc
        try:
            source = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(
                f"We were unable to read the exercise file {self.path}! {exc}"
            ) from exc

        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise ValueError(
                f"The progress marker in {self.path} does not sit on a single line"
            )

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State.pending(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines[low : high + 1], start=low)
        )

    def looks_done(self) -> bool:
        """Whether the progress marker has been removed."""
        return self.state().done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path="info.toml") -> list[Exercise]:
    """Read the list of exercises from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [Exercise.from_dict(entry) for entry in data["exercises"]]