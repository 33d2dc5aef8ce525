"""Command line entry point: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import enum
import itertools
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import reset as reset_exercise
from .run import run as run_exercise
from .verify import VerificationFailed, verify

DEBOUNCE_SECONDS = 1.0
POLL_SECONDS = 0.25

WELCOME = r"""       welcome to...
                 _   _ _
  _ __ _   _ ___| |_| (_)_ __   __ _ ___
 | '__| | | / __| __| | | '_ \ / _` / __|
 | |  | |_| \__ \ |_| | | | | | (_| \__ \
 |_|   \__,_|___/\__|_|_|_| |_|\__, |___/
                               |___/"""

DEFAULT_OUT = """Thanks for installing Rustlings!

Is this your first time? Don't worry, Rustlings was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how Rustlings operates:

1. The central concept behind Rustlings is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   Rustlings will be able to move on to the next exercise.
2. If you run Rustlings in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run Rustlings! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `rustlings hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue in the
   project's issue tracker. We look at every issue, and sometimes, other
   learners do too so you can help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `rustlings lsp`.

Got all that? Great! To get started, run `rustlings watch` in order to get the first
exercise. Make sure to have your editor open!"""

FENISH_LINE = """+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                           \\/\x1b[31m
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒
           ▒▒  ▒▒                      ▒▒  ▒▒\x1b[0m

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them to our repo.
You can also contribute your own exercises to help the greater community!

Before reporting an issue or contributing, please read our guidelines
in CONTRIBUTING.md."""

SHELL_HELP = """Commands available to you in watch mode:
  hint   - prints the current exercise's hint
  clear  - clears the screen
  quit   - quits watch mode
  !<cmd> - executes a command, like `!rustc --explain E0381`
  help   - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = enum.auto()
    UNFINISHED = enum.auto()


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


def _version() -> str:
    try:
        return version("rustlings")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the rustlings command."""
    parser = argparse.ArgumentParser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser(
        "verify", help="Verify all exercises according to the recommended order"
    )
    watch_cmd = commands.add_parser("watch", help="Rerun `verify` when files were edited")
    watch_cmd.add_argument(
        "--success-hints", action="store_true", help="Show hints on success"
    )
    for name, text in (
        ("run", "Run/Test a single exercise"),
        ("reset", 'Reset a single exercise using "git stash -- <filename>"'),
        ("hint", "Return a hint for the given exercise"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("name", help="The name of the exercise")

    list_cmd = commands.add_parser("list", help="List the exercises available in Rustlings")
    list_cmd.add_argument(
        "-p", "--paths", action="store_true", help="Show only the paths of the exercises"
    )
    list_cmd.add_argument(
        "-n", "--names", action="store_true", help="Show only the names of the exercises"
    )
    list_cmd.add_argument(
        "-f",
        "--filter",
        default=None,
        help="Provide a string to match exercise names. Comma separated patterns are accepted",
    )
    list_cmd.add_argument(
        "-u", "--unsolved", action="store_true", help="Display only exercises not yet solved"
    )
    list_cmd.add_argument(
        "-s",
        "--solved",
        action="store_true",
        help="Display only exercises that have been solved",
    )
    commands.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """The exercise with this name, or the first pending one for "next"."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool,
    names: bool,
    filter_text: str | None,
    unsolved: bool,
    solved: bool,
) -> list[str]:
    """The lines of the exercise listing, ending with the progress summary."""
    lines = []
    if not paths and not names:
        lines.append(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    patterns = [f for f in (filter_text or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches or filter_text is None):
            if paths:
                lines.append(fname)
            elif names:
                lines.append(exercise.name)
            else:
                lines.append(f"{exercise.name:<17}\t{fname:<46}\t{status:<7}")
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else float("nan")
    lines.append(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.1f} %)."
    )
    return lines


def rustc_exists() -> bool:
    """Whether `rustc --version` runs successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0


class _EventCollector(FileSystemEventHandler):
    def __init__(self, events: queue.Queue):
        super().__init__()
        self._events = events

    def on_any_event(self, event) -> None:
        for raw in (event.src_path, getattr(event, "dest_path", "")):
            if raw:
                self._events.put(Path(os.fsdecode(raw)))


class _WatchShell:
    """Reads commands from standard input while watch mode runs."""

    def __init__(self, hint: str):
        self._lock = threading.Lock()
        self._hint = hint
        self.should_quit = threading.Event()

    def update_hint(self, hint: str) -> None:
        with self._lock:
            self._hint = hint

    def start(self) -> None:
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        threading.Thread(target=self._loop, daemon=True).start()

    def _loop(self) -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as exc:
                print(f"error reading command: {exc}")
                continue
            if not line:
                return
            self.handle(line)

    def handle(self, line: str) -> None:
        text = line.strip()
        if text == "hint":
            with self._lock:
                print(self._hint)
        elif text == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif text == "quit":
            self.should_quit.set()
            print("Bye!")
        elif text == "help":
            print(SHELL_HELP)
        elif text.startswith("!"):
            cmd = text[1:]
            parts = cmd.split()
            if not parts:
                print("no command provided")
            else:
                try:
                    subprocess.run(parts)
                except OSError as exc:
                    print(f"failed to execute command `{cmd}`: {exc}")
        else:
            print(f"unknown command: {text}")


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = tuple(part for part in Path(suffix).parts if part != ".")
    return bool(parts) and path.parts[-len(parts):] == parts


def watch(exercises: Sequence[Exercise], verbose: bool, success_hints: bool) -> WatchStatus:
    """Verify the exercises, then again whenever an exercise file changes."""
    events: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_EventCollector(events), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
        except VerificationFailed as exc:
            shell = _WatchShell(exc.exercise.hint)
        else:
            return WatchStatus.FINISHED
        shell.start()

        pending: dict[Path, float] = {}
        while True:
            try:
                path = events.get(timeout=POLL_SECONDS)
                pending[path] = time.monotonic()
                while True:
                    pending[events.get_nowait()] = time.monotonic()
            except queue.Empty:
                pass

            now = time.monotonic()
            ready = [p for p, seen in pending.items() if now - seen >= DEBOUNCE_SECONDS]
            for path in ready:
                del pending[path]
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                current = next(
                    (e for e in exercises if _ends_with(filepath, e.path)), None
                )
                to_check = itertools.chain(
                    [current] if current is not None else [],
                    (
                        e
                        for e in exercises
                        if not e.looks_done() and not _ends_with(filepath, e.path)
                    ),
                )
                num_done = sum(
                    1
                    for e in exercises
                    if e.looks_done() and not _ends_with(filepath, e.path)
                )
                _clear_screen()
                try:
                    verify(to_check, (num_done, len(exercises)), verbose, success_hints)
                except VerificationFailed as exc:
                    shell.update_hint(exc.exercise.hint)
                else:
                    return WatchStatus.FINISHED

            if shell.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _print_lines(lines: list[str]) -> int:
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError as exc:
        raise RuntimeError(
            "Couldn't find toolchain path, do you have `rustc` installed?"
        ) from exc
    try:
        project.exercises_to_json()
    except OSError as exc:
        raise RuntimeError("Couldn't parse rustlings exercises files") from exc

    if not project.crates:
        print("Failed find any exercises, make sure you're in the `rustlings` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print(
        "rust-analyzer will now parse exercises, restart your language server or editor"
    )
    return 0


def _watch(exercises: Sequence[Exercise], verbose: bool, success_hints: bool) -> int:
    try:
        status = watch(exercises, verbose, success_hints)
    except OSError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if "NO_EMOJI" in os.environ else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FENISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustlings watch` again"
        )
    return 0


def main(argv=None) -> int:
    """Run the rustlings command and return its exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    try:
        match args.command:
            case "list":
                return _print_lines(
                    list_exercises(
                        exercises,
                        args.paths,
                        args.names,
                        args.filter,
                        args.unsolved,
                        args.solved,
                    )
                )
            case "run":
                run_exercise(find_exercise(args.name, exercises), verbose)
            case "reset":
                try:
                    reset_exercise(find_exercise(args.name, exercises))
                except OSError:
                    return 1
            case "hint":
                print(find_exercise(args.name, exercises).hint)
            case "verify":
                verify(exercises, (0, len(exercises)), verbose, False)
            case "lsp":
                return _lsp()
            case "watch":
                return _watch(exercises, verbose, args.success_hints)
    except ExerciseNotFound as exc:
        print(exc)
        return 1
    except VerificationFailed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())