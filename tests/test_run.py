import subprocess

import pytest

from rustlings.exercise import Exercise, Mode
from rustlings.run import reset, run
from rustlings.verify import VerificationFailed

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
DONE = "fn main() {\n}\n"


class FakeToolchain:
    def __init__(self):
        self.compile_ok = True
        self.run_ok = True
        self.compile_stderr = b""
        self.stdout = b""
        self.stderr = b""
        self.calls = []

    def __call__(self, args, capture_output=False, **kwargs):
        args = list(args)
        self.calls.append(args)
        if args[0] in ("rustc", "cargo"):
            code = 0 if self.compile_ok else 1
            return subprocess.CompletedProcess(args, code, b"", self.compile_stderr)
        code = 0 if self.run_ok else 101
        return subprocess.CompletedProcess(args, code, self.stdout, self.stderr)


@pytest.fixture
def toolchain(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    fake = FakeToolchain()
    monkeypatch.setattr("rustlings.exercise.subprocess.run", fake)
    return fake


def make_exercise(tmp_path, name, mode, pending=False):
    path = tmp_path / f"{name}.rs"
    path.write_text(PENDING if pending else DONE)
    return Exercise(name=name, path=path, mode=mode, hint="Hello!")


def test_run_compile_success_prints_output(toolchain, tmp_path, capsys):
    toolchain.stdout = b"Hello there!"
    exercise = make_exercise(tmp_path, "compSuccess", Mode.COMPILE)
    run(exercise, False)
    out = capsys.readouterr().out
    assert "Hello there!" in out
    assert f"Successfully ran {exercise}" in out


def test_run_compile_failure_raises(toolchain, tmp_path, capsys):
    toolchain.compile_ok = False
    toolchain.compile_stderr = b"error: expected pattern"
    exercise = make_exercise(tmp_path, "compFailure", Mode.COMPILE)
    with pytest.raises(VerificationFailed) as info:
        run(exercise, False)
    assert info.value.exercise is exercise
    out = capsys.readouterr().out
    assert f"Compilation of {exercise} failed!" in out
    assert "error: expected pattern" in out


def test_run_binary_failure_raises(toolchain, tmp_path, capsys):
    toolchain.run_ok = False
    toolchain.stderr = b"panicked"
    exercise = make_exercise(tmp_path, "crash", Mode.COMPILE)
    with pytest.raises(VerificationFailed):
        run(exercise, False)
    out = capsys.readouterr().out
    assert f"Ran {exercise} with errors" in out
    assert "panicked" in out


def test_run_compile_exercise_does_not_prompt(toolchain, tmp_path, capsys):
    exercise = make_exercise(tmp_path, "pending_exercise", Mode.COMPILE, pending=True)
    run(exercise, False)
    out = capsys.readouterr().out
    assert "I AM NOT DONE" not in out
    assert "Successfully ran" in out


def test_run_test_exercise_does_not_prompt(toolchain, tmp_path, capsys):
    exercise = make_exercise(tmp_path, "pending_test_exercise", Mode.TEST, pending=True)
    run(exercise, False)
    assert "I AM NOT DONE" not in capsys.readouterr().out
    assert toolchain.calls[0][:2] == ["rustc", "--test"]


@pytest.mark.parametrize("verbose", [True, False])
def test_run_test_output_follows_nocapture(toolchain, tmp_path, capsys, verbose):
    toolchain.stdout = b"THIS TEST TOO SHALL PASS"
    exercise = make_exercise(tmp_path, "testSuccess", Mode.TEST)
    run(exercise, verbose)
    assert ("THIS TEST TOO SHALL PASS" in capsys.readouterr().out) is verbose


def test_run_test_failure_raises(toolchain, tmp_path):
    toolchain.run_ok = False
    exercise = make_exercise(tmp_path, "testNotPassed", Mode.TEST)
    with pytest.raises(VerificationFailed) as info:
        run(exercise, False)
    assert info.value.exercise is exercise


def test_reset_stashes_exercise_file(monkeypatch, tmp_path):
    launched = []

    def fake_popen(args, **kwargs):
        launched.append(list(args))
        return "process"

    monkeypatch.setattr("rustlings.run.subprocess.Popen", fake_popen)
    exercise = make_exercise(tmp_path, "intro1", Mode.COMPILE)
    assert reset(exercise) == "process"
    assert launched == [["git", "stash", "--", str(exercise.path)]]


def test_reset_raises_when_git_cannot_start(monkeypatch, tmp_path):
    def missing(args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr("rustlings.run.subprocess.Popen", missing)
    exercise = make_exercise(tmp_path, "intro1", Mode.COMPILE)
    with pytest.raises(FileNotFoundError):
        reset(exercise)