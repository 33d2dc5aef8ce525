# rustlings

A command-line runner for small Rust exercises. It compiles them, runs their
tests, lints them with Clippy and keeps track of which ones you have finished.
The package also holds worked solutions to many of the exercises, written as
ordinary Python.

## Installing

```
pip install .
```

The runner drives the Rust toolchain, so `rustc` (and `cargo` for the Clippy
exercises) must be on your `PATH`. Check with `rustc --version`.

## What is not included

The package does not ship the exercises themselves. The runner works on an
existing exercises directory: an `info.toml` listing the exercises (each with
`name`, `path`, `mode` of `compile`, `test` or `clippy`, and `hint`) and the
`.rs` files it points to. Without an `info.toml` in the current directory every
command stops with exit status 1.

## Using the runner

Run every command from the directory that holds `info.toml`.

```
rustlings                     # welcome text and how things work
rustlings watch               # re-check exercises whenever you save a .rs file
rustlings verify              # check every exercise in the order of info.toml
rustlings run <name>          # compile and run (or test) one exercise
rustlings run next            # the first exercise not yet done
rustlings hint <name>         # show the hint for an exercise
rustlings reset <name>        # undo your edits to an exercise (git stash)
rustlings list                # table of exercises with Done/Pending status
rustlings lsp                 # write rust-project.json for rust-analyzer
rustlings --version
```

`--nocapture`, given before the subcommand, prints the output of test
exercises.

`list` takes these options:

- `--paths` / `-p`: only the paths
- `--names` / `-n`: only the names
- `--filter` / `-f <text>`: comma-separated patterns, lower-cased, matched
  against names and paths
- `--unsolved` / `-u`: only exercises still pending
- `--solved` / `-s`: only exercises already done

The listing ends with a progress line such as
`Progress: You completed 3 / 10 exercises (30.0 %).`

`watch` also takes `--success-hints` to show an exercise's hint once it
compiles.

`lsp` reads the toolchain location from `RUST_SRC_PATH` if it is set, or asks
`rustc --print sysroot`, and adds a crate for every `.rs` file under
`./exercises`.

### How an exercise is marked done

Every exercise carries a `// I AM NOT DONE` comment. When the code compiles and
its tests pass, the runner stops and shows the lines around that marker; delete
the comment to move on to the next exercise.

In watch mode you can type:

- `hint`: show the hint of the exercise that last failed
- `clear`: clear the screen
- `quit`: leave watch mode
- `!<cmd>`: run a command, such as `!rustc --explain E0381`
- `help`: list these commands

Set the `NO_EMOJI` environment variable to get plain-text markers instead of
emoji.

## Using it as a library

```python
from rustlings.exercise import load_exercises
from rustlings.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
pending = [e for e in exercises if not e.looks_done()]
print(f"{len(pending)} exercises left")

try:
    verify(exercises, (0, len(exercises)), verbose=False, success_hints=False)
except VerificationFailed as exc:
    print(exc.exercise.hint)
```

- `rustlings.exercise`: `Exercise`, `Mode`, `State`, `load_exercises`;
  `Exercise.compile()` returns a `CompiledExercise` (a context manager that
  removes the built binary) or raises `ExerciseFailed`.
- `rustlings.verify`: `verify()` and `test()`, raising `VerificationFailed`.
- `rustlings.run`: `run()` and `reset()`.
- `rustlings.project`: `RustAnalyzerProject`, which builds `rust-project.json`.
- `rustlings.cli`: `main()`, `find_exercise()`, `list_exercises()`, `watch()`.

### Worked solutions

- `rustlings.basics`: `bigger`, `foo_if_fizz`, `animal_habitat`,
  `sale_price`, `is_even`, `square`, `vec_loop`, `vec_map`, `Rectangle`.
- `rustlings.quizzes`: `calculate_price_of_apples`, `transformer` with
  `Command`, and `ReportCard`.
- `rustlings.structs`: colour structs, `Order`, `Package`, and a `State`
  driven by `ChangeColor`, `Echo`, `Move` and `Quit` messages.
- `rustlings.pointers`: a `Cons` list and copy-on-write `abs_all`.
- `rustlings.errors`: `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger` and `parse_pos_nonzero`.
- `rustlings.iterators`: capitalising words, `divide`, `factorial` and
  `Progress` counts.
- `rustlings.traits`: `Wrapper`, `append_bar`, `Licensed` and
  `compare_license_types`.