# rustlings

A runner for small Rust exercises. Each exercise is a Rust source file with a
deliberate mistake in it. After you fix the mistake, the runner compiles the
file, runs the program or its tests, and then moves you on to the next one.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` (`rustc --version` must succeed)
- For exercises checked in `clippy` mode, `cargo` with Clippy installed
- A working directory holding `info.toml` and an `exercises/` folder

## Installing

```
pip install .
```

This installs the `rustlings` command.

## Using it

Run every command from the directory that holds `info.toml`. If there is no
`info.toml` there, or `rustc` cannot be found, the command prints a message
and exits with status 1.

```
rustlings                 # welcome text and a short introduction
rustlings watch           # verify exercises in order, re-check on every save
rustlings verify          # verify all exercises once, in the listed order
rustlings run NAME        # compile and run (or test) one exercise
rustlings run next        # the first exercise that is not yet done
rustlings hint NAME       # print the hint for one exercise
rustlings reset NAME      # run "git stash -- <path>" for one exercise
rustlings list            # name, path and status of every exercise
rustlings lsp             # write rust-project.json for rust-analyzer
rustlings --version
```

`list` accepts `--paths`/`-p`, `--names`/`-n`, `--filter`/`-f` with
comma-separated patterns matched against names and paths, `--solved`/`-s` and
`--unsolved`/`-u`. It ends with a progress line such as
`Progress: You completed 3 / 10 exercises (30.0 %).`

`--nocapture` prints the output of test exercises when they pass.

`verify` and `run` exit with status 1 when an exercise fails to compile, fails
its tests or exits with an error. `run`, `hint` and `reset` exit with status 1
when the name matches no exercise.

### info.toml

Each exercise is an `[[exercises]]` entry with `name`, `path`, `mode` and
`hint`. `mode` is one of:

- `compile`: built with `rustc` and the binary is run
- `test`: built with `rustc --test` and the tests are run
- `clippy`: a `Cargo.toml` is written to `exercises/clippy/` and
  `cargo clippy` is run with warnings treated as errors

### Marking an exercise as done

An exercise counts as pending while its source still has a line like
`// I AM NOT DONE`. When a pending exercise passes, the runner shows the lines
around that marker and stops there. Remove the line and the runner moves on.

### Watch mode

`rustlings watch` verifies the exercises, then watches `exercises/` and
re-verifies whenever a `.rs` file is created or changed: the changed exercise
first, then every other pending one. While it runs you can type:

- `hint`: the hint for the exercise you are stuck on
- `clear`: clear the screen
- `quit`: leave watch mode
- `help`: list these commands

Set `NO_EMOJI` in the environment to get plain-text markers in place of emoji.

## Using it from Python

The runner's parts can be used directly:

```python
from rustlings.exercise import load_exercises
from rustlings.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)))
except VerificationFailed as failure:
    print(failure.exercise.hint)
```

- `rustlings.exercise`: `Exercise`, `Mode`, `load_exercises`; `Exercise.state()`
  and `Exercise.looks_done()` look for the pending marker;
  `Exercise.compile()` returns a `CompiledExercise` (a context manager that
  removes the built binary) or raises `ExerciseError`.
- `rustlings.verify`: `verify`, `test`, `prompt_for_completion`.
- `rustlings.run`: `run` and `reset`, which raise `RunFailed`.
- `rustlings.watch`: `watch`, `WatchShell`, `pending_after_change`.
- `rustlings.project`: `RustAnalyzerProject`, which builds and writes
  `rust-project.json`.
- `rustlings.cli`: `main`, `build_parser`, `find_exercise`, `list_lines`.

## Lessons

`rustlings.lessons` holds small Python modules that work through the ideas of
the exercises:

- `person`: `Person.parse("Mark,20")` raises `ParsePersonError` on bad input;
  `Person.from_text` falls back to `Person.default()` (John, 30).
- `color`: `Color.try_from((183, 65, 14))`, raising `IntoColorError` for a
  wrong length or a component outside 0..=255.
- `errors`: `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger.new`, `parse_pos_nonzero`.
- `quizzes`: `calculate_price_of_apples`, `transformer` with `Command`, and
  `ReportCard.render`.
- `basics`: `bigger`, `foo_if_fizz`, `sale_price`, `is_even`, `square`,
  `maybe_icecream`, and a `State` changed by `ChangeColor`, `Echo`, `Move` and
  `Quit` messages.
- `fruit`: `new_fruit_basket`, `fill_fruit_basket`.
- `scores`: `build_scores_table` from lines of `team1,team2,goals1,goals2`.
- `orders`: `create_order_template`, `Package`, and colour records.
- `traits`: `append_bar` for strings and lists, `Licensed`.
- `licensing`: `compare_license_types`, `some_func`.
- `strings`: `trim_me`, `compose_me`, `replace_me`.
- `vectors`: `array_and_vec`, `vec_loop`, `vec_map`.
- `cons_list`: `Cons`, `Nil`, `create_empty_list`, `create_non_empty_list`.
- `abs_all`: `abs_all`, which returns the input itself when nothing is negative.
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`,
  `factorial`.
- `progress`: `Progress` and the `count_*` functions.
- `wrapper`: `Wrapper`.

## What it does not do

- It ships no exercises and no `info.toml`; it runs the ones in the directory
  you start it from.
- It does not install or manage a Rust toolchain.
- The lessons cover no byte and character counting, and no threads, channels
  or shared-state examples.

## Tests

```
pip install .[test]
pytest
```