"""Checking exercises in order and reporting the results."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from rustlings.exercise import CompiledExercise, Exercise, ExerciseError, Mode
from rustlings.ui import success, warn

_BAR_WIDTH = 60
_SEPARATOR = "===================="


class VerificationFailed(Exception):
    """An exercise did not pass; the offending exercise is attached."""

    def __init__(self, exercise: Exercise):
        super().__init__(str(exercise))
        self.exercise = exercise


class _RunMode(enum.Enum):
    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _print_progress(position: int, total: int, message: str) -> None:
    filled = min(_BAR_WIDTH, position * _BAR_WIDTH // total) if total else _BAR_WIDTH
    bar = "#" * filled
    if filled < _BAR_WIDTH:
        bar += ">" + "-" * (_BAR_WIDTH - filled - 1)
    print(f"Progress: [{bar}] {position}/{total} {message}".rstrip())


def verify(exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first failure."""
    num_done, total = progress
    position = num_done
    _print_progress(position, total, "")
    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                passed = _compile_and_test(exercise, _RunMode.INTERACTIVE, verbose)
            elif exercise.mode is Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            else:
                passed = _compile_only(exercise)
        except VerificationFailed:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)
        percentage = num_done / total * 100.0
        position += 1
        _print_progress(position, total, f"({percentage:.1f} %)")


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's test harness; raise VerificationFailed on failure."""
    _compile_and_test(exercise, _RunMode.NON_INTERACTIVE, verbose)


def _compile(exercise: Exercise, message: str) -> CompiledExercise:
    try:
        with _console().status(message):
            return exercise.compile()
    except ExerciseError as error:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        raise VerificationFailed(exercise) from error


def _compile_only(exercise: Exercise) -> bool:
    with _compile(exercise, f"Compiling {exercise}..."):
        pass
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise, f"Compiling {exercise}...") as compiled:
        try:
            with _console().status(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseError as error:
            warn(f"Ran {exercise} with errors")
            print(error.output.stdout)
            print(error.output.stderr)
            raise VerificationFailed(exercise) from error
        return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: _RunMode, verbose: bool) -> bool:
    message = f"Testing {exercise}..."
    with _compile(exercise, message) as compiled:
        try:
            with _console().status(message):
                output = compiled.run()
        except ExerciseError as error:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(error.output.stdout)
            raise VerificationFailed(exercise) from error
        if verbose:
            print(output.stdout)
        if run_mode is _RunMode.INTERACTIVE:
            return prompt_for_completion(exercise, None)
        return True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True when the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.is_done:
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

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
    console.print()
    if no_emoji:
        console.print(Text(f"~*~ {success_msg} ~*~"))
    else:
        console.print(Text(f"🎉 🎉  {success_msg} 🎉 🎉"))
    console.print()

    if prompt_output is not None:
        console.print(Text("Output:"))
        console.print(Text(_SEPARATOR, style="bold"))
        print(prompt_output)
        console.print(Text(_SEPARATOR, style="bold"))
        console.print()

    console.print(Text("You can keep working on this exercise,"))
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    console.print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False