"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from rich.console import Console

from rustlings.exercise import Exercise, ExerciseError, Mode
from rustlings.ui import success, warn
from rustlings.verify import VerificationFailed, test


class RunFailed(Exception):
    """Running or resetting an exercise failed."""

    def __init__(self, exercise: Exercise):
        super().__init__(str(exercise))
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run one exercise, or its tests; raise RunFailed on failure."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as error:
            raise RunFailed(exercise) from error
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the changes made to the exercise file."""
    try:
        return subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as error:
        raise RunFailed(exercise) from error


def _compile_and_run(exercise: Exercise) -> None:
    console = Console(highlight=False, soft_wrap=True)
    try:
        with console.status(f"Compiling {exercise}..."):
            compiled = exercise.compile()
    except ExerciseError as error:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(error.output.stderr)
        raise RunFailed(exercise) from error

    with compiled:
        try:
            with console.status(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseError as error:
            print(error.output.stdout)
            print(error.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise RunFailed(exercise) from error
    print(output.stdout)
    success(f"Successfully ran {exercise}")