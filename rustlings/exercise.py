"""Exercises: loading, compiling, running and progress detection."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Done when there is no context; pending otherwise."""

    context: tuple[ContextLine, ...] = ()

    @property
    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, result: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
            stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
        )


class ExerciseError(Exception):
    """A compile or run step failed; carries the captured output."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def temp_file() -> str:
    """Name of the binary built for the current process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: str) -> None:
    try:
        os.remove(path)
    except OSError:
        pass


def clean() -> None:
    """Remove the temporary binary, if any."""
    _remove(temp_file())


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass(frozen=True)
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return str(self.path)

    def _clippy_prepare(self, target: str) -> None:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if "NO_EMOJI" in os.environ:
            message = "Failed to write Clippy Cargo.toml file."
        else:
            message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise RuntimeError(message) from err
        # Build a binary too, so clippy exercises can also be run.
        subprocess.run(
            ["rustc", str(self.path), "-o", target, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        # A clean is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseError with the output on failure."""
        target = temp_file()
        if self.mode is Mode.COMPILE:
            command = ["rustc", str(self.path), "-o", target, *RUSTC_COLOR_ARGS]
        elif self.mode is Mode.TEST:
            command = ["rustc", "--test", str(self.path), "-o", target, *RUSTC_COLOR_ARGS]
        else:
            self._clippy_prepare(target)
            command = [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--", "-D", "warnings", "-D", "clippy::float_cmp",
            ]
        result = subprocess.run(command, capture_output=True)
        if result.returncode == 0:
            return CompiledExercise(self, target)
        _remove(target)
        raise ExerciseError(ExerciseOutput._from_process(result))

    def state(self) -> State:
        """Find the pending marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        first = max(matched - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first : matched + CONTEXT + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state().is_done


@dataclass
class CompiledExercise:
    """A built exercise; closing it removes the binary."""

    exercise: Exercise
    binary: str = field(default_factory=temp_file)

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseError with the output on failure."""
        command = [self.binary]
        if self.exercise.mode is Mode.TEST:
            command.append("--show-output")
        result = subprocess.run(command, capture_output=True)
        output = ExerciseOutput._from_process(result)
        if result.returncode != 0:
            raise ExerciseError(output)
        return output

    def close(self) -> None:
        _remove(self.binary)

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]