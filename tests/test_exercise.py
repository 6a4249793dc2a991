import os
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rustlings.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseError,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


def _exercise(tmp_path, name, content, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(content, encoding="utf-8")
    return Exercise(name=name, path=path, mode=mode, hint="")


def _done(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_pending_state(tmp_path):
    exercise = _exercise(tmp_path, "pending_exercise", PENDING)
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert not exercise.looks_done()


def test_finished_exercise(tmp_path):
    exercise = _exercise(tmp_path, "finished_exercise", FINISHED)
    assert exercise.state() == State()
    assert exercise.looks_done()


def test_marker_on_first_line(tmp_path):
    exercise = _exercise(tmp_path, "pending_test_exercise", PENDING_TEST, Mode.TEST)
    state = exercise.state()
    assert [line.number for line in state.context] == [1, 2, 3]
    assert [line.important for line in state.context] == [True, False, False]


@pytest.mark.parametrize(
    "content, done",
    [
        ("   ///   I   AM NOT DONE\n", False),
        ("//I AM NOT DONE\n", False),
        ("// I AM DONE\n", True),
        ("let x = 1; // I AM NOT DONE\n", True),
    ],
)
def test_marker_variants(tmp_path, content, done):
    assert _exercise(tmp_path, "x", content).looks_done() is done


def test_display_is_path(tmp_path):
    exercise = _exercise(tmp_path, "x", FINISHED)
    assert str(exercise) == str(tmp_path / "x.rs")


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "Hello!"\n\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\n'
        'mode = "test"\nhint = ""\n',
        encoding="utf-8",
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert exercises[0].mode is Mode.COMPILE
    assert exercises[1].mode is Mode.TEST
    assert exercises[0].hint == "Hello!"
    assert exercises[0].path == Path("exercises/intro/intro1.rs")


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "bogus"\nhint = ""\n',
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_exercises(info)


def test_temp_file_mentions_process():
    assert temp_file().startswith(f"./temp_{os.getpid()}_")
    assert temp_file() == temp_file()


def test_clean_removes_temp_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).write_text("")
    clean()
    assert not Path(temp_file()).exists()


def test_compile_and_close_removes_binary(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = _exercise(tmp_path, "example", PENDING)
    with patch("subprocess.run", return_value=_done()) as run_mock:
        compiled = exercise.compile()
    Path(compiled.binary).write_text("")
    with compiled:
        assert Path(compiled.binary).exists()
    assert not Path(temp_file()).exists()
    command = run_mock.call_args[0][0]
    assert command[0] == "rustc"
    assert command[1] == str(exercise.path)
    assert command[-2:] == ["--color", "always"]


def test_compile_failure_raises_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).write_text("")
    exercise = _exercise(tmp_path, "broken", "fn main() {\n    let\n}\n")
    with patch("subprocess.run", return_value=_done(1, b"", b"error: expected pattern")):
        with pytest.raises(ExerciseError) as info:
            exercise.compile()
    assert info.value.output.stderr == "error: expected pattern"
    assert not Path(temp_file()).exists()


def test_test_mode_compiles_harness_and_shows_output(tmp_path):
    exercise = _exercise(tmp_path, "testSuccess", FINISHED, Mode.TEST)
    with patch("subprocess.run", return_value=_done(0, b"THIS TEST TOO SHALL PASS")) as run_mock:
        compiled = exercise.compile()
        output = compiled.run()
    assert run_mock.call_args_list[0][0][0][:2] == ["rustc", "--test"]
    assert run_mock.call_args_list[1][0][0] == [compiled.binary, "--show-output"]
    assert "THIS TEST TOO SHALL PASS" in output.stdout


def test_run_failure_raises(tmp_path):
    exercise = _exercise(tmp_path, "x", FINISHED)
    compiled = CompiledExercise(exercise, str(tmp_path / "bin"))
    with patch("subprocess.run", return_value=_done(101, b"out", b"panicked")):
        with pytest.raises(ExerciseError) as info:
            compiled.run()
    assert info.value.output.stdout == "out"
    assert info.value.output.stderr == "panicked"


def test_clippy_writes_cargo_toml(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "clippy").mkdir(parents=True)
    exercise = _exercise(tmp_path, "clippy1", FINISHED, Mode.CLIPPY)
    with patch("subprocess.run", return_value=_done()) as run_mock:
        exercise.compile().close()
    toml_text = (tmp_path / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in toml_text
    assert 'path = "clippy1.rs"' in toml_text
    assert run_mock.call_count == 3
    assert run_mock.call_args_list[1][0][0][:2] == ["cargo", "clean"]
    assert run_mock.call_args_list[2][0][0][:2] == ["cargo", "clippy"]