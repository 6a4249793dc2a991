import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustlings.cli import ExerciseNotFound, build_parser, find_exercise, list_lines, main
from rustlings.exercise import Exercise, Mode

FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"
COMP_SUCCESS = "fn main() {\n}\n"
COMP_FAILURE = "fn main() {\n    let\n}\n"
TEST_SUCCESS = (
    '#[test]\nfn passing() {\n    println!("THIS TEST TOO SHALL PASS");\n    assert!(true);\n}\n'
)
TEST_FAILURE = "#[test]\nfn passing() {\n    asset!(true);\n}\n"
TEST_NOT_PASSED = "#[test]\nfn not_passing() {\n    assert!(false);\n}\n"


class FakeToolchain:
    def __init__(self, broken=(), failing=(), outputs=None):
        self.broken = set(broken)
        self.failing = set(failing)
        self.outputs = outputs or {}
        self.binaries = {}

    def __call__(self, cmd, **kwargs):
        cmd = [str(part) for part in cmd]
        if cmd[0] == "rustc":
            if "--version" in cmd:
                return subprocess.CompletedProcess(cmd, 0, b"", b"")
            source = next(Path(a) for a in cmd[1:] if a.endswith(".rs"))
            if source.stem in self.broken:
                return subprocess.CompletedProcess(cmd, 1, b"", b"error: broken")
            self.binaries[cmd[cmd.index("-o") + 1]] = source.stem
            return subprocess.CompletedProcess(cmd, 0, b"", b"")
        stem = self.binaries[cmd[0]]
        out = self.outputs.get(stem, "").encode()
        return subprocess.CompletedProcess(cmd, 101 if stem in self.failing else 0, out, b"")


def make_project(tmp_path, monkeypatch, entries):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises").mkdir()
    blocks = []
    for name, mode, content, hint in entries:
        (tmp_path / "exercises" / f"{name}.rs").write_text(content, encoding="utf-8")
        blocks.append(
            f'[[exercises]]\nname = "{name}"\npath = "exercises/{name}.rs"\n'
            f'mode = "{mode}"\nhint = "{hint}"\n'
        )
    (tmp_path / "info.toml").write_text("\n".join(blocks), encoding="utf-8")


@pytest.fixture
def success_dir(tmp_path, monkeypatch):
    make_project(
        tmp_path,
        monkeypatch,
        [
            ("compSuccess", "compile", COMP_SUCCESS, ""),
            ("testSuccess", "test", TEST_SUCCESS, ""),
        ],
    )
    monkeypatch.setattr(
        subprocess, "run", FakeToolchain(outputs={"testSuccess": "THIS TEST TOO SHALL PASS\n"})
    )


@pytest.fixture
def failure_dir(tmp_path, monkeypatch):
    make_project(
        tmp_path,
        monkeypatch,
        [
            ("compFailure", "compile", COMP_FAILURE, ""),
            ("testFailure", "test", TEST_FAILURE, "Hello!"),
            ("testNotPassed", "test", TEST_NOT_PASSED, ""),
        ],
    )
    monkeypatch.setattr(
        subprocess,
        "run",
        FakeToolchain(broken={"compFailure", "testFailure"}, failing={"testNotPassed"}),
    )


@pytest.fixture
def state_dir(tmp_path, monkeypatch):
    make_project(
        tmp_path,
        monkeypatch,
        [
            ("pending_exercise", "compile", PENDING, ""),
            ("pending_test_exercise", "test", PENDING_TEST, ""),
            ("finished_exercise", "compile", FINISHED, ""),
        ],
    )
    monkeypatch.setattr(subprocess, "run", FakeToolchain())


def test_runs_without_arguments(success_dir, capsys):
    assert main([]) == 0
    assert "Thanks for installing Rustlings!" in capsys.readouterr().out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Try `cd rustlings/`!" in capsys.readouterr().out


def test_fails_without_rustc(success_dir, monkeypatch, capsys):
    def missing(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", missing)
    assert main(["verify"]) == 1
    assert "We cannot find `rustc`." in capsys.readouterr().out


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "v5.2.1\n"


def test_verify_all_success(success_dir):
    assert main(["verify"]) == 0


def test_verify_fails_if_some_fails(failure_dir):
    assert main(["verify"]) == 1


def test_run_single_compile_success(success_dir):
    assert main(["run", "compSuccess"]) == 0


def test_run_single_compile_failure(failure_dir):
    assert main(["run", "compFailure"]) == 1


def test_run_single_test_success(success_dir):
    assert main(["run", "testSuccess"]) == 0


def test_run_single_test_failure(failure_dir):
    assert main(["run", "testFailure"]) == 1


def test_run_single_test_not_passed(failure_dir):
    assert main(["run", "testNotPassed.rs"]) == 1


def test_run_single_test_no_filename(success_dir):
    assert main(["run"]) == 1


def test_run_single_test_no_exercise(failure_dir, capsys):
    assert main(["run", "compNoExercise.rs"]) == 1
    assert "No exercise found for 'compNoExercise.rs'!" in capsys.readouterr().out


def test_reset_single_exercise(tmp_path, monkeypatch):
    make_project(tmp_path, monkeypatch, [("intro1", "compile", COMP_SUCCESS, "")])
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    with mock.patch("subprocess.Popen") as popen:
        assert main(["reset", "intro1"]) == 0
    popen.assert_called_once_with(["git", "stash", "--", "exercises/intro1.rs"])


def test_reset_no_exercise(capsys):
    assert main(["reset"]) == 1
    assert "positional arguments not provided" in capsys.readouterr().err


def test_get_hint_for_single_test(failure_dir, capsys):
    assert main(["hint", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_run_compile_exercise_does_not_prompt(state_dir, capsys):
    assert main(["run", "pending_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_exercise_does_not_prompt(state_dir, capsys):
    assert main(["run", "pending_test_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_single_test_success_with_output(success_dir, capsys):
    assert main(["--nocapture", "run", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_run_single_test_success_without_output(success_dir, capsys):
    assert main(["run", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_run_next_picks_first_pending(state_dir, capsys):
    assert main(["hint", "next"]) == 0
    assert capsys.readouterr().out == "\n"


def test_rustlings_list(success_dir, capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "compSuccess" in out
    assert "Pending" not in out


def test_rustlings_list_both_done_and_pending(state_dir, capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Done" in out and "Pending" in out


def test_rustlings_list_without_pending(state_dir, capsys):
    assert main(["list", "--solved"]) == 0
    out = capsys.readouterr().out
    assert "Pending" not in out
    assert "finished_exercise" in out


def test_rustlings_list_without_done(state_dir, capsys):
    assert main(["list", "--unsolved"]) == 0
    out = capsys.readouterr().out
    assert "Done" not in out
    assert "pending_exercise" in out


def test_list_lines_paths_only(state_dir):
    exercises = [
        Exercise("pending_exercise", Path("exercises/pending_exercise.rs"), Mode.COMPILE, ""),
        Exercise("finished_exercise", Path("exercises/finished_exercise.rs"), Mode.COMPILE, ""),
    ]
    lines = list(list_lines(exercises, paths=True))
    assert lines[:2] == ["exercises/pending_exercise.rs", "exercises/finished_exercise.rs"]
    assert lines[2].startswith("Progress: You completed 1 / 2 exercises")


def test_list_lines_filter_and_names(state_dir):
    exercises = [
        Exercise("pending_exercise", Path("exercises/pending_exercise.rs"), Mode.COMPILE, ""),
        Exercise("finished_exercise", Path("exercises/finished_exercise.rs"), Mode.COMPILE, ""),
    ]
    lines = list(list_lines(exercises, names=True, filter="FINISHED, nothing"))
    assert lines[:-1] == ["finished_exercise"]


def test_find_exercise(state_dir):
    exercises = [
        Exercise("finished_exercise", Path("exercises/finished_exercise.rs"), Mode.COMPILE, ""),
        Exercise("pending_exercise", Path("exercises/pending_exercise.rs"), Mode.COMPILE, ""),
    ]
    assert find_exercise("next", exercises).name == "pending_exercise"
    assert find_exercise("finished_exercise", exercises) is exercises[0]
    with pytest.raises(ExerciseNotFound):
        find_exercise("missing", exercises)
    with pytest.raises(ExerciseNotFound):
        find_exercise("next", exercises[:1])


def test_parser_reads_list_options():
    args = build_parser().parse_args(["list", "-p", "-f", "a,b", "-s"])
    assert args.command == "list"
    assert args.paths and args.solved and not args.unsolved
    assert args.filter == "a,b"


def test_parser_rejects_unknown_command():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["dance"])
    assert info.value.code == 1