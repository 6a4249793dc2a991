"""Watch mode: re-verify exercises whenever their files change."""

from __future__ import annotations

import enum
import os
import queue
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from rustlings.exercise import Exercise
from rustlings.verify import VerificationFailed, verify

_HELP = "\n".join(
    [
        "Commands available to you in watch mode:",
        "  hint  - prints the current exercise's hint",
        "  clear - clears the screen",
        "  quit  - quits watch mode",
        "  help  - displays this help message",
        "",
        "Watch mode automatically re-evaluates the current exercise",
        "when you edit a file's contents.",
    ]
)


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = enum.auto()
    UNFINISHED = enum.auto()


class WatchShell:
    """The small command shell that runs next to watch mode."""

    def __init__(self, hint: str | None = None):
        self.hint = hint
        self.should_quit = threading.Event()

    def handle(self, command: str) -> str | None:
        """Carry out one command and return the text to print, if any."""
        command = command.strip()
        if command == "hint":
            return self.hint
        if command == "clear":
            return "\x1b[2J\x1b[1;1H"
        if command == "quit":
            self.should_quit.set()
            return "Bye!"
        if command == "help":
            return _HELP
        return f"unknown command: {command}"

    def _serve(self, stream: TextIO) -> None:
        for line in stream:
            output = self.handle(line)
            if output is not None:
                print(output)

    def _start(self) -> threading.Thread:
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        thread = threading.Thread(target=self._serve, args=(sys.stdin,), daemon=True)
        thread.start()
        return thread


def _ends_with(full: Path, suffix: Path) -> bool:
    parts = [part for part in suffix.parts if part != "."]
    if not parts:
        return True
    return list(full.parts[-len(parts):]) == parts


def pending_after_change(exercises: Sequence[Exercise], changed_path) -> list[Exercise]:
    """The changed exercise first, then every other pending exercise."""
    filepath = Path(changed_path).resolve()
    changed = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    rest = [
        e for e in exercises if not _ends_with(filepath, e.path) and not e.looks_done()
    ]
    return ([changed] if changed is not None else []) + rest


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue):
        super().__init__()
        self._changes = changes

    def on_created(self, event) -> None:
        self._push(event)

    def on_modified(self, event) -> None:
        self._push(event)

    def _push(self, event) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _clear_screen() -> None:
    print("\x1bc")


def _next_changes(changes: queue.Queue) -> Iterable[Path]:
    try:
        batch = [changes.get(timeout=1)]
    except queue.Empty:
        return []
    while True:
        try:
            batch.append(changes.get_nowait())
        except queue.Empty:
            return list(dict.fromkeys(batch))


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify, then re-verify on every change until done or told to quit."""
    changes: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
            return WatchStatus.FINISHED
        except VerificationFailed as failure:
            shell = WatchShell(failure.exercise.hint)
        shell._start()
        while True:
            for changed in _next_changes(changes):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                pending = pending_after_change(exercises, changed)
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(pending, (num_done, len(exercises)), verbose)
                    return WatchStatus.FINISHED
                except VerificationFailed as failure:
                    shell.hint = failure.exercise.hint
            if shell.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()