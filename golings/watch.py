"""Watch mode: rerun the next exercise whenever an exercise file changes."""

from __future__ import annotations

import queue
import sys
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

import click
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from golings.screen import print_hint, print_list, run_next_exercise


class ExerciseChangeHandler(FileSystemEventHandler):
    """Calls back with the path of every written or renamed file."""

    def __init__(self, on_change: Callable[[str], None]) -> None:
        super().__init__()
        self.on_change = on_change

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.on_change(str(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.on_change(str(event.src_path))


def watch_events(
    on_change: Callable[[str], None], root: str | Path | None = None
) -> BaseObserver:
    """Start watching the exercises directory tree and return the running observer."""
    directory = Path.cwd() / "exercises" if root is None else Path(root)
    if not directory.is_dir():
        raise FileNotFoundError(f"Error in file path: {directory}")
    observer = Observer()
    observer.schedule(ExerciseChangeHandler(on_change), str(directory), recursive=True)
    observer.start()
    return observer


def handle_command(line: str, info_file: str) -> bool:
    """Act on one line typed by the user; False means the session should end."""
    command = line.rstrip("\r\n")
    if command == "list":
        print_list(info_file)
    elif command == "hint":
        print_hint(info_file)
    elif command in ("quit", "exit"):
        click.secho("Bye by golings o/", fg="green")
        return False
    else:
        click.secho("only list or hint commands are available", fg="yellow")
    return True


def _rerun_on_change(updates: queue.SimpleQueue, info_file: str) -> None:
    while updates.get() is not None:
        run_next_exercise(info_file)


def watch(info_file: str = "info.toml", stream: TextIO | None = None) -> int:
    """Run the interactive loop until the user quits or input ends."""
    stream = sys.stdin if stream is None else stream
    run_next_exercise(info_file)

    updates: queue.SimpleQueue = queue.SimpleQueue()
    observer = watch_events(updates.put)
    worker = threading.Thread(
        target=_rerun_on_change, args=(updates, info_file), daemon=True
    )
    worker.start()
    try:
        for line in stream:
            if not handle_command(line, info_file):
                break
    finally:
        observer.stop()
        observer.join()
        updates.put(None)
    return 0