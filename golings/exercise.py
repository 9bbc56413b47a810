"""Exercises, their completion state and running them with the Go toolchain."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_NOT_DONE = re.compile(rb"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)


class State(Enum):
    """Whether an exercise still carries its 'I AM NOT DONE' marker."""

    PENDING = 1
    DONE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in the info file."""

    name: str = ""
    path: str = ""
    mode: str = ""
    hint: str = ""

    def state(self) -> State:
        """Pending if the file is unreadable or still marked as not done."""
        try:
            data = Path(self.path).read_bytes()
        except OSError:
            return State.PENDING
        if _NOT_DONE.search(data):
            return State.PENDING
        return State.DONE

    def run(self) -> Result:
        """Compile or test the exercise and capture what the toolchain printed."""
        try:
            completed = subprocess.run(
                ["go", *build_args(self)],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            return Result(exercise=self, out="", err=str(exc), returncode=None)
        return Result(
            exercise=self,
            out=completed.stdout,
            err=completed.stderr,
            returncode=completed.returncode,
        )


@dataclass(frozen=True)
class Result:
    """Output of running an exercise."""

    exercise: Exercise
    out: str = ""
    err: str = ""
    returncode: int | None = 0

    def succeeded(self) -> bool:
        """True when the toolchain started and exited cleanly."""
        return self.returncode == 0


def build_args(exercise: Exercise) -> list[str]:
    """Arguments for the go command: 'run' for compile mode, 'test' otherwise."""
    if exercise.mode == "compile":
        args = ["run"]
    else:
        args = ["test", "-v", "-race"]
    args.append(f"./{exercise.path}")
    return args