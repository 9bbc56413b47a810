"""Reading the exercise catalogue from the info file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from golings.exercise import Exercise, State

_FIELDS = {f.name for f in fields(Exercise)}


class ExerciseNotFoundError(LookupError):
    """No exercise with the requested name exists."""

    def __init__(self, message: str = "exercise not found") -> None:
        super().__init__(message)


class NoPendingExercisesError(LookupError):
    """Every exercise is already done."""

    def __init__(self, message: str = "no pending exercises") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Progress:
    """How many exercises are done out of the total."""

    done: int
    total: int

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return float("nan")
        return self.done / self.total


def _to_exercise(entry: dict) -> Exercise:
    values = {}
    for key, value in entry.items():
        name = key.lower()
        if name in _FIELDS and isinstance(value, str):
            values[name] = value
    return Exercise(**values)


def load_exercises(info_file: str | Path) -> list[Exercise]:
    """All exercises in the order the info file lists them."""
    data = tomllib.loads(Path(info_file).read_text(encoding="utf-8"))
    entries = next(
        (value for key, value in data.items() if key.lower() == "exercises"), []
    )
    return [_to_exercise(entry) for entry in entries if isinstance(entry, dict)]


def next_pending(info_file: str | Path) -> Exercise:
    """The first exercise that is still pending."""
    for exercise in load_exercises(info_file):
        if exercise.state() is State.PENDING:
            return exercise
    raise NoPendingExercisesError()


def find(name: str, info_file: str | Path) -> Exercise:
    """The exercise with the given name."""
    for exercise in load_exercises(info_file):
        if exercise.name == name:
            return exercise
    raise ExerciseNotFoundError()


def progress(info_file: str | Path) -> Progress:
    """Count the done exercises."""
    exercises = load_exercises(info_file)
    done = sum(1 for exercise in exercises if exercise.state() is State.DONE)
    return Progress(done=done, total=len(exercises))