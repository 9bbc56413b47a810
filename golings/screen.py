"""Full-screen views used by the interactive watch mode."""

from __future__ import annotations

import platform
import subprocess
import sys

import click

from golings import table
from golings.catalog import load_exercises, next_pending, progress
from golings.exercise import Result, State


def clear_screen() -> None:
    """Clear the terminal with the platform's own command."""
    if platform.system() == "Windows":
        command = ["cmd", "/c", "cls"]
    else:
        command = ["clear"]
    try:
        completed = subprocess.run(command, check=False)
    except OSError:
        click.secho("Clear terminal command error", fg="red")
        return
    if completed.returncode != 0:
        click.secho("Clear terminal command error", fg="red")


def print_hint(info_file: str) -> None:
    """Show the hint of the next pending exercise."""
    clear_screen()
    try:
        exercise = next_pending(info_file)
    except (LookupError, OSError, ValueError):
        click.secho("Failed to find next exercises", fg="red")
        return
    click.secho(exercise.hint, fg="yellow")


def print_list(info_file: str) -> None:
    """Show the table of all exercises."""
    clear_screen()
    try:
        exercises = load_exercises(info_file)
    except (OSError, ValueError):
        click.secho("Failed to list exercises", fg="red")
        return
    table.print_list(sys.stdout, exercises)


def run_next_exercise(info_file: str) -> Result | None:
    """Report progress, then run the next pending exercise and report on it."""
    clear_screen()

    try:
        current = progress(info_file)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
    else:
        click.secho(
            f"Progress: {current.done}/{current.total} ({current.ratio * 100:.2f}%)\n",
            fg="blue",
        )

    try:
        exercise = next_pending(info_file)
    except (LookupError, OSError, ValueError):
        click.secho("Failed to find next exercises", fg="red")
        return None

    result = exercise.run()
    if not result.succeeded():
        click.secho(f"Failed to compile the exercise {result.exercise.path}\n", fg="cyan")
        click.secho("Check the output below: \n", fg="white")
        click.secho(result.err, fg="red")
        click.secho(result.out, fg="red")
        click.secho(
            "If you feel stuck, ask a hint by executing "
            f"`golings hint {result.exercise.name}`",
            fg="yellow",
        )
    else:
        click.secho("Congratulations!\n", fg="green")
        click.secho("Here is the output of your program:\n", fg="green")
        click.secho(result.out, fg="cyan")
        if result.exercise.state() is State.PENDING:
            click.secho("Remove the 'I AM NOT DONE' from the file to keep going", fg="white")
            click.secho("exercise is still pending", fg="red")
    return result