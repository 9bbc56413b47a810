"""The golings command line."""

from __future__ import annotations

import platform
import sys

import click
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from golings import table
from golings.catalog import ExerciseNotFoundError, find, load_exercises, next_pending
from golings.exercise import Exercise, Result, State
from golings.watch import watch

VERSION = "dev"
COMMIT = "none"
DATE = "unknown"

_ARCHITECTURES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}

_FAILURES = (LookupError, OSError, ValueError)


def build_version(version: str, commit: str, date: str) -> str:
    """Version text with build details and the platform."""
    result = version
    if commit:
        result = f"{result}\ncommit: {commit}"
    if date:
        result = f"{result}\nbuilt at: {date}"
    machine = platform.machine().lower()
    goos = platform.system().lower() or sys.platform
    goarch = _ARCHITECTURES.get(machine, machine)
    return f"{result}\ngoos: {goos}\ngoarch: {goarch}"


def _select(target: str, info_file: str) -> Exercise:
    if target == "next":
        return next_pending(info_file)
    return find(target, info_file)


def _report_failure(result: Result) -> None:
    click.secho(f"Failed to compile the exercise {result.exercise.path}\n", fg="cyan")
    click.secho("Check the output below: \n", fg="white")
    click.secho(result.err, fg="red")
    click.secho(result.out, fg="red")


def hint_command(target: str, info_file: str) -> str:
    """Print and return the hint for an exercise, or for the next pending one."""
    exercise = _select(target, info_file)
    click.secho(exercise.hint, fg="yellow")
    return exercise.hint


def list_command(info_file: str) -> list[Exercise]:
    """Print the table of all exercises and return them."""
    exercises = load_exercises(info_file)
    table.print_list(sys.stdout, exercises)
    return exercises


def run_command(target: str, info_file: str) -> Result:
    """Run one exercise; raise RuntimeError if it fails or is still pending."""
    try:
        exercise = _select(target, info_file)
    except ExerciseNotFoundError:
        click.secho(f"No exercise found for '{target}'", fg="white")
        raise

    with Console(stderr=True).status(f"Running exercise: {exercise.name}"):
        result = exercise.run()
    click.secho("\nRunning complete!\n", fg="white")

    if not result.succeeded():
        _report_failure(result)
        click.secho(
            "If you feel stuck, ask a hint by executing "
            f"`golings hint {result.exercise.name}`",
            fg="yellow",
        )
        if result.returncode is None:
            raise RuntimeError(result.err)
        raise RuntimeError(f"exit status {result.returncode}")

    click.secho(f"✅ Successfully tested {result.exercise.path}!\n", fg="green")
    click.secho("Congratulations!\n", fg="green")
    click.secho("Here is the output of your program:\n", fg="green")
    click.secho(result.out, fg="cyan")
    if result.exercise.state() is State.PENDING:
        click.secho("Remove the 'I AM NOT DONE' from the file to keep going", fg="white")
        raise RuntimeError("exercise is still pending")
    return result


def verify_command(info_file: str) -> list[Result]:
    """Run every exercise in order; raise RuntimeError at the first that fails."""
    exercises = load_exercises(info_file)
    results: list[Result] = []
    failed: Result | None = None

    columns = (
        TextColumn("[cyan]{task.description}"),
        BarColumn(bar_width=50, complete_style="yellow"),
        MofNCompleteColumn(),
    )
    with Progress(*columns, console=Console()) as bar:
        task = bar.add_task("Running exercises", total=len(exercises))
        for exercise in exercises:
            bar.update(task, description=f"Running {exercise.name}")
            result = exercise.run()
            bar.advance(task)
            results.append(result)
            if result.err:
                failed = result
                break

    if failed is not None:
        click.echo("\n")
        _report_failure(failed)
        raise RuntimeError(f"exercise {failed.exercise.name} failed")

    click.secho("Congratulations!!!", fg="green")
    click.secho("You passed all the exercises", fg="green")
    return results


def build_cli(version: str, info_file: str = "info.toml") -> click.Group:
    """The command group with all subcommands bound to one info file."""

    @click.group(name="golings", help="Learn go through interactive exercises")
    @click.version_option(version, prog_name="golings", message="%(prog)s version %(version)s")
    def cli() -> None:
        pass

    @cli.command("hint", help="Get a hint for an exercise")
    @click.argument("exercise_name")
    @click.pass_context
    def hint_cmd(ctx: click.Context, exercise_name: str) -> None:
        try:
            hint_command(exercise_name, info_file)
        except _FAILURES as exc:
            click.secho(str(exc), fg="red")
            ctx.exit(1)

    @cli.command("list", help="List all exercises")
    @click.pass_context
    def list_cmd(ctx: click.Context) -> None:
        try:
            list_command(info_file)
        except _FAILURES as exc:
            click.secho(str(exc), fg="red")
            ctx.exit(1)

    @cli.command(
        "run",
        short_help="Run a single exercise",
        help=(
            "Run a single exercise.\n\n"
            "example next pending exercise : golings run next\n\n"
            "example specific exercise : golings run variables1"
        ),
    )
    @click.argument("exercise_name")
    @click.pass_context
    def run_cmd(ctx: click.Context, exercise_name: str) -> None:
        try:
            run_command(exercise_name, info_file)
        except (RuntimeError, ExerciseNotFoundError):
            ctx.exit(1)
        except _FAILURES as exc:
            click.secho(str(exc), fg="red")
            ctx.exit(1)

    @cli.command("verify", help="Verify all exercises")
    @click.pass_context
    def verify_cmd(ctx: click.Context) -> None:
        try:
            verify_command(info_file)
        except RuntimeError:
            ctx.exit(1)
        except _FAILURES as exc:
            click.secho(str(exc), fg="red")
            ctx.exit(1)

    @cli.command("watch", help="Verify exercises when files are edited")
    @click.pass_context
    def watch_cmd(ctx: click.Context) -> None:
        ctx.exit(watch(info_file, sys.stdin))

    return cli


def main(argv: list[str] | None = None) -> None:
    """Entry point of the golings command."""
    cli = build_cli(build_version(VERSION, COMMIT, DATE))
    cli.main(args=argv, prog_name="golings")