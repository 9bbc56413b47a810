# golings

You learn Go with golings by fixing small programs. Each exercise is a Go file or package that does not compile yet, or whose tests fail. You edit it until the `go` toolchain accepts it. Then you delete its `// I AM NOT DONE` marker and go on to the next exercise.

## Requirements

- Python 3.11 or newer
- A Go toolchain on your `PATH`

## Installation

```console
pip install .
```

This installs the `golings` command.

## Exercise catalogue

golings reads `info.toml` from the current directory. It always uses that file name. The file lists the exercises in the order you are meant to do them:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1/main.go"
mode = "compile"
hint = "Declare the variable before using it."

[[exercises]]
name = "if1"
path = "exercises/if/if1"
mode = "test"
hint = "Compare both numbers with an if statement."
```

- A `compile` exercise runs as `go run ./<path>`.
- An exercise with any other mode runs as `go test -v -race ./<path>`.

An exercise is *Pending* in either of these cases:

- Its file has a line made of optional leading whitespace, then `//` or `///`, then `I AM NOT DONE`.
- Its file cannot be read.

In every other case the exercise is *Done*.

## Usage

```console
golings list                # table of all exercises with their path and state
golings run next            # run the first pending exercise
golings run variables1      # run a specific exercise
golings hint next           # show the hint for the first pending exercise
golings hint variables1     # show the hint for a specific exercise
golings verify              # run every exercise in order
golings watch               # interactive mode that re-runs on file changes
golings --version
```

### Exit status

Each of these cases makes the command exit with status 1:

- `run` finds no exercise by that name.
- The toolchain fails on the exercise.
- The exercise compiles and runs but is still marked as not done.
- `hint` or `list` cannot read the catalogue.
- `hint` or `run` is given `next` and every exercise is already done.

`verify` runs the exercises one after another and shows a progress bar. It stops at the first exercise whose run writes anything to standard error. It then prints that output and exits with status 1.

### Watch mode

`golings watch` does the following:

1. It shows your progress, for example `Progress: 3/10 (30.00%)`.
2. It runs the next pending exercise.
3. Each time a file under `./exercises` is written or renamed, it runs that exercise again.

While it runs you can type these commands:

- `list` shows the exercise table.
- `hint` shows the hint for the current pending exercise.
- `quit` or `exit` leaves watch mode. Watch mode also ends at the end of input.

Watch mode needs an `exercises` directory in the current directory.

## Using it from Python

The command-line layer is built on a small library:

- `golings.exercise`
  - `Exercise` with `state()` and `run()`
  - `State`
  - `Result` with `succeeded()`
  - `build_args()`
- `golings.catalog`
  - `load_exercises()`, `find()`, `next_pending()` and `progress()`
  - `find()` raises `ExerciseNotFoundError`
  - `next_pending()` raises `NoPendingExercisesError`
- `golings.table`
  - `render_list()` and `print_list()` draw the exercise table

## What it does not do

golings does not come with any exercises. You must supply the exercise files and an `info.toml` that lists them.

## Development

```console
pip install -e ".[test]"
pytest
```