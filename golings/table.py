"""Plain-text table of exercises and their states."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from golings.exercise import Exercise

_HEADERS = ("Name", "Path", "State")


def render_list(exercises: Iterable[Exercise]) -> str:
    """Render a bordered table with one row per exercise."""
    header = tuple(h.upper() for h in _HEADERS)
    rows = [(ex.name, ex.path, str(ex.state())) for ex in exercises]
    widths = [max(len(cell) for cell in column) for column in zip(header, *rows)]

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: tuple[str, ...]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    lines = [border, line(header), border]
    if rows:
        lines.extend(line(row) for row in rows)
        lines.append(border)
    return "\n".join(lines)


def print_list(out: TextIO, exercises: Iterable[Exercise]) -> None:
    """Write the exercise table to a stream."""
    out.write(render_list(exercises) + "\n")