from __future__ import annotations

import sys
from typing import TextIO

import click

from tudu.model import TaskSnapshot


class ConsoleView:
    """Prints task lists and reads one line of input at a time. Holds no task state."""

    def __init__(self, *, prompt: str = "> ", input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
        self.prompt = prompt
        self._input = input_stream
        self._output = output

    @property
    def input_stream(self) -> TextIO:
        # Resolved lazily so click's test runner can swap stdin after construction
        return self._input if self._input is not None else sys.stdin

    def render(self, snapshot: TaskSnapshot) -> None:
        self._echo(_format_section("Tasks", snapshot.tasks))
        self._echo(_format_section("Completed", snapshot.completed))

    def notify(self, message: str) -> None:
        self._echo(message)

    def read_line(self) -> str | None:
        """Read one line of input. Returns None once input is exhausted."""
        self._echo(self.prompt, nl=False)
        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _echo(self, message: str, *, nl: bool = True) -> None:
        click.echo(message, file=self._output, nl=nl)


def _format_section(title: str, items: tuple[str, ...]) -> str:
    lines = [f"{title}:"]
    if not items:
        lines.append("  (none)")
    for i, item in enumerate(items, 1):
        lines.append(f"  {i}. {item}")
    return "\n".join(lines)
