"""User-facing I/O channel shared by the dispatch loop and the handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

import click


@dataclass
class Console:
    stdin: TextIO

    def echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, nl=nl)

    def read_line(self) -> str:
        """Read one physical line; returns "" at end of input."""
        return self.stdin.readline()

    def confirm(self, question: str) -> bool:
        """Ask a y/n question; only a first word of exactly "y" counts as yes."""
        self.echo(f"{question} (y/n)? ", nl=False)
        words = self.read_line().split()
        return bool(words) and words[0] == "y"
