"""
Console UI — the user-facing status surface handed to the pipeline.

The pipeline reports through this object and never prints directly,
so tests can swap in ``RecordingUI`` and assert on what the user saw.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import click


class Status(Enum):
    """Status line kinds: (glyph, verb, colour)."""

    MISSING = ("↯", "Missing", "red")
    INSTALLING = ("↓", "Installing", "green")
    INSTALLED = ("✓", "Installed", "green")

    @property
    def glyph(self) -> str:
        return self.value[0]

    @property
    def verb(self) -> str:
        return self.value[1]

    @property
    def color(self) -> str:
        return self.value[2]


class UI:
    """Writes status lines and warnings to the terminal via click."""

    def __init__(self, quiet: bool = False, err: bool = False):
        self._quiet = quiet
        self._err = err

    def status(self, status: Status, message: str) -> None:
        if self._quiet:
            return
        click.secho(f"{status.glyph} {status.verb} ", fg=status.color, bold=True, nl=False, err=self._err)
        click.echo(message, err=self._err)

    def warn(self, message: str) -> None:
        # Warnings are never silenced by --quiet
        click.secho(message, fg="yellow", bold=True, err=self._err)

    def br(self) -> None:
        click.echo(err=self._err)


class RecordingUI(UI):
    """UI that keeps every call in memory instead of printing."""

    def __init__(self) -> None:
        super().__init__()
        self.events: list[tuple[str, Any]] = []

    def status(self, status: Status, message: str) -> None:
        self.events.append(("status", (status, message)))

    def warn(self, message: str) -> None:
        self.events.append(("warn", message))

    def br(self) -> None:
        self.events.append(("br", None))

    def statuses(self, status: Status | None = None) -> list[str]:
        """Messages of recorded status lines, optionally of one kind."""
        return [
            payload[1] for kind, payload in self.events
            if kind == "status" and (status is None or payload[0] is status)
        ]

    def warnings(self) -> list[str]:
        return [payload for kind, payload in self.events if kind == "warn"]
