"""
Adapter base — the contracts between the export pipeline and the
outside world.

The pipeline never installs packages or replaces the process itself;
it goes through these two interfaces. Unlike result-returning adapters,
both raise on failure: the pipeline surfaces their errors verbatim.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, NoReturn

if TYPE_CHECKING:
    from hab_export.ui.console import UI


class Installer(ABC):
    """Provisions a package from a registry into a filesystem root."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'command', 'mock')."""

    @abstractmethod
    def install(
        self,
        ui: UI,
        url: str,
        channel: str | None,
        ident: str,
        product: str,
        version: str,
        fs_root: Path,
        cache_path: Path,
        force: bool,
    ) -> None:
        """Install ``ident`` from ``url``/``channel``.

        Args:
            ui: Status surface for progress lines.
            url: Registry URL.
            channel: Registry channel. None means the installer's default.
            ident: Package identifier string.
            product: Caller product name (user agent).
            version: Caller product version (user agent).
            fs_root: Filesystem root to install under.
            cache_path: Artifact cache directory.
            force: Reinstall over an existing installation.

        Raises:
            Whatever the underlying installer raises; callers do not
            reinterpret it.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class ProcessExec(ABC):
    """Replaces the current process with another program."""

    @abstractmethod
    def exec(self, path: Path, argv: list[str], env: Mapping[str, str]) -> NoReturn:
        """Run ``path`` with ``argv`` and exactly ``env`` as its environment.

        Never returns on success. Raises ``OSError`` when the program
        cannot be launched.
        """
