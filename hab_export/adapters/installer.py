"""
Command installer — provisions helper packages by running the
package manager's own install command.

The single place where ``subprocess.run`` is called for installs.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from pathlib import Path
from typing import TYPE_CHECKING

from hab_export.adapters.base import Installer
from hab_export.core.errors import InstallError

if TYPE_CHECKING:
    from hab_export.ui.console import UI

logger = logging.getLogger(__name__)


class CommandInstaller(Installer):
    """Run ``<command> <ident> --url URL [--channel CHANNEL] [--force]``.

    The filesystem root, artifact cache and user agent travel in the
    child's environment. ``timeout`` bounds the install in seconds; by
    default the install runs without a time limit.
    """

    def __init__(self, command: list[str] | None = None, timeout: int | None = None):
        self._command = list(command) if command else ["hab", "pkg", "install"]
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "command"

    def build_command(
        self,
        url: str,
        channel: str | None,
        ident: str,
        force: bool,
    ) -> list[str]:
        cmd = [*self._command, ident, "--url", url]
        if channel:
            cmd += ["--channel", channel]
        if force:
            cmd.append("--force")
        return cmd

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
        from hab_export.ui.console import Status

        cmd = self.build_command(url, channel, ident, force)

        env = os.environ.copy()
        env["FS_ROOT"] = str(fs_root)
        env["HAB_CACHE_ARTIFACT_PATH"] = str(cache_path)
        env["HAB_USER_AGENT"] = f"{product}/{version}"

        ui.status(Status.INSTALLING, ident)
        logger.info("Installing %s: %s", ident, " ".join(cmd))
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                env=env,
            )
        except FileNotFoundError as e:
            raise InstallError(f"Installer not found: {cmd[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise InstallError(f"Installing {ident} timed out after {self._timeout}s") from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if result.returncode != 0:
            stderr = result.stderr[-2000:].strip() if result.stderr else ""
            logger.debug("Installer stderr: %s", stderr)
            raise InstallError(
                f"Installing {ident} failed (exit {result.returncode})"
                + (f": {stderr}" if stderr else "")
            )

        logger.info("Installed %s in %dms", ident, elapsed_ms)
        ui.status(Status.INSTALLED, ident)
