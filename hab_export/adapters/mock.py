"""
Mock adapters — test doubles for the installer and the exec primitive.

``MockInstaller`` records every install request and can lay out a fake
package on disk so the handoff finds its command afterwards.
``RecordingExec`` records the exec request and raises ``HandoffCaptured``
instead of replacing the process, keeping the handoff non-returning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, NoReturn

from hab_export.adapters.base import Installer, ProcessExec

if TYPE_CHECKING:
    from hab_export.ui.console import UI


class MockInstaller(Installer):
    """Records install calls; optionally fails or materializes packages."""

    def __init__(
        self,
        adapter_name: str = "mock",
        error: Exception | None = None,
        materialize: dict[str, str] | None = None,
        release: str = "20170101000000",
        version: str = "0.1.0",
    ):
        """
        Args:
            adapter_name: Reported adapter name.
            error: Raised from every ``install`` call when set.
            materialize: ident string -> command name to create under
                ``fs_root`` on install.
            release: Release stamp used for materialized packages.
            version: Version used for materialized packages.
        """
        self._name = adapter_name
        self._error = error
        self._materialize = materialize or {}
        self._release = release
        self._version = version
        self._call_log: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[dict[str, Any]]:
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

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
        self._call_log.append({
            "url": url,
            "channel": channel,
            "ident": ident,
            "product": product,
            "version": version,
            "fs_root": fs_root,
            "cache_path": cache_path,
            "force": force,
        })
        if self._error is not None:
            raise self._error
        command = self._materialize.get(ident)
        if command:
            make_fake_package(fs_root, ident, command, self._version, self._release)

    def reset(self) -> None:
        self._call_log.clear()


def make_fake_package(
    fs_root: Path,
    ident: str,
    command: str,
    version: str = "0.1.0",
    release: str = "20170101000000",
) -> Path:
    """Lay out ``{fs_root}/hab/pkgs/{origin}/{name}/{version}/{release}/bin/{command}``.

    Returns the installed package directory.
    """
    origin, name = ident.split("/")[:2]
    pkg_dir = fs_root / "hab" / "pkgs" / origin / name / version / release
    bin_dir = pkg_dir / "bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    exe = bin_dir / command
    exe.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    exe.chmod(0o755)
    return pkg_dir


class HandoffCaptured(Exception):
    """Raised by ``RecordingExec`` in place of replacing the process."""

    def __init__(self, request: ExecRequest):
        self.request = request
        super().__init__(f"exec {request.path}")


@dataclass
class ExecRequest:
    path: Path
    argv: list[str]
    env: dict[str, str] = field(default_factory=dict)


class RecordingExec(ProcessExec):
    """Captures the exec request without replacing the process."""

    def __init__(self) -> None:
        self.requests: list[ExecRequest] = []

    def exec(self, path: Path, argv: list[str], env: Mapping[str, str]) -> NoReturn:
        request = ExecRequest(path=path, argv=list(argv), env=dict(env))
        self.requests.append(request)
        raise HandoffCaptured(request)
