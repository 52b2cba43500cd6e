"""
Export pipeline — format resolution, on-demand install and handoff,
behind a platform gate.

One contract (``ExportPipeline``) with two variants:

    SupportedPipeline    — the real pipeline (Linux)
    UnsupportedPipeline  — warns and fails, naming what the user tried

``select_pipeline()`` probes the platform once at startup; everything
downstream is written against the contract only.
"""

from __future__ import annotations

import logging
import platform
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn, Sequence

from hab_export.core.errors import SubcommandNotSupported, UnsupportedFormat
from hab_export.core.models import ExportFormat, PackageIdent
from hab_export.core.services.export.formats import lookup_format
from hab_export.core.services.export.handoff import handoff
from hab_export.core.services.export.provision import ensure_installed

if TYPE_CHECKING:
    from hab_export.adapters.base import Installer, ProcessExec
    from hab_export.ui.console import UI

logger = logging.getLogger(__name__)

SUPPORTED_SYSTEMS = ("Linux",)
UNKNOWN_ARG = "<unknown>"


class ExportPipeline(ABC):
    """Resolve a format keyword, then start the export."""

    supported: bool

    @abstractmethod
    def format_for(self, ui: UI, keyword: str) -> ExportFormat:
        """Resolve ``keyword`` to its helper.

        Raises:
            UnsupportedFormat: Unknown keyword, or no export on this platform.
        """

    @abstractmethod
    def start(
        self,
        ui: UI,
        url: str,
        channel: str,
        helper_url: str,
        helper_channel: str,
        ident: PackageIdent,
        export_format: ExportFormat,
        argv: Sequence[str] | None = None,
    ) -> NoReturn:
        """Provision the helper if needed and hand off to it.

        ``url``/``channel`` locate the target package and are passed to
        the helper; ``helper_url``/``helper_channel`` locate the helper
        itself. ``argv`` is the invocation (program name first), used
        only to describe the attempted command on failure.
        """


class SupportedPipeline(ExportPipeline):
    """Resolve, install on a miss, exec."""

    supported = True

    def __init__(
        self,
        installer: Installer,
        process: ProcessExec,
        fs_root: Path = Path("/"),
        cache_path: Path | None = None,
    ):
        self.installer = installer
        self.process = process
        self.fs_root = fs_root
        self.cache_path = cache_path or fs_root / "hab/cache/artifacts"

    def format_for(self, ui: UI, keyword: str) -> ExportFormat:
        return lookup_format(keyword)

    def start(
        self,
        ui: UI,
        url: str,
        channel: str,
        helper_url: str,
        helper_channel: str,
        ident: PackageIdent,
        export_format: ExportFormat,
        argv: Sequence[str] | None = None,
    ) -> NoReturn:
        helper = export_format.helper_identifier
        ensure_installed(
            ui,
            self.installer,
            helper,
            helper_url,
            helper_channel,
            self.fs_root,
            self.cache_path,
        )
        handoff(
            self.process,
            helper,
            export_format.helper_command,
            ident,
            url,
            channel,
            fs_root=self.fs_root,
        )


class UnsupportedPipeline(ExportPipeline):
    """Every operation warns and fails."""

    supported = False

    def format_for(self, ui: UI, keyword: str) -> ExportFormat:
        ui.warn(
            f"∅ Exporting {keyword} packages from this operating system is not yet "
            "supported. Try running this command again on a 64-bit Linux "
            "operating system.\n"
        )
        ui.br()
        raise UnsupportedFormat(keyword)

    def start(
        self,
        ui: UI,
        url: str,
        channel: str,
        helper_url: str,
        helper_channel: str,
        ident: PackageIdent,
        export_format: ExportFormat,
        argv: Sequence[str] | None = None,
    ) -> NoReturn:
        ui.warn(
            "Exporting packages from this operating system is not yet supported. "
            "Try running this command again on a 64-bit Linux operating system."
        )
        ui.br()
        raise SubcommandNotSupported(invocation_of(sys.argv if argv is None else argv))


def invocation_of(argv: Sequence[str]) -> str:
    """The two words after the program name, ``<unknown>`` if absent.

    ``["hab", "pkg", "export", "tar"]`` → ``"pkg export"``.
    """
    subcmd = argv[1] if len(argv) > 1 else UNKNOWN_ARG
    subsubcmd = argv[2] if len(argv) > 2 else UNKNOWN_ARG
    return f"{subcmd} {subsubcmd}"


def is_supported_platform(system: str | None = None) -> bool:
    return (system if system is not None else platform.system()) in SUPPORTED_SYSTEMS


def select_pipeline(
    installer: Installer,
    process: ProcessExec,
    fs_root: Path = Path("/"),
    cache_path: Path | None = None,
    system: str | None = None,
) -> ExportPipeline:
    """Pick the pipeline variant for this platform.

    Args:
        system: Platform name override (default: ``platform.system()``).
    """
    system = system if system is not None else platform.system()
    if is_supported_platform(system):
        return SupportedPipeline(installer, process, fs_root=fs_root, cache_path=cache_path)
    logger.debug("Export not supported on %s", system)
    return UnsupportedPipeline()
