"""
Installer bridge — make sure the helper package is present.

Probes the local install first; only on a miss does it report the
missing package and hand the request to the installer adapter. The
installer's errors are not caught here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from hab_export import PRODUCT, VERSION
from hab_export.core.errors import PackageNotFound
from hab_export.core.models import PackageIdent
from hab_export.core.services.export.presence import load_package
from hab_export.ui.console import Status

if TYPE_CHECKING:
    from hab_export.adapters.base import Installer
    from hab_export.ui.console import UI

logger = logging.getLogger(__name__)


def ensure_installed(
    ui: UI,
    installer: Installer,
    ident: PackageIdent,
    url: str,
    channel: str | None,
    fs_root: Path,
    cache_path: Path,
) -> bool:
    """Install ``ident`` unless a local installation already exists.

    Returns:
        True when an install was performed, False when the package was
        already present.
    """
    try:
        install = load_package(ident, fs_root)
    except PackageNotFound:
        logger.info("%s not installed under %s", ident, fs_root)
    else:
        logger.debug("Using installed %s", install.ident)
        return False

    ui.status(Status.MISSING, f"package for {ident}")
    installer.install(
        ui,
        url,
        channel or None,
        str(ident),
        PRODUCT,
        VERSION,
        fs_root,
        cache_path,
        False,
    )
    return True
