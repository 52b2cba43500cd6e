"""
Availability probe — is a package already installed locally?

Read-only: walks ``{fs_root}/hab/pkgs`` and never touches a registry.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from hab_export.core.errors import PackageNotFound
from hab_export.core.models import PackageIdent, PackageInstall

logger = logging.getLogger(__name__)

PKG_PATH = "hab/pkgs"

_SEGMENT_RE = re.compile(r"(\d+|[^\d]+)")


def pkg_root(fs_root: Path | None = None) -> Path:
    """Directory holding every installed package."""
    return (fs_root or Path("/")) / PKG_PATH


def load_package(ident: PackageIdent, fs_root: Path | None = None) -> PackageInstall:
    """Locate an installed package.

    A partially qualified ident resolves to the newest version that
    holds at least one release, then the newest release of that
    version. Empty or half-written version directories are skipped.

    Raises:
        PackageNotFound: Nothing installed matches.
    """
    root = fs_root or Path("/")
    base = pkg_root(root) / ident.origin / ident.name

    if ident.version:
        versions = [ident.version]
    else:
        versions = sorted(_subdirs(base), key=_version_key, reverse=True)

    for version in versions:
        if ident.release:
            release = ident.release if (base / version / ident.release).is_dir() else None
        else:
            releases = _subdirs(base / version)
            release = max(releases) if releases else None
        if release is None:
            logger.debug("Skipping %s/%s: no release installed", ident, version)
            continue

        resolved = PackageIdent(
            origin=ident.origin, name=ident.name, version=version, release=release
        )
        path = base / version / release
        logger.debug("Found %s at %s", resolved, path)
        return PackageInstall(ident=resolved, installed_path=path, fs_root=root)

    raise PackageNotFound(ident)


def is_installed(ident: PackageIdent, fs_root: Path | None = None) -> bool:
    """Boolean form of ``load_package``."""
    try:
        load_package(ident, fs_root)
    except PackageNotFound:
        return False
    return True


def _subdirs(directory: Path) -> list[str]:
    if not directory.is_dir():
        return []
    return [p.name for p in directory.iterdir() if p.is_dir()]


def _version_key(version: str) -> tuple:
    """Order versions segment-wise: numbers numerically, text lexically.

    ``1.10.0`` sorts after ``1.9.2``.
    """
    key = []
    for part in _SEGMENT_RE.findall(version):
        if part.isdigit():
            key.append((1, int(part), ""))
        else:
            key.append((0, 0, part))
    return tuple(key)
