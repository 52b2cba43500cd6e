"""
PackageInstall — a package located on the local filesystem.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from hab_export.core.models.ident import PackageIdent

# Metafile listing the package's binary directories, one per ':'.
PATH_METAFILE = "PATH"


class PackageInstall(BaseModel):
    """A fully qualified package and where it lives on disk."""

    model_config = ConfigDict(frozen=True)

    ident: PackageIdent
    installed_path: Path
    fs_root: Path = Path("/")

    def bin_dirs(self) -> list[Path]:
        """Directories holding the package's executables.

        Read from the ``PATH`` metafile when the package ships one
        (absolute paths, rebased onto the filesystem root), otherwise
        ``bin/`` under the install.
        """
        metafile = self.installed_path / PATH_METAFILE
        if metafile.is_file():
            raw = metafile.read_text(encoding="utf-8").strip()
            return [self.fs_root / p.lstrip("/") for p in raw.split(":") if p]
        return [self.installed_path / "bin"]
