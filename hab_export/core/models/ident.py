"""
Package identifier — origin/name[/version[/release]].

Used for both the helper package (from the format table) and the
user's target package (from the command line).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hab_export.core.errors import MalformedIdentifier


class PackageIdent(BaseModel):
    """Structured package identity.

    A release is only meaningful with a version, which the positional
    string form guarantees.
    """

    model_config = ConfigDict(frozen=True)

    origin: str
    name: str
    version: str | None = None
    release: str | None = None

    @classmethod
    def from_str(cls, value: str) -> PackageIdent:
        """Parse ``origin/name[/version[/release]]``.

        Raises:
            MalformedIdentifier: Wrong segment count or an empty segment.
        """
        parts = value.split("/")
        if not 2 <= len(parts) <= 4 or any(not p for p in parts):
            raise MalformedIdentifier(value)
        return cls(
            origin=parts[0],
            name=parts[1],
            version=parts[2] if len(parts) > 2 else None,
            release=parts[3] if len(parts) > 3 else None,
        )

    def fully_qualified(self) -> bool:
        """Whether both version and release are pinned."""
        return self.version is not None and self.release is not None

    def parts(self) -> list[str]:
        """Path segments, as laid out under the package install root."""
        segments = [self.origin, self.name]
        if self.version:
            segments.append(self.version)
            if self.release:
                segments.append(self.release)
        return segments

    def __str__(self) -> str:
        return "/".join(self.parts())
