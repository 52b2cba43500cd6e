"""
Format registry — export keyword → helper package + executable.

The table is closed: a keyword not listed here is unsupported.
"""

from __future__ import annotations

from hab_export.core.errors import UnsupportedFormat
from hab_export.core.models import ExportFormat, PackageIdent

# keyword -> (helper package ident, helper command)
EXPORT_FORMATS: dict[str, tuple[str, str]] = {
    "docker": ("core/hab-pkg-dockerize", "hab-pkg-dockerize"),
    "aci": ("core/hab-pkg-aci", "hab-pkg-aci"),
    "mesos": ("core/hab-pkg-mesosize", "hab-pkg-mesosize"),
    "tar": ("core/hab-pkg-tarize", "hab-pkg-tarize"),
}


def available_formats() -> list[str]:
    """Supported keywords, in table order."""
    return list(EXPORT_FORMATS)


def lookup_format(keyword: str) -> ExportFormat:
    """Resolve a keyword (case-sensitive).

    Raises:
        UnsupportedFormat: The keyword is not in the table.
        MalformedIdentifier: A table entry is not a valid ident.
    """
    entry = EXPORT_FORMATS.get(keyword)
    if entry is None:
        raise UnsupportedFormat(keyword)
    ident, command = entry
    return ExportFormat(
        helper_identifier=PackageIdent.from_str(ident),
        helper_command=command,
    )
