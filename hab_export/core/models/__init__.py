"""
Domain models — Pydantic types for the export pipeline.

    from hab_export.core.models import ExportFormat, PackageIdent, PackageInstall
"""

from hab_export.core.models.export_format import ExportFormat
from hab_export.core.models.ident import PackageIdent
from hab_export.core.models.install import PackageInstall

__all__ = [
    "ExportFormat",
    "PackageIdent",
    "PackageInstall",
]
