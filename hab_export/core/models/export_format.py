"""
ExportFormat — what a format keyword resolves to.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hab_export.core.models.ident import PackageIdent


class ExportFormat(BaseModel):
    """A helper package and the executable it provides.

    Only built from the fixed format table, so both fields are
    always set and non-empty.
    """

    model_config = ConfigDict(frozen=True)

    helper_identifier: PackageIdent
    helper_command: str
