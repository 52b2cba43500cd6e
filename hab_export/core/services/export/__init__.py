"""
Export service — delegate package export to format helper packages.

    from hab_export.core.services.export import select_pipeline
"""

from hab_export.core.services.export.formats import (  # noqa: F401
    EXPORT_FORMATS,
    available_formats,
    lookup_format,
)
from hab_export.core.services.export.pipeline import (  # noqa: F401
    ExportPipeline,
    SupportedPipeline,
    UnsupportedPipeline,
    invocation_of,
    select_pipeline,
)
