"""Export service producing export metadata.

No document is generated; the response describes the file that would be.
"""

import logging
import time

from ..core.observability import metrics_collector
from ..core.storage import EntityStore
from ..schemas.export import ExportFormat, ExportKind, ExportResponse

logger = logging.getLogger(__name__)


class ExportService:
    """Service for export requests."""

    def __init__(self, store: EntityStore):
        self.store = store

    def export(self, kind: ExportKind, export_format: ExportFormat) -> ExportResponse:
        """
        Describe an export of one collection.

        Args:
            kind: Collection to export
            export_format: Requested document format

        Returns:
            ExportResponse with a timestamped filename and record count
        """
        count = getattr(self.store, kind.value).count()
        filename = f"{kind.value}-export-{int(time.time() * 1000)}.{export_format.value}"

        metrics_collector.record_export(kind.value, export_format.value)
        logger.info(
            "Export requested",
            extra={"kind": kind.value, "format": export_format.value, "count": count}
        )

        return ExportResponse(
            message=f"{kind.value.capitalize()} exported successfully in {export_format.value} format",
            filename=filename,
            count=count,
        )
