"""
app/services package marker.
"""

from app.services.audit_service import AuditService, get_audit_service
from app.services.report_export_service import ExportResult, ReportExportService

__all__ = [
    "AuditService",
    "ExportResult",
    "get_audit_service",
    "ReportExportService",
]
