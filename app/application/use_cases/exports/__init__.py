"""Export use cases."""

from app.application.use_cases.exports.export_playlist import ExportService

__all__ = ["ExportService"]
