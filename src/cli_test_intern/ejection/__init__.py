"""Ejection exports."""

from .export_models import ExportDescriptor
from .footprint_export import ManifestReadError, eject

__all__ = ["ExportDescriptor", "ManifestReadError", "eject"]
