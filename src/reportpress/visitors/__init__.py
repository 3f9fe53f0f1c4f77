from .base import ExportVisitor, export
from .pdf_export import FlowableExportVisitor, build_pdf, build_story
from .xml_export import XmlExportVisitor, export_xml

__all__ = [
    "ExportVisitor", "export",
    "XmlExportVisitor", "export_xml",
    "FlowableExportVisitor", "build_story", "build_pdf",
]
