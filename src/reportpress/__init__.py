from .collection import ReportCollection
from .elements import (
    ChartAdapter, ChartElement, HeaderElement, HTMLHeader, HTMLText,
    PDFHeader, PDFText, ReportElement, TextElement,
)
from .engine import ReportEngine, build_demo_report
from .errors import InvalidArgumentError, MixedFamilyError, ReportPressError, ThemeError, UnknownFamilyError
from .factories import FACTORIES, HTMLFactory, PDFFactory, ReportFactory, available_families, get_factory
from .legacy import LegacyAnalyticsLibrary
from .themes import FamilyTheme
from .visitors import ExportVisitor, FlowableExportVisitor, XmlExportVisitor, build_pdf, export, export_xml

__version__ = "0.1.0"
