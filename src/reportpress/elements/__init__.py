from .base import ReportElement, StyledElement
from .chart import ChartAdapter, ChartElement
from .header import HeaderElement, HTMLHeader, PDFHeader
from .text import TextElement, HTMLText, PDFText

__all__ = [
    "ReportElement", "StyledElement",
    "HeaderElement", "HTMLHeader", "PDFHeader",
    "TextElement", "HTMLText", "PDFText",
    "ChartAdapter", "ChartElement",
]
