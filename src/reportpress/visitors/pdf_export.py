import io
import logging
import sys
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_RIGHT, TA_JUSTIFY
from reportlab.lib.styles import ParagraphStyle, StyleSheet1, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate

from ..errors import InvalidArgumentError
from ..themes import BlockStyle, FamilyTheme
from ..utils import get_font_path
from .base import ExportVisitor, export

logger = logging.getLogger(__name__)

ALIGN_MAP = {'LEFT': TA_LEFT, 'CENTER': TA_CENTER, 'RIGHT': TA_RIGHT, 'JUSTIFY': TA_JUSTIFY}
PAGE_SIZES = {
    "A4": pagesizes.A4, "A3": pagesizes.A3, "A5": pagesizes.A5,
    "Letter": pagesizes.LETTER, "Legal": pagesizes.LEGAL,
}


def register_theme_fonts(theme: FamilyTheme):
    """
    从 assets/fonts 加载主题用到的 TTF 字体（文件名 = 字体名 + .ttf）。
    内置的 Type1 字体不含西里尔字母，所以预置主题都用 TTF。
    """
    registered = set(pdfmetrics.getRegisteredFontNames())
    for font_name in (theme.fonts.regular, theme.fonts.heading):
        if font_name in registered or font_name in pdfmetrics.standardFonts:
            continue
        try:
            with get_font_path(font_name + ".ttf") as font_path:
                pdfmetrics.registerFont(TTFont(font_name, font_path))
        except Exception as e:
            print(f"CRITICAL: Font loading failed - {e}", file=sys.stderr)
            raise
        registered.add(font_name)
        logger.debug("Registered font %r for %s family", font_name, theme.family)


class FlowableExportVisitor(ExportVisitor):
    """
    把元素导出为 ReportLab 的 Flowable，样式全部来自族主题。
    每个元素返回一个 Paragraph；文本先做 XML 转义，因为 Paragraph 会把内容当标记解析。
    """

    def __init__(self, theme: FamilyTheme, stylesheet: Optional[StyleSheet1] = None):
        register_theme_fonts(theme)
        self.theme = theme
        self.styles = stylesheet if stylesheet is not None else getSampleStyleSheet()

    def _style(self, kind: str, conf: BlockStyle, font_name: str) -> ParagraphStyle:
        style_name = f"Report_{self.theme.family}_{kind}"
        if style_name not in self.styles:
            self.styles.add(ParagraphStyle(
                name=style_name,
                fontName=font_name,
                fontSize=conf.font_size,
                leading=conf.leading,
                textColor=colors.HexColor(conf.color),
                alignment=ALIGN_MAP.get(conf.align, TA_LEFT),
                spaceBefore=conf.space_before,
                spaceAfter=conf.space_after,
            ))
        return self.styles[style_name]

    def visit_header(self, header) -> Flowable:
        style = self._style("header", self.theme.styles.header, self.theme.fonts.heading)
        return Paragraph(escape(header.get_text()), style)

    def visit_text(self, text) -> Flowable:
        style = self._style("text", self.theme.styles.text, self.theme.fonts.regular)
        return Paragraph(escape(text.get_content()), style)

    def visit_chart(self, chart) -> Flowable:
        style = self._style("chart", self.theme.styles.chart, self.theme.fonts.regular)
        return Paragraph(f"Chart (source: legacy): {escape(chart.get_data())}", style)


def _page_size(theme: FamilyTheme):
    page_size = PAGE_SIZES.get(theme.page.size, pagesizes.A4)
    if theme.page.orientation == "landscape":
        page_size = pagesizes.landscape(page_size)
    return page_size


def build_story(elements: Iterable, theme: FamilyTheme) -> List[Flowable]:
    return export(elements, FlowableExportVisitor(theme))


def build_pdf(elements: Iterable, theme: FamilyTheme) -> bytes:
    """
    在内存里排版整份报告并返回 PDF 字节，不落盘。
    """
    story = build_story(elements, theme)
    if not story:
        raise InvalidArgumentError("Cannot build a PDF from an empty report")

    buffer = io.BytesIO()
    page = theme.page
    doc = SimpleDocTemplate(
        buffer,
        pagesize=_page_size(theme),
        leftMargin=page.margin_left * mm,
        rightMargin=page.margin_right * mm,
        topMargin=page.margin_top * mm,
        bottomMargin=page.margin_bottom * mm,
        title=theme.meta.name,
        author=theme.meta.author,
    )
    doc.build(story)
    data = buffer.getvalue()
    logger.debug("Built %d-byte PDF from %d flowables (%s family)", len(data), len(story), theme.family)
    return data
