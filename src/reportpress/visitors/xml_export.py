from typing import Iterable, List

from .base import ExportVisitor, export

REPORT_OPEN = "<report>"
REPORT_CLOSE = "</report>"


class XmlExportVisitor(ExportVisitor):
    """
    伪 XML 导出。无状态，不转义，只有 chart 带一个固定的 source='legacy' 属性。
    """

    def visit_header(self, header) -> str:
        return f"  <header>{header.get_text()}</header>"

    def visit_text(self, text) -> str:
        return f"  <content>{text.get_content()}</content>"

    def visit_chart(self, chart) -> str:
        return f"  <chart source='legacy'>{chart.get_data()}</chart>"


def export_xml(elements: Iterable) -> List[str]:
    return [REPORT_OPEN, *export(elements, XmlExportVisitor()), REPORT_CLOSE]
