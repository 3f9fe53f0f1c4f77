from ..themes import FamilyTheme, Marker
from ..utils import require_text
from .base import StyledElement


class HeaderElement(StyledElement):
    """报告标题，保存不可变的标题文本。"""

    def __init__(self, text: str, theme: FamilyTheme):
        super().__init__(require_text(text, "header text"), theme)

    @property
    def marker(self) -> Marker:
        return self.theme.markers.header

    @property
    def text(self) -> str:
        return self._value

    def get_text(self) -> str:
        return self._value

    def accept(self, visitor):
        return visitor.visit_header(self)


class HTMLHeader(HeaderElement):
    pass


class PDFHeader(HeaderElement):
    pass
