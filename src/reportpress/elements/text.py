from ..themes import FamilyTheme, Marker
from ..utils import require_text
from .base import StyledElement


class TextElement(StyledElement):
    """正文段落，保存不可变的正文内容。"""

    def __init__(self, content: str, theme: FamilyTheme):
        super().__init__(require_text(content, "text content"), theme)

    @property
    def marker(self) -> Marker:
        return self.theme.markers.text

    @property
    def content(self) -> str:
        return self._value

    def get_content(self) -> str:
        return self._value

    def accept(self, visitor):
        return visitor.visit_text(self)


class HTMLText(TextElement):
    pass


class PDFText(TextElement):
    pass
