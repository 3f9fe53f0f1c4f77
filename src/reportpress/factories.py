import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from .elements import HeaderElement, HTMLHeader, HTMLText, PDFHeader, PDFText, TextElement
from .errors import InvalidArgumentError, UnknownFamilyError
from .themes import FamilyTheme

logger = logging.getLogger(__name__)


class ReportFactory(ABC):
    """
    抽象工厂：一个具体工厂对应一个元素族，产出的标题和正文共享同一套主题。
    调用方只要换一个工厂实例，整份报告的输出风格就跟着换。
    """
    family: str = ""

    def __init__(self, theme: Optional[FamilyTheme] = None):
        # 主题只在构造时读取一次，之后所有元素共用同一个 theme 对象
        if theme is None:
            theme = FamilyTheme.load(self.family)
        elif theme.family != self.family:
            raise InvalidArgumentError(
                f"{type(self).__name__} builds the {self.family!r} family, got a {theme.family!r} theme"
            )
        self.theme = theme

    @abstractmethod
    def create_header(self, text: str) -> HeaderElement:
        pass

    @abstractmethod
    def create_text(self, content: str) -> TextElement:
        pass

    def __repr__(self):
        return f"{type(self).__name__}(family={self.family!r})"


class HTMLFactory(ReportFactory):
    family = "html"

    def create_header(self, text: str) -> HeaderElement:
        return HTMLHeader(text, self.theme)

    def create_text(self, content: str) -> TextElement:
        return HTMLText(content, self.theme)


class PDFFactory(ReportFactory):
    family = "pdf"

    def create_header(self, text: str) -> HeaderElement:
        return PDFHeader(text, self.theme)

    def create_text(self, content: str) -> TextElement:
        return PDFText(content, self.theme)


FACTORIES: Dict[str, Type[ReportFactory]] = {
    HTMLFactory.family: HTMLFactory,
    PDFFactory.family: PDFFactory,
}


def available_families() -> List[str]:
    return sorted(FACTORIES)


def get_factory(family: str) -> ReportFactory:
    """按族名（大小写不敏感）创建工厂。"""
    key = family.lower() if isinstance(family, str) else family
    try:
        factory_cls = FACTORIES[key]
    except (KeyError, TypeError):
        raise UnknownFamilyError(family, available_families()) from None
    logger.debug("Creating %s for family %r", factory_cls.__name__, key)
    return factory_cls()
