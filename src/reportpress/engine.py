import logging
import sys
from typing import List, Optional, TextIO

from .collection import ReportCollection
from .elements import ChartAdapter, HeaderElement, TextElement
from .errors import InvalidArgumentError
from .factories import ReportFactory, get_factory
from .legacy import LegacyAnalyticsLibrary
from .visitors import build_pdf, export_xml

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = "html"
DEMO_TITLE = "Lab work report No. 3"
DEMO_BODY = "An example of using design patterns."


class ReportEngine:
    """
    组装根：持有一个工厂和一个元素集合，工厂、集合、访问者都在这里就地创建，
    不依赖任何全局状态。
    """

    def __init__(self, family: Optional[str] = None, legacy: Optional[LegacyAnalyticsLibrary] = None,
                 factory: Optional[ReportFactory] = None):
        if factory is None:
            factory = get_factory(family if family is not None else DEFAULT_FAMILY)
        elif family is not None and str(family).lower() != factory.family:
            raise InvalidArgumentError(
                f"family {family!r} conflicts with {type(factory).__name__} ({factory.family!r})"
            )
        self.factory = factory
        # 图表默认共用这一个 legacy 库
        self.legacy = legacy if legacy is not None else LegacyAnalyticsLibrary()
        self.collection = ReportCollection()

    @property
    def family(self) -> str:
        return self.factory.family

    def add_header(self, text: str) -> HeaderElement:
        return self.collection.append(self.factory.create_header(text))

    def add_text(self, content: str) -> TextElement:
        return self.collection.append(self.factory.create_text(content))

    def add_chart(self, legacy: Optional[LegacyAnalyticsLibrary] = None) -> ChartAdapter:
        return self.collection.append(ChartAdapter(legacy if legacy is not None else self.legacy))

    def render(self, sink: Optional[TextIO] = None):
        out = sink if sink is not None else sys.stdout
        logger.debug("Rendering %d elements (%s family)", len(self.collection), self.family)
        for element in self.collection:
            element.render(out)

    def export_xml(self) -> List[str]:
        return export_xml(self.collection)

    def to_pdf(self) -> bytes:
        return build_pdf(self.collection, self.factory.theme)


def build_demo_report(family: str = DEFAULT_FAMILY, legacy: Optional[LegacyAnalyticsLibrary] = None) -> ReportEngine:
    """标题 + 正文 + 一个 legacy 图表的演示报告。"""
    engine = ReportEngine(family, legacy=legacy)
    engine.add_header(DEMO_TITLE)
    engine.add_text(DEMO_BODY)
    engine.add_chart()
    return engine
