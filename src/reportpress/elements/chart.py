import sys
from typing import Optional, TextIO

from ..errors import InvalidArgumentError
from .base import ReportElement


class ChartAdapter(ReportElement):
    """
    适配器：把 LegacyAnalyticsLibrary 的接口转换成 ReportElement。
    只持有 legacy 对象的引用，数据每次都从源头现取，不做缓存。
    """
    RENDER_PREFIX = "Rendering Chart -> "

    def __init__(self, legacy_lib):
        if legacy_lib is None:
            raise InvalidArgumentError("ChartAdapter needs a legacy data source")
        self._legacy = legacy_lib

    @property
    def legacy(self):
        return self._legacy

    def render(self, sink: Optional[TextIO] = None) -> None:
        out = sink if sink is not None else sys.stdout
        out.write(self.RENDER_PREFIX)
        # legacy 的输出格式不透明，原样透传
        self._legacy.drawComplexGraph(out)

    def accept(self, visitor):
        return visitor.visit_chart(self)

    @property
    def data(self) -> str:
        return self.get_data()

    def get_data(self) -> str:
        return self._legacy.getRawGraphData()

    def __repr__(self):
        return f"ChartAdapter({self._legacy!r})"


ChartElement = ChartAdapter
