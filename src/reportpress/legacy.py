import sys
from typing import Iterable, Optional, TextIO


class LegacyAnalyticsLibrary:
    """
    模拟的第三方分析库，接口固定、不可修改（所以保留它自己的 camelCase 命名）。
    只能通过 ChartAdapter 接入报告。
    """
    GRAPH_BANNER = ".:. Legacy Graph Data .:. "

    def __init__(self, values: Iterable[int] = (42, 15, 88)):
        self._values = tuple(values)

    def drawComplexGraph(self, out: Optional[TextIO] = None) -> None:
        out = out if out is not None else sys.stdout
        out.write(self.GRAPH_BANNER + "\n")

    def getRawGraphData(self) -> str:
        return "DATA: " + ", ".join(str(v) for v in self._values)
