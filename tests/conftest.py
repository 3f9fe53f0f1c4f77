import logging

import pytest

from reportpress import HTMLFactory, PDFFactory
from reportpress.visitors import ExportVisitor


class StubLegacy:
    """只实现 legacy 库的两个方法，返回固定数据，并记录被调用次数。"""

    def __init__(self, raw="DATA: 1,2,3", banner="~~ stub graph ~~"):
        self.raw = raw
        self.banner = banner
        self.data_calls = 0
        self.draw_calls = 0

    def drawComplexGraph(self, out=None):
        self.draw_calls += 1
        out.write(self.banner + "\n")

    def getRawGraphData(self):
        self.data_calls += 1
        return self.raw


class RecordingVisitor(ExportVisitor):
    """记录每次被调用的 visit 方法名和元素。"""

    def __init__(self):
        self.calls = []

    def visit_header(self, header):
        self.calls.append(("header", header))
        return "H"

    def visit_text(self, text):
        self.calls.append(("text", text))
        return "T"

    def visit_chart(self, chart):
        self.calls.append(("chart", chart))
        return "C"


@pytest.fixture
def html_factory():
    return HTMLFactory()


@pytest.fixture
def pdf_factory():
    return PDFFactory()


@pytest.fixture(params=["html", "pdf"])
def factory(request):
    return {"html": HTMLFactory, "pdf": PDFFactory}[request.param]()


@pytest.fixture
def stub_legacy():
    return StubLegacy()


@pytest.fixture
def recording_visitor():
    return RecordingVisitor()


@pytest.fixture
def restore_package_log_level():
    package_logger = logging.getLogger("reportpress")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
