import io

import pytest
from bs4 import BeautifulSoup

from reportpress import ChartAdapter, InvalidArgumentError, LegacyAnalyticsLibrary


def rendered(element):
    buf = io.StringIO()
    element.render(buf)
    return buf.getvalue()


@pytest.mark.parametrize("value", ["Report", "Звіт №3", "  padded  ", "a <b> & c"])
def test_content_round_trips_unchanged(factory, value):
    assert factory.create_header(value).get_text() == value
    assert factory.create_text(value).get_content() == value
    assert factory.create_header(value).text == value
    assert factory.create_text(value).content == value


@pytest.mark.parametrize("bad", [None, "", "   ", 42, b"bytes"])
def test_invalid_content_is_rejected(factory, bad):
    with pytest.raises(InvalidArgumentError):
        factory.create_header(bad)
    with pytest.raises(InvalidArgumentError):
        factory.create_text(bad)


def test_html_family_renders_markup(html_factory):
    assert rendered(html_factory.create_header("Report")) == "<h1>Report</h1>\n"
    assert rendered(html_factory.create_text("Body text")) == "<p>Body text</p>\n"

    soup = BeautifulSoup(rendered(html_factory.create_header("Report")), "html.parser")
    assert soup.find("h1").get_text() == "Report"


def test_pdf_family_renders_brackets(pdf_factory):
    assert rendered(pdf_factory.create_header("Report")) == "[PDF Header]: Report\n"
    assert rendered(pdf_factory.create_text("Body text")) == "[PDF Text Block]: Body text\n"


def test_render_defaults_to_stdout(html_factory, capsys):
    html_factory.create_text("hello").render()
    assert capsys.readouterr().out == "<p>hello</p>\n"


def test_render_is_idempotent(factory, stub_legacy):
    for element in (factory.create_header("A"), factory.create_text("B"), ChartAdapter(stub_legacy)):
        assert rendered(element) == rendered(element)


def test_elements_remember_their_family(html_factory, pdf_factory, stub_legacy):
    assert html_factory.create_header("x").family == "html"
    assert pdf_factory.create_text("x").family == "pdf"
    assert ChartAdapter(stub_legacy).family is None


class TestChartAdapter:

    def test_get_data_passes_through(self, stub_legacy):
        chart = ChartAdapter(stub_legacy)
        assert chart.get_data() == "DATA: 1,2,3"
        assert chart.data == stub_legacy.getRawGraphData()

    def test_get_data_is_fresh_every_call(self, stub_legacy):
        chart = ChartAdapter(stub_legacy)
        assert chart.get_data() == "DATA: 1,2,3"
        stub_legacy.raw = "DATA: 9"
        assert chart.get_data() == "DATA: 9"
        assert stub_legacy.data_calls == 2

    def test_render_prefixes_legacy_output(self, stub_legacy):
        chart = ChartAdapter(stub_legacy)
        assert rendered(chart) == "Rendering Chart -> ~~ stub graph ~~\n"
        assert stub_legacy.draw_calls == 1

    def test_with_real_legacy_library(self):
        chart = ChartAdapter(LegacyAnalyticsLibrary())
        assert chart.get_data() == "DATA: 42, 15, 88"
        assert rendered(chart) == "Rendering Chart -> .:. Legacy Graph Data .:. \n"

    def test_legacy_values_are_configurable(self):
        assert ChartAdapter(LegacyAnalyticsLibrary([1, 2])).get_data() == "DATA: 1, 2"

    def test_requires_a_source(self):
        with pytest.raises(InvalidArgumentError):
            ChartAdapter(None)

    def test_shares_the_legacy_source(self, stub_legacy):
        first, second = ChartAdapter(stub_legacy), ChartAdapter(stub_legacy)
        assert first.legacy is second.legacy is stub_legacy
