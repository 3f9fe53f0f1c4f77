import copy
import json

import pytest

from reportpress.errors import ThemeError
from reportpress.themes import FamilyTheme, Marker
from reportpress.utils import get_theme_path


@pytest.fixture
def raw_theme():
    with get_theme_path("html.json") as path:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)


@pytest.mark.parametrize("family", ["html", "pdf"])
def test_builtin_themes_load(family):
    theme = FamilyTheme.load(family)
    assert theme.family == family
    assert theme.page.size == "A4"


def test_missing_theme_file():
    with pytest.raises(FileNotFoundError):
        FamilyTheme.load("no-such-family")


def test_marker_wrap():
    assert Marker("<p>", "</p>").wrap("x") == "<p>x</p>"
    assert Marker("[PDF Text Block]: ", "").wrap("x") == "[PDF Text Block]: x"


def test_colors_are_normalised(raw_theme):
    raw_theme["styles"]["header"]["color"] = "#abcdef"
    assert FamilyTheme.from_json_obj(raw_theme).styles.header.color == "#ABCDEF"


def test_optional_style_fields_default(raw_theme):
    raw_theme["styles"]["text"].pop("space_before", None)
    del raw_theme["styles"]["chart"]["align"]
    theme = FamilyTheme.from_json_obj(raw_theme)
    assert theme.styles.text.space_before == 0
    assert theme.styles.chart.align == "LEFT"


@pytest.mark.parametrize("mutate, message", [
    (lambda t: t.pop("markers"), "Missing required field: $.markers"),
    (lambda t: t["meta"].update(name=3), "meta.name must be str"),
    (lambda t: t["page"].update(size="B5"), "page.size unsupported"),
    (lambda t: t["page"].update(margin_top=True), "page.margin_top must be int"),
    (lambda t: t["styles"]["text"].update(color="red"), "styles.text.color must be color hex"),
    (lambda t: t["styles"]["header"].update(align="MIDDLE"), "styles.header.align unsupported"),
    (lambda t: t["markers"].update(text={"prefix": "", "suffix": ""}), "markers.text needs a prefix or a suffix"),
    (lambda t: t.update(fonts=[]), "fonts must be an object/dict"),
])
def test_invalid_theme_is_rejected(raw_theme, mutate, message):
    broken = copy.deepcopy(raw_theme)
    mutate(broken)
    with pytest.raises(ThemeError) as exc_info:
        FamilyTheme.from_json_obj(broken)
    assert message in str(exc_info.value)


def test_theme_is_frozen():
    theme = FamilyTheme.load("html")
    with pytest.raises(AttributeError):
        theme.meta = None
