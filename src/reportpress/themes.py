from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping

from .errors import ThemeError
from .utils import get_theme_path

logger = logging.getLogger(__name__)


# ---------- small utilities ----------

def _as_mapping(obj: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise ThemeError(f"{path} must be an object/dict, got {type(obj).__name__}")
    return obj


def _get(obj: Mapping[str, Any], key: str, path: str, *, default: Any = None, required: bool = True) -> Any:
    if key in obj:
        return obj[key]
    if required:
        raise ThemeError(f"Missing required field: {path}.{key}")
    return default


def _as_str(v: Any, path: str) -> str:
    if not isinstance(v, str):
        raise ThemeError(f"{path} must be str, got {type(v).__name__}")
    return v


def _as_float(v: Any, path: str) -> float:
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return float(v)
    raise ThemeError(f"{path} must be number, got {type(v).__name__}")


def _as_int(v: Any, path: str) -> int:
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    raise ThemeError(f"{path} must be int, got {type(v).__name__}")


def _as_color_hex(v: Any, path: str) -> str:
    s = _as_str(v, path)
    if len(s) == 7 and s.startswith("#"):
        # minimal check: '#RRGGBB'
        hex_part = s[1:]
        if all(c in "0123456789abcdefABCDEF" for c in hex_part):
            return s.upper()
    raise ThemeError(f"{path} must be color hex '#RRGGBB', got {s!r}")


def _as_alignment(v: Any, path: str) -> str:
    s = _as_str(v, path)
    if s not in ("LEFT", "CENTER", "RIGHT", "JUSTIFY"):
        raise ThemeError(f"{path} unsupported: {s!r}")
    return s


# ---------- schema dataclasses ----------

Alignment = Literal["LEFT", "CENTER", "RIGHT", "JUSTIFY"]
Orientation = Literal["portrait", "landscape"]
PageSize = Literal["A4", "A3", "A5", "Letter", "Legal"]


@dataclass(frozen=True)
class Meta:
    name: str
    version: str
    author: str

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str = "meta") -> "Meta":
        d = _as_mapping(d, path)
        return Meta(
            name=_as_str(_get(d, "name", path), f"{path}.name"),
            version=_as_str(_get(d, "version", path), f"{path}.version"),
            author=_as_str(_get(d, "author", path), f"{path}.author"),
        )


@dataclass(frozen=True)
class Marker:
    """render() 时包在内容两侧的记号，例如 '<h1>' / '</h1>'。"""
    prefix: str
    suffix: str

    def wrap(self, content: str) -> str:
        return f"{self.prefix}{content}{self.suffix}"

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str) -> "Marker":
        d = _as_mapping(d, path)
        return Marker(
            prefix=_as_str(_get(d, "prefix", path), f"{path}.prefix"),
            suffix=_as_str(_get(d, "suffix", path, default=""), f"{path}.suffix"),
        )


@dataclass(frozen=True)
class Markers:
    header: Marker
    text: Marker

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str = "markers") -> "Markers":
        d = _as_mapping(d, path)
        header = Marker.from_dict(_get(d, "header", path), f"{path}.header")
        text = Marker.from_dict(_get(d, "text", path), f"{path}.text")
        # 空记号的族无法和其他族区分
        for name, marker in (("header", header), ("text", text)):
            if not marker.prefix and not marker.suffix:
                raise ThemeError(f"{path}.{name} needs a prefix or a suffix")
        return Markers(header=header, text=text)


@dataclass(frozen=True)
class Page:
    size: PageSize
    orientation: Orientation
    margin_top: int
    margin_bottom: int
    margin_left: int
    margin_right: int

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str = "page") -> "Page":
        d = _as_mapping(d, path)
        size = _as_str(_get(d, "size", path), f"{path}.size")
        orientation = _as_str(_get(d, "orientation", path), f"{path}.orientation")

        # enforce known literals (fail fast, don't silently accept garbage)
        if size not in ("A4", "A3", "A5", "Letter", "Legal"):
            raise ThemeError(f"{path}.size unsupported: {size!r}")
        if orientation not in ("portrait", "landscape"):
            raise ThemeError(f"{path}.orientation unsupported: {orientation!r}")

        return Page(
            size=size,  # type: ignore[assignment]
            orientation=orientation,  # type: ignore[assignment]
            margin_top=_as_int(_get(d, "margin_top", path), f"{path}.margin_top"),
            margin_bottom=_as_int(_get(d, "margin_bottom", path), f"{path}.margin_bottom"),
            margin_left=_as_int(_get(d, "margin_left", path), f"{path}.margin_left"),
            margin_right=_as_int(_get(d, "margin_right", path), f"{path}.margin_right"),
        )


@dataclass(frozen=True)
class Fonts:
    regular: str
    heading: str

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str = "fonts") -> "Fonts":
        d = _as_mapping(d, path)
        return Fonts(
            regular=_as_str(_get(d, "regular", path), f"{path}.regular"),
            heading=_as_str(_get(d, "heading", path), f"{path}.heading"),
        )


@dataclass(frozen=True)
class BlockStyle:
    font_size: float
    leading: float
    color: str
    align: Alignment
    space_before: float
    space_after: float

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str) -> "BlockStyle":
        d = _as_mapping(d, path)
        return BlockStyle(
            font_size=_as_float(_get(d, "font_size", path), f"{path}.font_size"),
            leading=_as_float(_get(d, "leading", path), f"{path}.leading"),
            color=_as_color_hex(_get(d, "color", path), f"{path}.color"),
            align=_as_alignment(_get(d, "align", path, default="LEFT", required=False), f"{path}.align"),  # type: ignore[arg-type]
            space_before=_as_float(_get(d, "space_before", path, default=0, required=False), f"{path}.space_before"),
            space_after=_as_float(_get(d, "space_after", path, default=0, required=False), f"{path}.space_after"),
        )


@dataclass(frozen=True)
class Styles:
    header: BlockStyle
    text: BlockStyle
    chart: BlockStyle

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str = "styles") -> "Styles":
        d = _as_mapping(d, path)
        return Styles(
            header=BlockStyle.from_dict(_get(d, "header", path), f"{path}.header"),
            text=BlockStyle.from_dict(_get(d, "text", path), f"{path}.text"),
            chart=BlockStyle.from_dict(_get(d, "chart", path), f"{path}.chart"),
        )


@dataclass(frozen=True)
class FamilyTheme:
    """
    一个元素族（HTML / PDF ...）的全部样式规则。
    markers 决定 render() 的控制台输出，page/fonts/styles 决定 PDF 排版。
    """
    meta: Meta
    markers: Markers
    page: Page
    fonts: Fonts
    styles: Styles

    @property
    def family(self) -> str:
        return self.meta.name

    @staticmethod
    def from_dict(d: Mapping[str, Any], path: str = "$") -> "FamilyTheme":
        d = _as_mapping(d, path)
        return FamilyTheme(
            meta=Meta.from_dict(_get(d, "meta", path), "meta"),
            markers=Markers.from_dict(_get(d, "markers", path), "markers"),
            page=Page.from_dict(_get(d, "page", path), "page"),
            fonts=Fonts.from_dict(_get(d, "fonts", path), "fonts"),
            styles=Styles.from_dict(_get(d, "styles", path), "styles"),
        )

    @staticmethod
    def from_json_obj(obj: Any) -> "FamilyTheme":
        return FamilyTheme.from_dict(_as_mapping(obj, "$"), "$")

    @staticmethod
    def load(family: str) -> "FamilyTheme":
        """按族名读取预置主题 assets/themes/<family>.json"""
        with get_theme_path(f"{family}.json") as theme_path:
            with open(theme_path, "r", encoding='utf-8') as f:
                text = f.read()
        theme = FamilyTheme.from_json_obj(json.loads(text))
        logger.debug("Loaded theme %r (version %s)", theme.family, theme.meta.version)
        return theme
