import importlib.resources
from contextlib import contextmanager

from .errors import InvalidArgumentError


@contextmanager
def get_font_path(filename: str):
    """获取 assets/fonts 下字体文件的绝对路径。"""
    ref = importlib.resources.files('reportpress.assets.fonts') / filename
    with importlib.resources.as_file(ref) as path:
        if not path.exists():
            raise FileNotFoundError(f"Font missing: {filename} in {path}")
        yield str(path)


@contextmanager
def get_theme_path(filename: str):
    """获取 assets/themes 下主题文件的绝对路径。"""
    ref = importlib.resources.files('reportpress.assets.themes') / filename
    with importlib.resources.as_file(ref) as path:
        if not path.exists():
            raise FileNotFoundError(f"Theme missing: {filename} in {path}")
        yield str(path)


def require_text(value, name: str) -> str:
    """
    元素内容的统一校验：必须是非空字符串。
    只拒绝 None / 非 str / 纯空白，内容本身原样保留，不做 strip。
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be str, got {type(value).__name__}")
    if not value.strip():
        raise InvalidArgumentError(f"{name} must not be empty")
    return value
