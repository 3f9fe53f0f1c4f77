import sys
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO

from ..themes import FamilyTheme, Marker


class ReportElement(ABC):
    """
    所有报告元素的基类。
    render() 负责自我描述式的显示输出，accept() 是导出访问者的入口（双分派）。
    元素构造后不可变，两个方法都可以反复调用。
    """
    family: Optional[str] = None

    @abstractmethod
    def render(self, sink: Optional[TextIO] = None) -> None:
        """
        把元素的显示形式写到 sink（任何带 write(str) 的对象，默认 stdout）。
        """
        pass

    @abstractmethod
    def accept(self, visitor) -> Any:
        """
        调用 visitor 上与自身类型对应的那一个方法，并返回它的结果（一个片段）。
        """
        pass


class StyledElement(ReportElement):
    """由某个族的工厂创建、按该族主题渲染的元素（标题、正文）。"""

    def __init__(self, value: str, theme: FamilyTheme):
        self._value = value
        self._theme = theme

    @property
    def theme(self) -> FamilyTheme:
        return self._theme

    @property
    def family(self) -> str:
        return self._theme.family

    @property
    @abstractmethod
    def marker(self) -> Marker:
        pass

    def render(self, sink: Optional[TextIO] = None) -> None:
        out = sink if sink is not None else sys.stdout
        out.write(self.marker.wrap(self._value) + "\n")

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"
