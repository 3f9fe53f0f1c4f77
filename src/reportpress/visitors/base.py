from abc import ABC, abstractmethod
from typing import Any, Iterable, List


class ExportVisitor(ABC):
    """
    导出访问者：每种元素一个 visit 方法，各自返回一个片段。
    visit 方法只读元素，不允许修改它。
    """

    @abstractmethod
    def visit_header(self, header) -> Any:
        pass

    @abstractmethod
    def visit_text(self, text) -> Any:
        pass

    @abstractmethod
    def visit_chart(self, chart) -> Any:
        pass


def export(elements: Iterable, visitor: ExportVisitor) -> List[Any]:
    """
    单趟遍历：按集合顺序让每个元素 accept 访问者，一个元素对应一个片段。
    """
    return [element.accept(visitor) for element in elements]
