from typing import Iterable, Iterator, List, Optional

from .elements import ReportElement
from .errors import InvalidArgumentError, MixedFamilyError


class ReportCollection:
    """
    有序的报告元素序列，插入顺序就是渲染和导出顺序。

    族一致性：记录第一个带族的元素（标题/正文）所属的族，
    之后来自其他族的元素会被拒绝。图表不属于任何族，总是允许加入。
    enforce_family=False 时不做检查。
    """

    def __init__(self, elements: Iterable[ReportElement] = (), enforce_family: bool = True):
        self._elements: List[ReportElement] = []
        self.enforce_family = enforce_family
        self.family: Optional[str] = None
        self.extend(elements)

    def append(self, element: ReportElement) -> ReportElement:
        if not isinstance(element, ReportElement):
            raise InvalidArgumentError(f"Expected a ReportElement, got {type(element).__name__}")

        element_family = element.family
        if element_family is not None:
            if self.family is None:
                self.family = element_family
            elif self.enforce_family and element_family != self.family:
                raise MixedFamilyError(
                    f"{type(element).__name__} belongs to family {element_family!r}, "
                    f"but this report uses {self.family!r}"
                )

        self._elements.append(element)
        return element

    def extend(self, elements: Iterable[ReportElement]) -> None:
        for element in elements:
            self.append(element)

    def __iter__(self) -> Iterator[ReportElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __repr__(self):
        return f"ReportCollection(family={self.family!r}, elements={self._elements!r})"
