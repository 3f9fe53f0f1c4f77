class ReportPressError(Exception):
    """reportpress 所有异常的基类。"""


class InvalidArgumentError(ReportPressError, ValueError):
    """构造参数不合法：空文本、非字符串内容、缺失的 legacy 数据源等。"""


class UnknownFamilyError(ReportPressError, KeyError):
    """按名称查找工厂时，族名未注册。"""

    def __init__(self, family, available):
        self.family = family
        self.available = tuple(available)
        super().__init__(f"Unknown report family: {family!r} (available: {', '.join(self.available)})")

    def __str__(self):
        # KeyError 默认会给消息加引号
        return self.args[0]


class MixedFamilyError(ReportPressError):
    """同一个集合里混入了不同族的元素。"""


class ThemeError(ReportPressError, ValueError):
    """主题 JSON 结构或字段类型不合法。"""
