"""
验证规则模块

定义单个字段的验证规则 ValidationRule，以及构造只读规则表的工具函数
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from apiverve_gamecharacter.constants import RULE_TYPE_STRING, RULE_TYPES
from apiverve_gamecharacter.exceptions import APIClientValidationError
from apiverve_gamecharacter.serializer import format_value

RuleTable = Mapping[str, "ValidationRule"]


@dataclass(frozen=True)
class ValidationRule:
    """
    单个参数的验证规则

    kind 决定哪些约束生效：
        - integer / number: min_value, max_value
        - string: min_length, max_length, format
        - enum 对所有类型生效，比较的是值的规范字符串形式

    属性:
        kind: 规则类型，string / integer / number / boolean
        required: 是否必填
        min_value: 数值下限
        max_value: 数值上限
        min_length: 字符串最小长度
        max_length: 字符串最大长度
        format: 字符串格式名称，见 formats 模块
        enum: 允许的取值（字符串形式），按声明顺序保存

    示例:
        >>> ValidationRule(kind="integer", required=True, min_value=1, max_value=20)
    """

    kind: str = RULE_TYPE_STRING
    required: bool = False
    min_value: float | None = None
    max_value: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    format: str | None = None
    enum: tuple[str, ...] = ()

    def __post_init__(self):
        if self.kind not in RULE_TYPES:
            raise APIClientValidationError(f"Unknown rule kind: {self.kind}. Must be one of: {sorted(RULE_TYPES)}")
        if isinstance(self.enum, str):
            raise APIClientValidationError(f"enum must be a sequence of values, got string {self.enum!r}")
        # 统一存为规范字符串的元组
        object.__setattr__(self, "enum", tuple(format_value(v) for v in self.enum or ()))


def freeze_rules(rules: Mapping[str, ValidationRule] | None = None) -> RuleTable:
    """
    构造只读规则表

    参数:
        rules: 外部参数名 -> ValidationRule 的映射

    返回:
        只读的规则表，保持传入顺序

    异常:
        APIClientValidationError: 当规则值不是 ValidationRule 时抛出
    """
    table = dict(rules or {})
    for name, rule in table.items():
        if not isinstance(rule, ValidationRule):
            raise APIClientValidationError(f"Rule for [{name}] must be a ValidationRule, got {type(rule).__name__}")
    return MappingProxyType(table)
