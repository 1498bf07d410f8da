"""
请求参数验证引擎

按请求类型声明的字段顺序逐个检查规则表中的约束，汇总所有错误后一次性返回，
不会在第一个失败的字段处停止。
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any

from apiverve_gamecharacter.constants import NUMERIC_RULE_TYPES, RULE_TYPE_STRING
from apiverve_gamecharacter.exceptions import APIClientRequestValidationError, APIClientValidationError
from apiverve_gamecharacter.formats import get_pattern
from apiverve_gamecharacter.rules import RuleTable, ValidationRule
from apiverve_gamecharacter.serializer import format_value

if TYPE_CHECKING:
    from apiverve_gamecharacter.request import BaseRequest


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    return value


def _check_field(name: str, value: Any, rule: ValidationRule) -> list[str]:
    """检查单个非空字段，返回该字段的全部错误消息"""
    errors = []

    if rule.kind in NUMERIC_RULE_TYPES:
        number = _as_number(value)
        if number is not None:
            if rule.min_value is not None and number < rule.min_value:
                errors.append(f"Parameter [{name}] must be at least {format_value(rule.min_value)}")
            if rule.max_value is not None and number > rule.max_value:
                errors.append(f"Parameter [{name}] must be at most {format_value(rule.max_value)}")

    elif rule.kind == RULE_TYPE_STRING and isinstance(value, str):
        # 长度按 UTF-8 字节数计算
        length = len(value.encode("utf-8"))
        if rule.min_length is not None and length < rule.min_length:
            errors.append(f"Parameter [{name}] must be at least {rule.min_length} characters")
        if rule.max_length is not None and length > rule.max_length:
            errors.append(f"Parameter [{name}] must be at most {rule.max_length} characters")
        if rule.format:
            pattern = get_pattern(rule.format)
            if pattern is not None and pattern.match(value) is None:
                errors.append(f"Parameter [{name}] must be a valid {rule.format}")

    if rule.enum and format_value(value) not in rule.enum:
        errors.append(f"Parameter [{name}] must be one of: {', '.join(rule.enum)}")

    return errors


def collect_errors(request: BaseRequest, rules: RuleTable | None = None) -> list[str]:
    """
    收集请求对象违反的全部规则

    参数:
        request: 请求对象
        rules: 规则表，为 None 时使用请求类型自带的 rules

    返回:
        按字段声明顺序排列的错误消息列表，全部通过时为空列表

    执行步骤:
        1. 按声明顺序遍历字段，规则表中没有对应键的字段直接跳过
        2. 必填字段为空时只记录缺失消息，不再做其他检查
        3. 可选字段为空时跳过所有检查
        4. 按规则类型检查数值范围或字符串长度、格式
        5. 检查枚举取值
    """
    if request is None:
        raise APIClientValidationError("request must not be None")

    if rules is None:
        rules = request.rules
    if not rules:
        return []

    errors = []
    for request_field, value in request.iter_fields():
        name = request_field.external_name
        rule = rules.get(name)
        if rule is None:
            continue

        if request_field.is_empty(value):
            if rule.required:
                errors.append(f"Required parameter [{name}] is missing")
            continue

        errors.extend(_check_field(name, value, rule))

    return errors


def validate(request: BaseRequest, rules: RuleTable | None = None) -> None:
    """
    验证请求对象，存在任意错误时抛出汇总异常

    异常:
        APIClientRequestValidationError: errors 属性包含全部错误消息
    """
    errors = collect_errors(request, rules)
    if errors:
        raise APIClientRequestValidationError(errors=errors)
