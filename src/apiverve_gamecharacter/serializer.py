"""
请求序列化器模块

将请求对象转换为查询参数字典，并提供在发送请求前执行"验证 + 转换"的序列化器组件

使用示例:
    # 方式1: 直接转换
    params = to_query_params(GameCharacterRequest(race="elf"))
    # {"race": "elf"}

    # 方式2: 自定义序列化器，在客户端发送请求前调用
    class LowerCaseSerializer(QueryParamsSerializer):
        def validate(self, request):
            params = super().validate(request)
            return {k: v.lower() for k, v in params.items()}

    class MyClient(GameCharacterClient):
        request_serializer_class = LowerCaseSerializer
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from apiverve_gamecharacter.request import BaseRequest
    from apiverve_gamecharacter.rules import RuleTable


def format_value(value: Any) -> str:
    """
    将字段值转换为规范字符串

    - bool: "true" / "false"
    - float: 整数值不带小数部分（3.0 -> "3"），其余使用最短表示
    - 其他: str(value)
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def to_query_params(request: BaseRequest | None) -> dict[str, str]:
    """
    将请求对象转换为查询参数字典

    参数:
        request: 请求对象，为 None 时返回空字典

    返回:
        外部参数名 -> 字符串值，空值字段不会出现在结果中
    """
    params: dict[str, str] = {}
    if request is None:
        return params

    for request_field, value in request.iter_fields():
        if request_field.is_empty(value):
            continue
        params[request_field.external_name] = format_value(value)
    return params


class BaseRequestSerializer(ABC):
    """
    请求序列化器基类

    用于在发送 HTTP 请求前对请求对象进行验证并转换为查询参数

    子类需要实现 validate 方法
    """

    @abstractmethod
    def validate(self, request: BaseRequest) -> dict[str, str]:
        """
        验证请求对象并返回查询参数

        参数:
            request: 请求对象

        返回:
            验证通过后的查询参数字典

        异常:
            APIClientRequestValidationError: 当验证失败时抛出
        """


class QueryParamsSerializer(BaseRequestSerializer):
    """
    默认序列化器：按规则表验证后转换为查询参数

    参数:
        rules: 覆盖请求类型自带规则表的规则表（可选）
    """

    def __init__(self, rules: RuleTable | None = None):
        self.rules = rules

    def validate(self, request: BaseRequest) -> dict[str, str]:
        from apiverve_gamecharacter.validation import validate

        validate(request, self.rules)
        return to_query_params(request)
