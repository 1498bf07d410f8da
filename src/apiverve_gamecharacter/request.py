"""
请求对象模块

请求类型通过 query_fields 显式声明 (属性名, 外部参数名, 类型)，不依赖运行时反射。
外部参数名同时用作查询参数名和规则表的键。

可选字段使用类型的空值（""、0、0.0、False）表示未提供，与显式传入空值无法区分。

使用示例:
    @dataclass(frozen=True)
    class SearchRequest(BaseRequest):
        keyword: str = ""
        page: int = 0

        query_fields = (
            RequestField("keyword", "q"),
            RequestField("page", "page", int),
        )
        rules = freeze_rules({
            "q": ValidationRule(required=True, max_length=64),
            "page": ValidationRule(kind="integer", min_value=1),
        })
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, ClassVar

from apiverve_gamecharacter.constants import RULE_TYPE_STRING
from apiverve_gamecharacter.exceptions import APIClientValidationError
from apiverve_gamecharacter.rules import RuleTable, ValidationRule, freeze_rules
from apiverve_gamecharacter.serializer import to_query_params
from apiverve_gamecharacter.validation import validate

# 各类型表示"未提供"的空值
EMPTY_SENTINELS: dict[type, Any] = {
    str: "",
    int: 0,
    float: 0.0,
    bool: False,
}


def _parse_bool(text: str) -> bool:
    normalized = text.strip().lower()
    if normalized not in ("true", "false"):
        raise ValueError(f"expected true or false, got {text!r}")
    return normalized == "true"


_PARSERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: _parse_bool,
}


@dataclass(frozen=True)
class RequestField:
    """
    请求字段声明

    属性:
        name: 请求对象上的属性名
        external_name: 外部参数名（查询参数名、规则表键）
        type: 字段类型，str / int / float / bool
        accessor: 读取字段值的函数，在定义时生成
    """

    name: str
    external_name: str
    type: type = str
    accessor: Callable[[Any], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.type not in EMPTY_SENTINELS:
            raise APIClientValidationError(
                f"Field [{self.external_name}] has unsupported type {self.type.__name__}. "
                f"Must be one of: {[t.__name__ for t in EMPTY_SENTINELS]}"
            )
        object.__setattr__(self, "accessor", attrgetter(self.name))

    @property
    def empty(self) -> Any:
        return EMPTY_SENTINELS[self.type]

    def get(self, request: Any) -> Any:
        return self.accessor(request)

    def is_empty(self, value: Any) -> bool:
        """值为 None 或等于类型空值时视为未提供"""
        if value is None:
            return True
        # bool 是 int 的子类，False == 0，需按声明类型严格比较
        if self.type is not bool and isinstance(value, bool):
            return False
        # -0.0 与 0.0 相等，但符号位不同，不视为空值
        if isinstance(value, float) and value == 0.0:
            return math.copysign(1.0, value) > 0
        return value == self.empty

    def parse(self, text: Any) -> Any:
        """将查询参数字符串还原为字段类型"""
        if not isinstance(text, str):
            return text
        try:
            return _PARSERS[self.type](text)
        except ValueError as e:
            raise APIClientValidationError(
                f"Parameter [{self.external_name}] is not a valid {self.type.__name__}: {e}"
            ) from e


class BaseRequest:
    """
    请求对象基类

    子类通常是 frozen dataclass，并声明:
        query_fields: 有序的 RequestField 元组
        rules: 只读规则表，键为外部参数名
    """

    query_fields: ClassVar[tuple[RequestField, ...]] = ()
    rules: ClassVar[RuleTable] = freeze_rules()

    def iter_fields(self) -> Iterator[tuple[RequestField, Any]]:
        """按声明顺序遍历 (字段, 当前值)"""
        for request_field in self.query_fields:
            yield request_field, request_field.get(self)

    @classmethod
    def get_field(cls, external_name: str) -> RequestField | None:
        for request_field in cls.query_fields:
            if request_field.external_name == external_name:
                return request_field
        return None

    @classmethod
    def from_params(cls, params: Mapping[str, Any] | None = None):
        """
        由外部参数名映射构造请求对象

        字符串值会按字段类型解析，因此 to_query_params 的结果可以还原为等价的请求对象

        参数:
            params: 外部参数名 -> 值

        异常:
            APIClientValidationError: 存在未声明的参数名或值无法解析时抛出
        """
        kwargs = {}
        for key, value in (params or {}).items():
            request_field = cls.get_field(key)
            if request_field is None:
                known = [f.external_name for f in cls.query_fields]
                raise APIClientValidationError(f"Unknown parameter [{key}] for {cls.__name__}. Known: {known}")
            kwargs[request_field.name] = request_field.parse(value)
        return cls(**kwargs)

    def validate(self) -> None:
        """使用本类型的规则表验证，失败时抛出 APIClientRequestValidationError"""
        validate(self, self.rules)

    def to_query_params(self) -> dict[str, str]:
        return to_query_params(self)


@dataclass(frozen=True)
class GameCharacterRequest(BaseRequest):
    """
    Game Character Generator API 请求参数

    属性:
        race: 角色种族，如 Human, Elf, Dwarf, Halfling, Orc, Gnome, Tiefling, Dragonborn, Half-Elf, Goblin
        character_class: 角色职业（外部参数名 class），如 Warrior, Mage, Rogue, Cleric, Ranger, Paladin,
            Barbarian, Bard, Druid, Monk, Warlock, Necromancer
    """

    race: str = ""
    character_class: str = ""

    query_fields = (
        RequestField("race", "race"),
        RequestField("character_class", "class"),
    )
    rules = freeze_rules(
        {
            "race": ValidationRule(kind=RULE_TYPE_STRING, required=False),
            "class": ValidationRule(kind=RULE_TYPE_STRING, required=False),
        }
    )
