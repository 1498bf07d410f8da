"""
字符串格式模式注册表

提供 email、url、ip、date、hexColor 五种格式的语法匹配，只检查字符形态，不做语义校验
（例如 "2024-13-40" 可以通过 date 格式）
"""

from __future__ import annotations

import re
from types import MappingProxyType

from apiverve_gamecharacter.constants import (
    FORMAT_DATE,
    FORMAT_EMAIL,
    FORMAT_HEX_COLOR,
    FORMAT_IP,
    FORMAT_URL,
)

# 非空白且非 @ 的字符
_WORD = r"[^\t\n\f\r @]+"
_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_HEXTET = r"[0-9a-fA-F]{1,4}"

# 使用 \A 和 \Z 锚定，避免 $ 匹配结尾换行符
_FORMAT_PATTERNS: MappingProxyType[str, re.Pattern] = MappingProxyType(
    {
        FORMAT_EMAIL: re.compile(rf"\A{_WORD}@{_WORD}\.{_WORD}\Z"),
        # 仅匹配前缀
        FORMAT_URL: re.compile(r"\Ahttps?://.+"),
        FORMAT_IP: re.compile(rf"\A(?:(?:{_OCTET}\.){{3}}{_OCTET}|(?:{_HEXTET}:){{7}}{_HEXTET})\Z"),
        FORMAT_DATE: re.compile(r"\A[0-9]{4}-[0-9]{2}-[0-9]{2}\Z"),
        FORMAT_HEX_COLOR: re.compile(r"\A#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})\Z"),
    }
)

FORMAT_NAMES = frozenset(_FORMAT_PATTERNS)


def get_pattern(format_name: str) -> re.Pattern | None:
    """返回格式对应的正则，未注册的格式返回 None"""
    return _FORMAT_PATTERNS.get(format_name)


def matches(format_name: str, value: str) -> bool:
    """
    检查字符串是否符合指定格式

    参数:
        format_name: 格式名称，如 "email"、"hexColor"
        value: 待检查的字符串

    返回:
        是否匹配。未知格式视为无约束，始终返回 True

    示例:
        >>> matches("email", "user@example.com")
        True
        >>> matches("hexColor", "#abcd")
        False
    """
    pattern = get_pattern(format_name)
    if pattern is None:
        return True
    return pattern.match(value) is not None
