"""工具函数模块

日志输出前对 API Key 等敏感信息脱敏
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from apiverve_gamecharacter.constants import API_KEY_HEADER

DEFAULT_SENSITIVE_HEADERS = {
    API_KEY_HEADER,
    "Authorization",
    "Cookie",
}

DEFAULT_SENSITIVE_PARAMS = {
    "api_key",
    "apikey",
    "key",
    "token",
    "access_token",
}


def _lower_set(keys: set[str]) -> set[str]:
    return {k.lower() for k in keys}


def sanitize_headers(
    headers: dict[str, str],
    sensitive_keys: set[str] | None = None,
    mask: str = "***",
) -> dict[str, str]:
    """
    脱敏请求头，键名不区分大小写

    示例:
        >>> sanitize_headers({"x-api-key": "abc", "Accept": "application/json"})
        {"x-api-key": "***", "Accept": "application/json"}
    """
    sensitive = _lower_set(DEFAULT_SENSITIVE_HEADERS if sensitive_keys is None else sensitive_keys)
    return {k: mask if k.lower() in sensitive else v for k, v in headers.items()}


def sanitize_url(
    url: str,
    sensitive_params: set[str] | None = None,
    mask: str = "***",
) -> str:
    """
    脱敏 URL 查询字符串中的敏感参数

    示例:
        >>> sanitize_url("https://api.apiverve.com/v1/gamecharacter?race=elf&api_key=abc")
        "https://api.apiverve.com/v1/gamecharacter?race=elf&api_key=%2A%2A%2A"
    """
    parsed = urlparse(url)
    if not parsed.query:
        return url

    sensitive = _lower_set(DEFAULT_SENSITIVE_PARAMS if sensitive_params is None else sensitive_params)
    params = parse_qs(parsed.query, keep_blank_values=True)
    sanitized = {key: [mask] * len(values) if key.lower() in sensitive else values for key, values in params.items()}
    return urlunparse(parsed._replace(query=urlencode(sanitized, doseq=True)))


def sanitize_dict(
    data: dict[str, Any],
    sensitive_keys: set[str] | None = None,
    mask: str = "***",
) -> dict[str, Any]:
    """
    递归脱敏字典中的敏感字段，返回新字典

    用于在 DEBUG 日志中输出请求参数（包括 headers、params）
    """
    if sensitive_keys is None:
        sensitive_keys = DEFAULT_SENSITIVE_HEADERS | DEFAULT_SENSITIVE_PARAMS
    sensitive = _lower_set(sensitive_keys)

    result = {}
    for key, value in data.items():
        if isinstance(key, str) and key.lower() in sensitive:
            result[key] = mask
        elif isinstance(value, dict):
            result[key] = sanitize_dict(value, sensitive_keys, mask)
        else:
            result[key] = value
    return result
