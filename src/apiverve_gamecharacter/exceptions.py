"""
客户端异常模块

定义所有 API 客户端相关的异常类，提供统一的错误处理机制
"""

from __future__ import annotations

import requests


class APIClientError(Exception):
    """
    API 客户端异常基类

    所有自定义异常的基类，用于统一捕获和处理客户端相关错误
    """


class APIClientHTTPError(APIClientError):
    """
    HTTP 错误响应异常

    当服务器返回 4xx 或 5xx 状态码时抛出此异常

    属性:
        response: 原始响应对象
        status_code: HTTP 状态码
    """

    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message)
        self.response = response
        self.status_code = response.status_code if response is not None else None


class APIClientNetworkError(APIClientError):
    """网络连接异常（连接失败、DNS 解析失败等）"""


class APIClientTimeoutError(APIClientError):
    """请求超时异常"""


class APIClientValidationError(APIClientError):
    """
    配置验证异常

    当客户端配置、请求类型定义等不合法时抛出此异常
    """


class APIClientRequestValidationError(APIClientError):
    """
    请求参数验证异常

    一次验证中所有违反规则的消息会被汇总到同一个异常中，不区分缺失、越界、格式或枚举错误

    参数:
        message: 错误描述信息，为 None 时由 errors 拼接生成
        errors: 按验证顺序排列的错误消息列表

    属性:
        errors: 错误消息列表

    示例:
        >>> error = APIClientRequestValidationError(errors=["Required parameter [race] is missing"])
        >>> str(error)
        'Validation failed: Required parameter [race] is missing'
    """

    def __init__(self, message: str | None = None, errors: list[str] | None = None):
        self.errors = list(errors or [])
        if message is None:
            message = "Validation failed: " + "; ".join(self.errors)
        super().__init__(message)


class APIClientResponseValidationError(APIClientError):
    """
    响应验证异常

    当响应内容不符合预期时抛出此异常

    属性:
        response: 原始响应对象
        validation_result: 验证失败的详细信息
    """

    def __init__(
        self,
        message: str,
        response: requests.Response | None = None,
        validation_result: dict | None = None,
    ):
        super().__init__(message)
        self.response = response
        self.validation_result = validation_result or {}
