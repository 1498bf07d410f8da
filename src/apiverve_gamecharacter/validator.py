"""响应验证器模块

提供响应验证的基类和 API 状态验证器
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import requests

from apiverve_gamecharacter.constants import API_STATUS_OK
from apiverve_gamecharacter.exceptions import APIClientResponseValidationError

logger = logging.getLogger(__name__)


class BaseResponseValidator(ABC):
    """
    响应验证器基类

    用于验证解析后的响应是否符合预期，不符合时抛出异常
    """

    @abstractmethod
    def validate(
        self,
        client_instance: BaseClient,  # noqa: F821
        response: requests.Response,
        parsed_data: Any,
    ) -> None:
        """
        验证响应

        参数:
            client_instance: 调用此验证器的客户端实例
            response: HTTP 响应对象
            parsed_data: 解析后的响应数据

        异常:
            APIClientResponseValidationError: 当验证失败时抛出
        """


class APIStatusValidator(BaseResponseValidator):
    """
    API 状态验证器

    APIVerve 接口即使返回 200，也可能在响应体中携带 {"status": "error", "error": "..."}，
    此验证器要求 status 为 "ok"

    支持字典和带 status/error 属性的响应模型
    """

    def __init__(self, expected_status: str = API_STATUS_OK):
        self.expected_status = expected_status

    def validate(
        self,
        client_instance: BaseClient,  # noqa: F821
        response: requests.Response,
        parsed_data: Any,
    ) -> None:
        if isinstance(parsed_data, dict):
            status, error = parsed_data.get("status"), parsed_data.get("error")
        else:
            status, error = getattr(parsed_data, "status", None), getattr(parsed_data, "error", None)

        if status != self.expected_status:
            logger.warning(f"Unexpected API status: {status!r}, error: {error!r}")
            raise APIClientResponseValidationError(
                f"API returned status {status!r}: {error or 'unknown error'}",
                response=response,
                validation_result={"status": status, "error": error},
            )
