"""
响应解析器模块

将 requests.Response 解析为 JSON 字典或类型化的响应模型
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import requests

from apiverve_gamecharacter.models import GameCharacterResponse

logger = logging.getLogger(__name__)


class BaseResponseParser(ABC):
    """响应解析器基类，定义解析 requests.Response 的接口。"""

    @abstractmethod
    def parse(self, client_instance: BaseClient, response: requests.Response) -> Any:  # noqa: F821
        """解析 requests.Response 对象并返回所需格式的数据。"""


class JSONResponseParser(BaseResponseParser):
    """解析响应为 JSON 数据"""

    def parse(self, client_instance: BaseClient, response: requests.Response) -> Any:  # noqa: F821
        logger.debug("Parsing response as JSON")
        return response.json()


class GameCharacterResponseParser(JSONResponseParser):
    """解析响应为 GameCharacterResponse 模型"""

    def parse(self, client_instance: BaseClient, response: requests.Response) -> GameCharacterResponse:  # noqa: F821
        payload = super().parse(client_instance, response)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        return GameCharacterResponse.from_dict(payload)
