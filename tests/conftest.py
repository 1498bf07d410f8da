"""
通用测试 Fixture 定义

提供测试所需的请求类型、响应数据和客户端
"""

from dataclasses import dataclass

import pytest

from apiverve_gamecharacter.request import BaseRequest, RequestField
from apiverve_gamecharacter.rules import freeze_rules


@dataclass(frozen=True)
class ProfileRequest(BaseRequest):
    """覆盖全部字段类型的测试请求"""

    email: str = ""
    age: int = 0
    score: float = 0.0
    active: bool = False
    color: str = ""

    query_fields = (
        RequestField("email", "email"),
        RequestField("age", "age", int),
        RequestField("score", "score", float),
        RequestField("active", "active", bool),
        RequestField("color", "color"),
    )
    rules = freeze_rules()


@pytest.fixture
def profile_request_class():
    return ProfileRequest


@pytest.fixture
def character_payload():
    """标准成功响应体"""
    return {
        "status": "ok",
        "error": None,
        "data": {
            "name": "Aelar Moonwhisper",
            "race": {"name": "Elf", "traits": ["Darkvision", "Keen Senses"]},
            "class": {
                "name": "Mage",
                "description": "A scholarly magic-user",
                "primaryStat": "intelligence",
                "hitDie": "d6",
            },
            "background": "Sage",
            "personality": "Curious",
            "motivation": "Knowledge",
            "stats": {
                "strength": {"value": 8, "modifier": -1},
                "dexterity": {"value": 14, "modifier": 2},
                "constitution": {"value": 12, "modifier": 1},
                "intelligence": {"value": 17, "modifier": 3},
                "wisdom": {"value": 13, "modifier": 1},
                "charisma": {"value": 10, "modifier": 0},
            },
            "hp": 7,
        },
    }


@pytest.fixture
def error_payload():
    """API 业务错误响应体"""
    return {"status": "error", "error": "Invalid API key", "data": None}


@pytest.fixture
def game_character_client():
    """带测试 API Key 的客户端"""
    from apiverve_gamecharacter import GameCharacterClient

    client = GameCharacterClient(api_key="test-api-key")
    yield client
    client.close()
