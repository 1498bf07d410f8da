"""
client.py 模块的基础单元测试

主要测试客户端的核心功能:
- 客户端初始化与配置覆盖
- 组件解析
- 请求数据转换
- 资源清理
"""

import pytest
import requests
from unittest.mock import Mock

from apiverve_gamecharacter import GameCharacterClient, GameCharacterRequest
from apiverve_gamecharacter.client import BaseClient
from apiverve_gamecharacter.exceptions import APIClientValidationError
from apiverve_gamecharacter.parser import GameCharacterResponseParser, JSONResponseParser
from apiverve_gamecharacter.serializer import QueryParamsSerializer
from apiverve_gamecharacter.validator import APIStatusValidator


class MyTestClient(BaseClient):
    """测试用的客户端子类"""

    base_url = "https://api.example.com/"
    endpoint = "/characters"


class TestBaseClientInitialization:
    """测试 BaseClient 初始化"""

    @pytest.mark.unit
    def test_basic_initialization(self):
        """测试基本初始化"""
        client = MyTestClient()

        assert client.base_url == "https://api.example.com"
        assert client.url == "https://api.example.com/characters"
        assert client.method == "GET"
        assert isinstance(client.session, requests.Session)

    @pytest.mark.unit
    def test_missing_base_url(self):
        """未设置 base_url 时报错"""
        with pytest.raises(APIClientValidationError, match="base_url or url must be provided"):
            BaseClient()

    @pytest.mark.unit
    def test_overrides(self):
        """实例参数覆盖类属性"""
        client = MyTestClient(timeout=5, verify=False, headers={"Accept": "application/json"})

        assert client.timeout == 5
        assert client.verify is False
        assert client.session.headers["Accept"] == "application/json"

    @pytest.mark.unit
    def test_retry_adapter_mounted(self):
        """启用重试时挂载带重试策略的适配器"""
        client = MyTestClient(enable_retry=True, max_retries=5)

        adapter = client.session.get_adapter("https://api.example.com")
        assert adapter.max_retries.total == 5

    @pytest.mark.unit
    def test_default_components(self):
        """默认组件"""
        client = MyTestClient()

        assert isinstance(client.request_serializer_instance, QueryParamsSerializer)
        assert isinstance(client.response_parser_instance, JSONResponseParser)
        assert client.response_validator_instance is None

    @pytest.mark.unit
    def test_invalid_parser_falls_back(self):
        """无效的解析器配置降级为 JSONResponseParser"""
        client = MyTestClient(response_parser="not-a-parser")

        assert type(client.response_parser_instance) is JSONResponseParser

    @pytest.mark.unit
    def test_invalid_serializer_raises(self):
        """无效的序列化器配置报错"""
        with pytest.raises(APIClientValidationError, match="request_serializer_class must be"):
            MyTestClient(request_serializer=object())


class TestGameCharacterClientInitialization:
    """测试 GameCharacterClient 初始化"""

    @pytest.mark.unit
    def test_api_key_header(self, game_character_client):
        """API Key 通过 x-api-key 请求头发送"""
        assert game_character_client.session.headers["x-api-key"] == "test-api-key"
        assert game_character_client.url == "https://api.apiverve.com/v1/gamecharacter"

    @pytest.mark.unit
    def test_components(self, game_character_client):
        assert isinstance(game_character_client.response_parser_instance, GameCharacterResponseParser)
        assert isinstance(game_character_client.response_validator_instance, APIStatusValidator)

    @pytest.mark.unit
    def test_api_key_required(self):
        """缺少 API Key 时报错"""
        with pytest.raises(APIClientValidationError, match="api_key must be provided"):
            GameCharacterClient()

    @pytest.mark.unit
    def test_insecure(self):
        """secure=False 时使用 http"""
        client = GameCharacterClient(api_key="k", secure=False)

        assert client.url == "http://api.apiverve.com/v1/gamecharacter"
        assert GameCharacterClient.base_url == "https://api.apiverve.com/v1"


class TestCoerceRequest:
    """测试请求数据转换"""

    @pytest.mark.unit
    def test_request_object_passthrough(self, game_character_client):
        request = GameCharacterRequest(race="Elf")

        assert game_character_client._coerce_request(request) is request

    @pytest.mark.unit
    def test_mapping(self, game_character_client):
        """映射按外部参数名构造请求对象"""
        request = game_character_client._coerce_request({"class": "Rogue"})

        assert request == GameCharacterRequest(character_class="Rogue")

    @pytest.mark.unit
    def test_none(self, game_character_client):
        assert game_character_client._coerce_request(None) == GameCharacterRequest()

    @pytest.mark.unit
    def test_invalid_type(self, game_character_client):
        with pytest.raises(APIClientValidationError, match="request_data must be"):
            game_character_client._coerce_request(["race", "Elf"])

    @pytest.mark.unit
    def test_mapping_without_request_class(self):
        """未配置 request_class 时不接受映射"""
        with pytest.raises(APIClientValidationError, match="request_class must be set"):
            MyTestClient()._coerce_request({"race": "Elf"})


class TestResourceCleanup:
    """测试资源清理"""

    @pytest.mark.unit
    def test_context_manager_closes_session(self):
        client = MyTestClient()
        client.session = Mock()

        with client:
            pass

        client.session.close.assert_called_once()
