"""
apiverve-gamecharacter Game Character Generator API 客户端

提供声明式的请求参数验证与查询参数序列化，以及基于 requests 的 HTTP 客户端

主要组件:
    - GameCharacterClient / BaseClient: 客户端
    - GameCharacterRequest / BaseRequest / RequestField: 请求对象声明
    - ValidationRule / freeze_rules: 验证规则与规则表
    - validate / collect_errors: 验证引擎
    - to_query_params / QueryParamsSerializer: 参数序列化
    - matches: 字符串格式匹配

使用示例:
    >>> from apiverve_gamecharacter import GameCharacterClient, GameCharacterRequest
    >>>
    >>> request = GameCharacterRequest(race="elf")
    >>> request.validate()
    >>> request.to_query_params()
    {'race': 'elf'}
    >>> result = GameCharacterClient.request(request, api_key="your-api-key")
"""

# 核心客户端
from apiverve_gamecharacter.client import BaseClient, GameCharacterClient

# 异常类
from apiverve_gamecharacter.exceptions import (
    APIClientError,
    APIClientHTTPError,
    APIClientNetworkError,
    APIClientRequestValidationError,
    APIClientResponseValidationError,
    APIClientTimeoutError,
    APIClientValidationError,
)

# 格式匹配
from apiverve_gamecharacter.formats import FORMAT_NAMES, get_pattern, matches

# 请求对象与规则
from apiverve_gamecharacter.request import BaseRequest, GameCharacterRequest, RequestField
from apiverve_gamecharacter.rules import ValidationRule, freeze_rules

# 验证与序列化
from apiverve_gamecharacter.serializer import (
    BaseRequestSerializer,
    QueryParamsSerializer,
    format_value,
    to_query_params,
)
from apiverve_gamecharacter.validation import collect_errors, validate

# 响应
from apiverve_gamecharacter.models import (
    AbilityScore,
    ClassData,
    GameCharacterData,
    GameCharacterResponse,
    RaceData,
    StatsData,
)
from apiverve_gamecharacter.parser import BaseResponseParser, GameCharacterResponseParser, JSONResponseParser
from apiverve_gamecharacter.validator import APIStatusValidator, BaseResponseValidator

# 常量配置
from apiverve_gamecharacter.constants import (
    API_BASE_URL,
    API_ENDPOINT,
    API_KEY_HEADER,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    FORMAT_DATE,
    FORMAT_EMAIL,
    FORMAT_HEX_COLOR,
    FORMAT_IP,
    FORMAT_URL,
    RULE_TYPE_BOOLEAN,
    RULE_TYPE_INTEGER,
    RULE_TYPE_NUMBER,
    RULE_TYPE_STRING,
)

__all__ = [
    # 客户端
    "BaseClient",
    "GameCharacterClient",
    # 异常
    "APIClientError",
    "APIClientHTTPError",
    "APIClientNetworkError",
    "APIClientTimeoutError",
    "APIClientValidationError",
    "APIClientRequestValidationError",
    "APIClientResponseValidationError",
    # 格式
    "FORMAT_NAMES",
    "get_pattern",
    "matches",
    # 请求与规则
    "BaseRequest",
    "GameCharacterRequest",
    "RequestField",
    "ValidationRule",
    "freeze_rules",
    # 验证与序列化
    "validate",
    "collect_errors",
    "format_value",
    "to_query_params",
    "BaseRequestSerializer",
    "QueryParamsSerializer",
    # 响应
    "AbilityScore",
    "ClassData",
    "GameCharacterData",
    "GameCharacterResponse",
    "RaceData",
    "StatsData",
    "BaseResponseParser",
    "JSONResponseParser",
    "GameCharacterResponseParser",
    "BaseResponseValidator",
    "APIStatusValidator",
    # 常量
    "API_BASE_URL",
    "API_ENDPOINT",
    "API_KEY_HEADER",
    "DEFAULT_TIMEOUT",
    "DEFAULT_RETRIES",
    "FORMAT_EMAIL",
    "FORMAT_URL",
    "FORMAT_IP",
    "FORMAT_DATE",
    "FORMAT_HEX_COLOR",
    "RULE_TYPE_STRING",
    "RULE_TYPE_INTEGER",
    "RULE_TYPE_NUMBER",
    "RULE_TYPE_BOOLEAN",
]

__version__ = "0.1.0"
