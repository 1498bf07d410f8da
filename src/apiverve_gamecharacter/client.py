"""HTTP 客户端核心模块

提供基于 requests 的 API 客户端基类，以及 Game Character Generator API 客户端：
- 请求对象验证并序列化为查询参数
- 自动重试和连接池管理
- 响应解析、验证与统一格式化
- 完善的错误处理
"""

import logging
import threading
import time
import uuid
from collections.abc import Mapping
from typing import Any, TypeAlias

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from apiverve_gamecharacter.constants import (
    API_BASE_URL,
    API_ENDPOINT,
    API_KEY_HEADER,
    DEFAULT_POOL_CONFIG,
    DEFAULT_RETRIES,
    DEFAULT_RETRY_CONFIG,
    DEFAULT_TIMEOUT,
    HTTP_METHOD_GET,
    RESPONSE_CODE_NON_HTTP_ERROR,
    RESPONSE_CODE_UNEXPECTED_TYPE,
)
from apiverve_gamecharacter.exceptions import (
    APIClientError,
    APIClientHTTPError,
    APIClientNetworkError,
    APIClientRequestValidationError,
    APIClientTimeoutError,
    APIClientValidationError,
)
from apiverve_gamecharacter.parser import BaseResponseParser, GameCharacterResponseParser, JSONResponseParser
from apiverve_gamecharacter.request import BaseRequest, GameCharacterRequest
from apiverve_gamecharacter.serializer import BaseRequestSerializer, QueryParamsSerializer, to_query_params
from apiverve_gamecharacter.utils import sanitize_dict, sanitize_headers, sanitize_url
from apiverve_gamecharacter.validator import APIStatusValidator, BaseResponseValidator

# 类型别名定义
RequestData: TypeAlias = BaseRequest | Mapping[str, Any] | None
ResponseDict: TypeAlias = dict[str, Any]

logger = logging.getLogger(__name__)


class _RequestMethodDescriptor:
    """
    自定义描述符：实现 request 方法的"重载"效果

    - 实例调用（client.request()）：执行实例方法
    - 类调用（MyClient.request()）：创建临时实例执行，结束后关闭会话
    """

    def __init__(self, instance_method):
        self.instance_method = instance_method

    def __get__(self, instance, owner):
        if instance is not None:
            return self.instance_method.__get__(instance, owner)

        def class_method_wrapper(request_data: RequestData = None, **client_kwargs) -> ResponseDict:
            """
            类方法调用的包装函数

            参数:
                request_data: 请求对象或外部参数名映射
                **client_kwargs: 传递给客户端构造函数的参数（如 api_key）
            """
            with owner(**client_kwargs) as temp_instance:
                return temp_instance.request(request_data)

        return class_method_wrapper

    def __set_name__(self, owner, name):
        self.name = name


class BaseClient:
    """
    API 客户端基类

    类属性即默认配置，均可在实例化时通过同名参数覆盖

    类属性:
        base_url: API 基础 URL（必须在子类中设置）
        endpoint: 端点路径
        method: HTTP 方法，参数总是作为查询字符串发送
        verify: SSL 证书验证开关
        default_timeout: 默认超时时间（秒）
        enable_retry: 是否启用重试机制
        max_retries: 最大重试次数
        retry_config: 重试策略配置字典
        pool_config: 连接池配置字典
        default_headers: 默认请求头
        request_class: 请求对象类型，用于把映射转换为请求对象
        request_serializer_class: 请求序列化器类或实例
        response_parser_class: 响应解析器类或实例
        response_validator_class: 响应验证器类或实例
    """

    # ========== 基础配置 ==========
    base_url: str = ""
    endpoint: str = ""
    method: str = HTTP_METHOD_GET
    verify: bool = True

    # ========== 安全性配置 ==========
    # 日志中需要脱敏的请求头和 URL 参数
    sensitive_headers: set[str] = {API_KEY_HEADER, "Authorization", "Cookie"}
    sensitive_params: set[str] = {"api_key", "apikey", "key", "token"}
    enable_sanitization: bool = True

    # ========== 超时和重试配置 ==========
    default_timeout: int = DEFAULT_TIMEOUT
    enable_retry: bool = False
    max_retries: int = DEFAULT_RETRIES
    retry_config: dict[str, Any] = DEFAULT_RETRY_CONFIG
    pool_config: dict[str, Any] = DEFAULT_POOL_CONFIG

    default_headers: dict[str, str] = {}

    # ========== 可插拔组件配置 ==========
    request_class: type[BaseRequest] | None = None
    request_serializer_class: type[BaseRequestSerializer] | BaseRequestSerializer | None = QueryParamsSerializer
    response_parser_class: type[BaseResponseParser] | BaseResponseParser = JSONResponseParser
    response_validator_class: type[BaseResponseValidator] | BaseResponseValidator | None = None

    def __init__(
        self,
        url: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: int | None = None,
        verify: bool | None = None,
        enable_retry: bool | None = None,
        max_retries: int | None = None,
        retry_config: dict[str, Any] | None = None,
        pool_config: dict[str, Any] | None = None,
        request_serializer: BaseRequestSerializer | type[BaseRequestSerializer] | None = None,
        response_parser: BaseResponseParser | type[BaseResponseParser] | None = None,
        response_validator: BaseResponseValidator | type[BaseResponseValidator] | None = None,
        **kwargs,
    ):
        """
        初始化 API 客户端实例

        参数:
            url: 完整请求 URL，提供时忽略 base_url 和 endpoint
            headers: 额外请求头，与 default_headers 合并
            timeout: 请求超时时间（秒）
            verify: SSL 证书验证开关
            enable_retry: 是否启用重试
            max_retries: 最大重试次数
            retry_config: 重试策略配置字典（覆盖类级别配置）
            pool_config: 连接池配置字典（覆盖类级别配置）
            request_serializer: 请求序列化器类或实例
            response_parser: 响应解析器类或实例
            response_validator: 响应验证器类或实例
            **kwargs: 其他传递给 requests 的参数（如 proxies、cert）

        异常:
            APIClientValidationError: 当 base_url 未设置或组件配置无效时抛出
        """
        self.base_url = self.base_url.rstrip("/") if self.base_url else ""
        if not url and not self.base_url:
            raise APIClientValidationError("base_url or url must be provided as a class attribute.")
        self.url = url or self._build_url(self.endpoint)
        self.method = self.method.upper()

        self.timeout = timeout if timeout is not None else self.default_timeout
        self.verify = verify if verify is not None else self.verify
        self.enable_retry = enable_retry if enable_retry is not None else self.enable_retry
        self.max_retries = max_retries if max_retries is not None else self.max_retries

        self.retry_config = self._merge_config(self.retry_config, retry_config, max_retries_override=max_retries)
        self.pool_config = self._merge_config(self.pool_config, pool_config)

        self.request_serializer_instance = self._resolve_component(
            request_serializer, "request_serializer_class", BaseRequestSerializer, None
        )
        self.response_parser_instance = self._resolve_component(
            response_parser, "response_parser_class", BaseResponseParser, JSONResponseParser
        )
        self.response_validator_instance = self._resolve_component(
            response_validator, "response_validator_class", BaseResponseValidator, None
        )

        # 合并顺序：类级别默认请求头 -> 实例级别请求头
        self.session_headers = {**self.default_headers, **(headers or {})}
        self.default_request_kwargs = kwargs

        self.session = self._create_session()
        self._session_lock = threading.RLock()

    def _resolve_component(self, component, class_attr_name, base_class, fallback_class, **init_kwargs):
        """
        统一的组件解析方法

        参数:
            component: 传入的组件配置（类或实例）
            class_attr_name: 类属性名称
            base_class: 基类类型
            fallback_class: 配置无效时的降级类
            **init_kwargs: 实例化时的额外参数

        返回:
            组件实例或 None
        """
        source = component if component is not None else getattr(self, class_attr_name, fallback_class)

        if source is None:
            return None

        if isinstance(source, type) and issubclass(source, base_class):
            try:
                return source(**init_kwargs)
            except Exception as e:
                logger.error(f"Failed to instantiate {source.__name__}: {e}")
                raise APIClientValidationError(f"{class_attr_name} instantiation failed: {e}")

        if isinstance(source, base_class):
            return source

        if fallback_class:
            logger.warning(f"Invalid {class_attr_name}: {source}. Using {fallback_class.__name__}.")
            return fallback_class(**init_kwargs)

        raise APIClientValidationError(f"{class_attr_name} must be a {base_class.__name__} subclass or instance")

    def _merge_config(self, base_config: dict, override_config: dict | None, **extra_updates) -> dict:
        merged = {**base_config, **(override_config or {})}
        if max_retries_override := extra_updates.get("max_retries_override"):
            merged["total"] = max_retries_override
        return merged

    def _create_session(self) -> requests.Session:
        """创建 Session，启用重试时挂载带重试策略和连接池配置的适配器"""
        session = requests.Session()
        session.headers.update(self.session_headers)

        if self.enable_retry and self.max_retries > 0:
            retry_strategy = Retry(**self.retry_config)
            adapter = HTTPAdapter(max_retries=retry_strategy, **self.pool_config)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        return session

    def _build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}" if endpoint else self.base_url

    def generate_request_id(self) -> str:
        """生成全局唯一的请求 ID"""
        timestamp = int(time.time() * 1000)
        short_uuid = uuid.uuid4().hex[:8]
        return f"REQ-{timestamp}-{short_uuid}"

    def _coerce_request(self, request_data: RequestData) -> BaseRequest:
        """
        将请求数据转换为请求对象

        参数:
            request_data: None、请求对象或外部参数名映射

        异常:
            APIClientValidationError: 类型无效或未配置 request_class 时抛出
        """
        if isinstance(request_data, BaseRequest):
            return request_data

        if self.request_class is None:
            raise APIClientValidationError(f"{type(self).__name__}.request_class must be set to accept mappings")

        if request_data is None:
            return self.request_class()
        if isinstance(request_data, Mapping):
            return self.request_class.from_params(request_data)

        raise APIClientValidationError(
            f"request_data must be a {BaseRequest.__name__} or a mapping, got {type(request_data).__name__}"
        )

    def _validate_request(self, request_id: str, request: BaseRequest) -> dict[str, str]:
        """
        使用序列化器验证请求对象并转换为查询参数

        异常:
            APIClientRequestValidationError: 当验证失败时抛出
        """
        if self.request_serializer_instance is None:
            return to_query_params(request)

        try:
            return self.request_serializer_instance.validate(request)
        except APIClientRequestValidationError as e:
            logger.info(f"[{request_id}] Request validation failed: {e}")
            raise

    def _build_request_config(self, params: dict[str, str]) -> dict[str, Any]:
        request_kwargs = {
            **self.default_request_kwargs,
            "method": self.method,
            "url": self.url,
            "timeout": self.timeout,
            "verify": self.verify,
        }
        if params:
            request_kwargs["params"] = params
        return request_kwargs

    def _make_request(self, request_id: str, params: dict[str, str]) -> requests.Response:
        """
        执行 HTTP 请求，返回原始 Response 对象

        异常:
            APIClientTimeoutError: 请求超时
            APIClientHTTPError: HTTP 错误响应（4xx, 5xx）
            APIClientNetworkError: 网络连接错误
        """
        request_config = self._build_request_config(params)
        url = self.url

        safe_url = sanitize_url(url, self.sensitive_params) if self.enable_sanitization else url
        logger.info(f"[{request_id}] Starting {self.method} request to {safe_url}")

        if logger.isEnabledFor(logging.DEBUG):
            if self.enable_sanitization:
                safe_kwargs = sanitize_dict(request_config, self.sensitive_params)
                safe_kwargs["headers"] = sanitize_headers(dict(self.session.headers), self.sensitive_headers)
                logger.debug(f"[{request_id}] Request kwargs: {safe_kwargs}")
            else:
                logger.debug(f"[{request_id}] Request kwargs: {request_config}")

        try:
            with self._session_lock:
                response = self.session.request(**request_config)

            logger.info(f"[{request_id}] Received {response.status_code} response")
            response.raise_for_status()
            return response

        except requests.exceptions.Timeout:
            error = APIClientTimeoutError(f"Request to {safe_url} timed out after {self.timeout}s")
            logger.error(f"[{request_id}] Request failed: {error}")
            raise error
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            reason = e.response.reason if e.response is not None else "No response"
            error = APIClientHTTPError(f"HTTP {status_code}: {reason}", response=e.response)
            logger.error(f"[{request_id}] Request failed: {error}")
            raise error
        except requests.exceptions.RequestException as e:
            error = APIClientNetworkError(f"Request to {safe_url} failed: {e}")
            logger.error(f"[{request_id}] Request failed: {error}")
            raise error

    def _parse_response(self, request_id: str, response: requests.Response) -> tuple[Any, Exception | None]:
        """
        解析响应数据并执行验证

        返回:
            (解析后的数据, 解析或验证错误)
        """
        try:
            parsed_data = self.response_parser_instance.parse(self, response)
            if self.response_validator_instance:
                self.response_validator_instance.validate(self, response, parsed_data)
            return parsed_data, None
        except Exception as e:
            logger.error(f"[{request_id}] Response validation/parsing failed: {e}")
            return None, e

    def default_format_response(
        self,
        response_or_exception: requests.Response | APIClientError,
        parsed_data: Any = None,
        parse_error: Exception | None = None,
    ) -> ResponseDict:
        """
        将 HTTP 响应或异常格式化为 {result, code, message, data} 结构

        - 成功响应: result=True，code 为 HTTP 状态码
        - 解析或响应验证失败: result=False，code 为 HTTP 状态码
        - 客户端异常: result=False，code 为 HTTP 状态码或 RESPONSE_CODE_NON_HTTP_ERROR
        """
        formated_response: ResponseDict = {"result": False, "code": None, "message": "", "data": None}

        if isinstance(response_or_exception, requests.Response):
            formated_response["code"] = response_or_exception.status_code
            if parse_error:
                formated_response["message"] = f"Parsing failed: {parse_error}"
            else:
                formated_response["result"] = True
                formated_response["message"] = "Success"
                formated_response["data"] = parsed_data

        elif isinstance(response_or_exception, APIClientError):
            status_code = getattr(response_or_exception, "status_code", None)
            formated_response["code"] = status_code or RESPONSE_CODE_NON_HTTP_ERROR
            formated_response["message"] = str(response_or_exception)

        else:
            formated_response["code"] = RESPONSE_CODE_UNEXPECTED_TYPE
            formated_response["message"] = f"Unexpected response/exception type: {type(response_or_exception)}"

        return formated_response

    @_RequestMethodDescriptor
    def request(self, request_data: RequestData = None) -> ResponseDict:
        """
        执行请求的统一入口

        请求参数验证失败时直接抛出 APIClientRequestValidationError，不会发送请求；
        传输层错误会被格式化为 result=False 的响应字典

        使用示例:
            # 类方法调用（自动创建并关闭临时实例）
            result = GameCharacterClient.request({"race": "elf"}, api_key="...")

            # 实例调用
            with GameCharacterClient(api_key="...") as client:
                result = client.request(GameCharacterRequest(race="elf", character_class="mage"))
        """
        request_id = self.generate_request_id()
        request = self._coerce_request(request_data)
        params = self._validate_request(request_id, request)

        parsed_data: Any = None
        parse_error: Exception | None = None
        try:
            response = self._make_request(request_id, params)
            response_or_exception = response
            parsed_data, parse_error = self._parse_response(request_id, response)
        except APIClientError as e:
            response_or_exception = e

        return self.default_format_response(response_or_exception, parsed_data, parse_error)

    def close(self):
        """关闭 Session 会话，释放连接池资源"""
        if self.session:
            self.session.close()
            logger.debug("Session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class GameCharacterClient(BaseClient):
    """
    Game Character Generator API 客户端

    参数:
        api_key: APIVerve API Key，通过 x-api-key 请求头发送（必填）
        secure: False 时使用 http 协议

    使用示例:
        >>> client = GameCharacterClient(api_key="your-api-key")
        >>> result = client.request({"race": "elf", "class": "mage"})
        >>> result["data"].data.name
    """

    base_url = API_BASE_URL
    endpoint = API_ENDPOINT
    request_class = GameCharacterRequest
    response_parser_class = GameCharacterResponseParser
    response_validator_class = APIStatusValidator

    api_key: str = ""
    secure: bool = True

    def __init__(self, api_key: str | None = None, secure: bool | None = None, **kwargs):
        self.api_key = api_key or self.api_key
        if not self.api_key:
            raise APIClientValidationError("api_key must be provided.")

        self.secure = secure if secure is not None else self.secure
        if not self.secure and self.base_url.startswith("https://"):
            self.base_url = "http://" + self.base_url[len("https://") :]

        kwargs["headers"] = {API_KEY_HEADER: self.api_key, **(kwargs.get("headers") or {})}
        super().__init__(**kwargs)
