"""
客户端常量配置模块

定义 API 地址、默认配置、验证规则类型和格式名称等常量
"""

# HTTP 方法常量
HTTP_METHOD_GET = "GET"
HTTP_METHOD_HEAD = "HEAD"
HTTP_METHOD_OPTIONS = "OPTIONS"

# Game Character Generator API 配置
API_BASE_URL = "https://api.apiverve.com/v1"
API_ENDPOINT = "/gamecharacter"
API_KEY_HEADER = "x-api-key"
API_STATUS_OK = "ok"

# 默认配置
DEFAULT_TIMEOUT = 30  # 默认超时时间（秒）
DEFAULT_RETRIES = 3  # 默认重试次数

# 重试策略配置
RETRY_STATUS_FORCELIST = [429, 500, 502, 503, 504]  # 需要重试的 HTTP 状态码
RETRY_BACKOFF_FACTOR = 0.5  # 重试退避因子
RETRY_ALLOWED_METHODS = [HTTP_METHOD_GET, HTTP_METHOD_HEAD, HTTP_METHOD_OPTIONS]

# 连接池配置
POOL_CONNECTIONS = 10  # 连接池大小
POOL_MAXSIZE = 10  # 连接池最大连接数

DEFAULT_RETRY_CONFIG = {
    "total": DEFAULT_RETRIES,
    "backoff_factor": RETRY_BACKOFF_FACTOR,
    "status_forcelist": RETRY_STATUS_FORCELIST,
    "allowed_methods": RETRY_ALLOWED_METHODS,
    "raise_on_status": False,  # 重试耗尽后交给 raise_for_status 处理
}

DEFAULT_POOL_CONFIG = {
    "pool_connections": POOL_CONNECTIONS,
    "pool_maxsize": POOL_MAXSIZE,
}

# 验证规则类型
RULE_TYPE_STRING = "string"
RULE_TYPE_INTEGER = "integer"
RULE_TYPE_NUMBER = "number"
RULE_TYPE_BOOLEAN = "boolean"

RULE_TYPES = frozenset({RULE_TYPE_STRING, RULE_TYPE_INTEGER, RULE_TYPE_NUMBER, RULE_TYPE_BOOLEAN})
NUMERIC_RULE_TYPES = frozenset({RULE_TYPE_INTEGER, RULE_TYPE_NUMBER})

# 字符串格式名称
FORMAT_EMAIL = "email"
FORMAT_URL = "url"
FORMAT_IP = "ip"
FORMAT_DATE = "date"
FORMAT_HEX_COLOR = "hexColor"

# 响应格式化器状态码
RESPONSE_CODE_NON_HTTP_ERROR = -1  # 非HTTP错误代码（如网络超时、连接失败等）
RESPONSE_CODE_UNEXPECTED_TYPE = -2  # 未预期的响应/异常类型错误代码
