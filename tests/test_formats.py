"""
formats.py 模块的单元测试

测试用例:
- UT-FMT-001: email 格式
- UT-FMT-002: url 格式
- UT-FMT-003: ip 格式（IPv4 / 完整 IPv6）
- UT-FMT-004: date 格式（仅检查形态）
- UT-FMT-005: hexColor 格式
- UT-FMT-006: 未知格式视为无约束
"""

import pytest

from apiverve_gamecharacter.formats import FORMAT_NAMES, get_pattern, matches


class TestEmailFormat:
    """测试 email 格式"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["user@example.com", "a@b.c", "first.last@sub.domain.org"])
    def test_valid_email(self, value):
        """UT-FMT-001: 合法邮箱"""
        assert matches("email", value) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["not-an-email", "user@example", "us er@example.com", "@example.com", "a@@b.c"])
    def test_invalid_email(self, value):
        """UT-FMT-001: 非法邮箱"""
        assert matches("email", value) is False

    @pytest.mark.unit
    def test_trailing_newline_rejected(self):
        """边界测试：结尾换行符不能通过"""
        assert matches("email", "user@example.com\n") is False


class TestUrlFormat:
    """测试 url 格式"""

    @pytest.mark.unit
    def test_http_and_https(self):
        """UT-FMT-002: http 和 https 前缀"""
        assert matches("url", "https://x.io") is True
        assert matches("url", "http://localhost:8080/path") is True

    @pytest.mark.unit
    def test_other_schemes_rejected(self):
        """UT-FMT-002: 其他协议不通过"""
        assert matches("url", "ftp://x.io") is False
        assert matches("url", "https://") is False
        assert matches("url", "x.io") is False


class TestIpFormat:
    """测试 ip 格式"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        ["192.168.0.1", "255.255.255.255", "0.0.0.0", "01.02.03.04", "2001:0db8:85a3:0000:0000:8a2e:0370:7334"],
    )
    def test_valid_ip(self, value):
        """UT-FMT-003: 合法 IPv4 / IPv6"""
        assert matches("ip", value) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["256.1.1.1", "1.2.3", "1.2.3.4.5", "2001:db8::1", "abc"])
    def test_invalid_ip(self, value):
        """UT-FMT-003: 越界、段数不对或压缩形式的 IPv6 不通过"""
        assert matches("ip", value) is False


class TestDateFormat:
    """测试 date 格式"""

    @pytest.mark.unit
    def test_valid_date(self):
        """UT-FMT-004: YYYY-MM-DD"""
        assert matches("date", "2024-01-15") is True

    @pytest.mark.unit
    def test_no_calendar_check(self):
        """UT-FMT-004: 不检查日期是否真实存在"""
        assert matches("date", "2024-13-40") is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["15-01-2024", "2024/01/15", "2024-1-15", "２０２４-01-15"])
    def test_invalid_date(self, value):
        """UT-FMT-004: 顺序、分隔符、位数不对或非 ASCII 数字"""
        assert matches("date", value) is False


class TestHexColorFormat:
    """测试 hexColor 格式"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["#abc", "aabbcc", "#A1B2C3", "FFF"])
    def test_valid_hex_color(self, value):
        """UT-FMT-005: 3 位或 6 位，# 可选"""
        assert matches("hexColor", value) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["#abcd", "#ab", "#gggggg", "##abc"])
    def test_invalid_hex_color(self, value):
        """UT-FMT-005: 位数不对或非十六进制字符"""
        assert matches("hexColor", value) is False


class TestRegistry:
    """测试注册表"""

    @pytest.mark.unit
    def test_unknown_format_passes(self):
        """UT-FMT-006: 未知格式视为无约束"""
        assert matches("uuid", "definitely not a uuid") is True
        assert get_pattern("uuid") is None

    @pytest.mark.unit
    def test_registered_names(self):
        """验证注册的格式名称"""
        assert FORMAT_NAMES == {"email", "url", "ip", "date", "hexColor"}
