#!/usr/bin/env python3
"""
测试结构化错误
"""

from ambari_client.utils.errors import (
    AmbariClientError,
    AmbariErrorCode,
    ConfigurationError,
    PayloadError,
)


def test_to_dict():
    error = PayloadError("组件缺少 component_name", field="component_name",
                         code=AmbariErrorCode.MISSING_FIELD, details={"index": 2})

    assert error.to_dict() == {
        "error": "组件缺少 component_name",
        "code": "MISSING_FIELD",
        "details": {"index": 2, "field": "component_name"},
    }


def test_to_dict_without_details():
    assert AmbariClientError("失败").to_dict() == {
        "error": "失败",
        "code": "UNKNOWN",
        "details": {},
    }


def test_str_includes_code_and_details():
    error = ConfigurationError("不支持的日志级别", setting="AMBARI_LOG_LEVEL", value="LOUD")

    assert str(error) == "[CONFIGURATION_ERROR] 不支持的日志级别 (setting=AMBARI_LOG_LEVEL, value=LOUD)"
    assert str(AmbariClientError("失败")) == "[UNKNOWN] 失败"
