"""
Ambari 客户端 - 集群主机组件状态模型
"""

from .model import DISPLAY_FIELDS, HostComponentStatuses
from .utils import (
    AmbariClientError,
    AmbariErrorCode,
    ConfigurationError,
    PayloadError,
    parse_host_component_statuses,
    parse_host_components,
    parse_payload,
)

__version__ = "1.0.0"

__all__ = [
    # 模型
    "DISPLAY_FIELDS",
    "HostComponentStatuses",
    # 解析
    "parse_host_component_statuses",
    "parse_host_components",
    "parse_payload",
    # 错误
    "AmbariClientError",
    "AmbariErrorCode",
    "ConfigurationError",
    "PayloadError",
]
