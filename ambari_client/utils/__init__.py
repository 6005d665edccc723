"""
工具模块
"""

from .errors import AmbariClientError, AmbariErrorCode, ConfigurationError, PayloadError
from .parsers import parse_host_component_statuses, parse_host_components, parse_payload

__all__ = [
    "AmbariClientError",
    "AmbariErrorCode",
    "ConfigurationError",
    "PayloadError",
    "parse_host_component_statuses",
    "parse_host_components",
    "parse_payload",
]
