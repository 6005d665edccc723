"""
数据模型 - Ambari API 响应对应的记录类型
"""

from .host_component_statuses import DISPLAY_FIELDS, HostComponentStatuses

__all__ = [
    "DISPLAY_FIELDS",
    "HostComponentStatuses",
]
