"""
客户端错误类型定义

提供结构化的错误处理机制。状态记录本身不会抛错,
错误只来自响应映射层、配置和 CLI 文件读取。
"""

from enum import Enum
from typing import Dict, Any, Optional


class AmbariErrorCode(Enum):
    """客户端错误码枚举"""

    # 响应数据类错误
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    MISSING_FIELD = "MISSING_FIELD"
    DUPLICATE_COMPONENT = "DUPLICATE_COMPONENT"

    # 文件类错误
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # 配置类错误
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # 未知错误
    UNKNOWN = "UNKNOWN"


class AmbariClientError(Exception):
    """客户端异常基类

    Attributes:
        message: 错误消息
        code: 错误码
        details: 额外的错误详情
    """

    def __init__(
        self,
        message: str,
        code: AmbariErrorCode = AmbariErrorCode.UNKNOWN,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "error": self.message,
            "code": self.code.value,
            "details": self.details
        }

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"[{self.code.value}] {self.message} ({details_str})"
        return f"[{self.code.value}] {self.message}"


class PayloadError(AmbariClientError):
    """响应数据映射错误

    用于 API 响应结构不符合预期的情况
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: AmbariErrorCode = AmbariErrorCode.INVALID_PAYLOAD,
        details: Optional[Dict[str, Any]] = None
    ):
        """初始化映射错误

        Args:
            message: 错误描述
            field: 出错的字段名
            code: 错误码 (默认 INVALID_PAYLOAD)
            details: 额外详情
        """
        all_details = details or {}
        if field:
            all_details["field"] = field

        super().__init__(message, code, all_details)


class ConfigurationError(AmbariClientError):
    """配置错误"""

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        value: Optional[Any] = None
    ):
        details: Dict[str, Any] = {}
        if setting:
            details["setting"] = setting
        if value is not None:
            details["value"] = str(value)

        super().__init__(message, AmbariErrorCode.CONFIGURATION_ERROR, details)
