"""
主机组件状态模型

对应 Ambari API 响应中 HostRoles 的状态字段。字段均为可选字符串,
不对取值做任何校验 (Ambari 的状态集合由服务端决定)。
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# 显示顺序是对外约定, 与字段声明顺序无关
DISPLAY_FIELDS: Tuple[str, ...] = (
    "desired_admin_state",
    "desired_state",
    "maintenance_state",
    "state",
    "upgrade_state",
)


class HostComponentStatuses(BaseModel):
    """单个主机组件的状态记录

    新建实例的所有字段均为 None, 通过属性直接读写:

        status = HostComponentStatuses()
        status.state = "STARTED"
        status.state  # "STARTED"

    赋值时不做校验, 值原样保存; None (未设置) 与 "" (设置为空) 保持区分。
    """

    model_config = ConfigDict(extra="ignore")

    desired_admin_state: Optional[str] = Field(default=None, description="管理员期望的 admin 状态")
    desired_state: Optional[str] = Field(default=None, description="编排层期望到达的运行状态")
    maintenance_state: Optional[str] = Field(default=None, description="维护模式状态 (如 ON/OFF)")
    state: Optional[str] = Field(default=None, description="当前观测到的运行状态")
    upgrade_state: Optional[str] = Field(default=None, description="升级操作的进度状态")

    @classmethod
    def from_host_roles(cls, host_roles: Mapping[str, Any]) -> "HostComponentStatuses":
        """从 HostRoles 字段集构建记录

        未知字段 (如 component_name, host_name) 被忽略, 缺失字段保持 None。
        """
        return cls.model_validate(dict(host_roles))

    def to_dict(self) -> Dict[str, Optional[str]]:
        """按显示顺序返回字段字典 (键为 API 字段名)"""
        return {name: getattr(self, name) for name in DISPLAY_FIELDS}

    def to_display_string(self) -> str:
        """调试用字符串, 不用于序列化"""
        body = ", ".join(f"{name}='{getattr(self, name)}'" for name in DISPLAY_FIELDS)
        return f"HostComponentStatuses{{{body}}}"

    def __str__(self) -> str:
        return self.to_display_string()
