"""
Ambari 响应解析工具

将已解码的 API 响应 (dict) 映射为 HostComponentStatuses 记录。

单个组件:
    {"HostRoles": {"component_name": "DATANODE", "state": "STARTED", ...}}

组件列表:
    {"items": [{"HostRoles": {...}}, ...]}
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..model import HostComponentStatuses
from .errors import AmbariErrorCode, PayloadError

logger = logging.getLogger(__name__)

HOST_ROLES_KEY = "HostRoles"
ITEMS_KEY = "items"


def _host_roles_of(payload: Any) -> Mapping[str, Any]:
    """取出 HostRoles 字段集, 兼容不带外层包装的情况"""
    if not isinstance(payload, Mapping):
        raise PayloadError(
            "响应必须是对象",
            details={"type": type(payload).__name__}
        )

    if HOST_ROLES_KEY not in payload:
        return payload

    host_roles = payload[HOST_ROLES_KEY]
    if not isinstance(host_roles, Mapping):
        raise PayloadError(
            "HostRoles 必须是对象",
            field=HOST_ROLES_KEY,
            details={"type": type(host_roles).__name__}
        )
    return host_roles


def _component_name_of(host_roles: Mapping[str, Any], index: Optional[int] = None) -> Optional[str]:
    """取出 component_name, 缺失或为空时返回 None"""
    component_name = host_roles.get("component_name")
    if component_name is None or component_name == "":
        return None

    if not isinstance(component_name, str):
        details: Dict[str, Any] = {"type": type(component_name).__name__}
        if index is not None:
            details["index"] = index
        raise PayloadError(
            "component_name 必须是字符串",
            field="component_name",
            details=details
        )
    return component_name


def parse_host_component_statuses(payload: Any) -> HostComponentStatuses:
    """解析单个主机组件的状态

    Args:
        payload: {"HostRoles": {...}} 或直接是字段字典

    Returns:
        HostComponentStatuses, 缺失字段为 None

    Raises:
        PayloadError: 结构不是对象, 或字段值既不是字符串也不是 null
    """
    host_roles = _host_roles_of(payload)

    try:
        return HostComponentStatuses.from_host_roles(host_roles)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise PayloadError(
            "状态字段必须是字符串",
            field=field or None,
            details={"error": first.get("msg", str(e))}
        ) from e


def parse_host_components(payload: Any) -> Dict[str, HostComponentStatuses]:
    """解析组件列表响应

    返回以 component_name 为键的字典; 响应涉及多个主机, 或同名组件
    出现多次时, 键为 "host_name/component_name" (缺少 host_name 记为 "-")。

    Raises:
        PayloadError: items 不是列表, 某项缺少 component_name,
            或同一主机上的组件重复
    """
    if not isinstance(payload, Mapping):
        raise PayloadError(
            "响应必须是对象",
            details={"type": type(payload).__name__}
        )

    items = payload.get(ITEMS_KEY) or []
    if not isinstance(items, list):
        raise PayloadError(
            "items 必须是列表",
            field=ITEMS_KEY,
            details={"type": type(items).__name__}
        )

    entries: List[Tuple[Optional[str], str, Mapping[str, Any]]] = []
    for index, item in enumerate(items):
        host_roles = _host_roles_of(item)
        component_name = _component_name_of(host_roles, index=index)
        if component_name is None:
            raise PayloadError(
                "组件缺少 component_name",
                field="component_name",
                code=AmbariErrorCode.MISSING_FIELD,
                details={"index": index}
            )
        entries.append((host_roles.get("host_name"), component_name, host_roles))

    plain_keys = [component_name for _, component_name, _ in entries]
    multi_host = len({host for host, _, _ in entries}) > 1
    use_host_keys = multi_host or len(set(plain_keys)) != len(plain_keys)

    components: Dict[str, HostComponentStatuses] = {}
    for index, (host_name, component_name, host_roles) in enumerate(entries):
        key = f"{host_name or '-'}/{component_name}" if use_host_keys else component_name
        if key in components:
            raise PayloadError(
                "组件重复",
                field="component_name",
                code=AmbariErrorCode.DUPLICATE_COMPONENT,
                details={"index": index, "key": key}
            )
        components[key] = parse_host_component_statuses(host_roles)

    logger.debug("解析到 %d 个主机组件", len(components))
    return components


def parse_payload(payload: Any) -> Dict[str, HostComponentStatuses]:
    """自动识别单个组件或组件列表响应

    单个组件时键为 component_name (缺失时为 "-")。
    """
    if isinstance(payload, Mapping) and ITEMS_KEY in payload:
        return parse_host_components(payload)

    host_roles = _host_roles_of(payload)
    name = _component_name_of(host_roles) or "-"
    return {name: parse_host_component_statuses(host_roles)}
