#!/usr/bin/env python3
"""
测试 Ambari 响应映射：单个组件、组件列表与异常结构
"""

import pytest

from ambari_client.utils.errors import AmbariErrorCode, PayloadError
from ambari_client.utils.parsers import (
    parse_host_component_statuses,
    parse_host_components,
    parse_payload,
)


# 实际的 host_components/DATANODE 响应（节选）
SAMPLE_HOST_COMPONENT = {
    "href": "http://ambari:8080/api/v1/clusters/c1/hosts/node1/host_components/DATANODE",
    "HostRoles": {
        "cluster_name": "c1",
        "component_name": "DATANODE",
        "desired_admin_state": "INSERVICE",
        "desired_stack_id": "HDP-2.2",
        "desired_state": "STARTED",
        "host_name": "node1",
        "maintenance_state": "OFF",
        "stale_configs": False,
        "state": "STARTED",
        "upgrade_state": "NONE",
    },
}


def _item(host, component, **fields):
    return {"HostRoles": dict(host_name=host, component_name=component, **fields)}


def test_parse_wrapped_host_roles():
    status = parse_host_component_statuses(SAMPLE_HOST_COMPONENT)

    assert status.desired_admin_state == "INSERVICE"
    assert status.desired_state == "STARTED"
    assert status.maintenance_state == "OFF"
    assert status.state == "STARTED"
    assert status.upgrade_state == "NONE"


def test_parse_bare_field_mapping():
    status = parse_host_component_statuses({"state": "INSTALLED"})

    assert status.state == "INSTALLED"
    assert status.desired_state is None


def test_missing_fields_become_none():
    status = parse_host_component_statuses({"HostRoles": {"component_name": "NAMENODE"}})

    assert status.to_dict() == {
        "desired_admin_state": None,
        "desired_state": None,
        "maintenance_state": None,
        "state": None,
        "upgrade_state": None,
    }


def test_explicit_null_is_accepted():
    status = parse_host_component_statuses({"HostRoles": {"upgrade_state": None}})

    assert status.upgrade_state is None


@pytest.mark.parametrize("payload", [None, [], "STARTED", 42])
def test_non_mapping_payload_rejected(payload):
    with pytest.raises(PayloadError) as exc_info:
        parse_host_component_statuses(payload)

    assert exc_info.value.code == AmbariErrorCode.INVALID_PAYLOAD


def test_host_roles_must_be_mapping():
    with pytest.raises(PayloadError) as exc_info:
        parse_host_component_statuses({"HostRoles": ["state"]})

    assert exc_info.value.details["field"] == "HostRoles"


def test_non_string_field_rejected():
    with pytest.raises(PayloadError) as exc_info:
        parse_host_component_statuses({"HostRoles": {"state": 3}})

    assert exc_info.value.details["field"] == "state"
    assert "[INVALID_PAYLOAD]" in str(exc_info.value)


def test_parse_collection_single_host():
    payload = {
        "items": [
            _item("node1", "DATANODE", state="STARTED"),
            _item("node1", "NODEMANAGER", state="INSTALLED", maintenance_state="ON"),
        ]
    }

    components = parse_host_components(payload)

    assert list(components) == ["DATANODE", "NODEMANAGER"]
    assert components["DATANODE"].state == "STARTED"
    assert components["NODEMANAGER"].maintenance_state == "ON"


def test_parse_collection_multiple_hosts_keys_include_host():
    payload = {
        "items": [
            _item("node1", "DATANODE", state="STARTED"),
            _item("node2", "DATANODE", state="INSTALL_FAILED"),
        ]
    }

    components = parse_host_components(payload)

    assert set(components) == {"node1/DATANODE", "node2/DATANODE"}
    assert components["node2/DATANODE"].state == "INSTALL_FAILED"


@pytest.mark.parametrize("payload", [{}, {"items": []}, {"items": None}])
def test_empty_collection(payload):
    assert parse_host_components(payload) == {}


def test_collection_item_without_component_name():
    payload = {"items": [{"HostRoles": {"host_name": "node1", "state": "STARTED"}}]}

    with pytest.raises(PayloadError) as exc_info:
        parse_host_components(payload)

    assert exc_info.value.code == AmbariErrorCode.MISSING_FIELD
    assert exc_info.value.details["index"] == 0


def test_collection_items_must_be_list():
    with pytest.raises(PayloadError):
        parse_host_components({"items": {"HostRoles": {}}})


def test_parse_payload_detects_shape():
    single = parse_payload(SAMPLE_HOST_COMPONENT)
    assert list(single) == ["DATANODE"]

    many = parse_payload({"items": [_item("node1", "ZOOKEEPER_SERVER", state="STARTED")]})
    assert list(many) == ["ZOOKEEPER_SERVER"]

    anonymous = parse_payload({"state": "STARTED"})
    assert list(anonymous) == ["-"]


@pytest.mark.parametrize("name", [5, ["DATANODE"], {"name": "DATANODE"}])
def test_non_string_component_name_in_collection(name):
    payload = {"items": [{"HostRoles": {"host_name": "node1", "component_name": name}}]}

    with pytest.raises(PayloadError) as exc_info:
        parse_host_components(payload)

    assert exc_info.value.details["field"] == "component_name"
    assert exc_info.value.details["index"] == 0


def test_non_string_component_name_in_single_payload():
    with pytest.raises(PayloadError) as exc_info:
        parse_payload({"HostRoles": {"component_name": 5, "state": "STARTED"}})

    assert exc_info.value.details["field"] == "component_name"


def test_repeated_component_without_host_uses_host_keys():
    """同名组件重复出现时不能覆盖前一条"""
    payload = {
        "items": [
            {"HostRoles": {"component_name": "DATANODE", "state": "STARTED"}},
            {"HostRoles": {"host_name": "node2", "component_name": "DATANODE", "state": "INSTALLED"}},
        ]
    }

    components = parse_host_components(payload)

    assert set(components) == {"-/DATANODE", "node2/DATANODE"}
    assert components["-/DATANODE"].state == "STARTED"
    assert components["node2/DATANODE"].state == "INSTALLED"


@pytest.mark.parametrize("host", [None, "node1"])
def test_same_component_twice_on_one_host_rejected(host):
    payload = {
        "items": [
            {"HostRoles": {"host_name": host, "component_name": "DATANODE", "state": "STARTED"}},
            {"HostRoles": {"host_name": host, "component_name": "DATANODE", "state": "INSTALLED"}},
        ]
    }

    with pytest.raises(PayloadError) as exc_info:
        parse_host_components(payload)

    assert exc_info.value.code == AmbariErrorCode.DUPLICATE_COMPONENT
    assert exc_info.value.details["index"] == 1
    assert exc_info.value.details["key"] == f"{host or '-'}/DATANODE"
