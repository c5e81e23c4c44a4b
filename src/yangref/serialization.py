"""Serialization of schema trees to and from builtins and JSON."""

from __future__ import annotations

import json
from typing import Any

from yangref.nodes import SchemaNode
from yangref.types import TypeKind, YangType


def type_to_dict(yang_type: YangType) -> dict[str, Any]:
    """Serialize a type, omitting empty optional fields."""
    data: dict[str, Any] = {"kind": yang_type.kind.value}
    if yang_type.path:
        data["path"] = yang_type.path
    if yang_type.name:
        data["name"] = yang_type.name
    return data


def type_from_dict(data: dict[str, Any]) -> YangType:
    """Deserialize a type.

    Raises:
        KeyError: If the 'kind' field is missing
        ValueError: If the kind is not a known YANG type kind

    """
    if "kind" not in data:
        msg = "Missing required 'kind' field in type data"
        raise KeyError(msg)
    try:
        kind = TypeKind(data["kind"])
    except ValueError:
        available = [k.value for k in TypeKind]
        msg = f"Unknown type kind '{data['kind']}'. Available kinds: {available}"
        raise ValueError(msg) from None
    return YangType(kind=kind, path=data.get("path", ""), name=data.get("name", ""))


def to_dict(node: SchemaNode) -> dict[str, Any]:
    """Serialize a node and its whole subtree.

    Parent links are implied by nesting and are not written out.
    """
    data: dict[str, Any] = {"name": node.name}
    if node.type is not None:
        data["type"] = type_to_dict(node.type)
    if node.is_list:
        data["is_list"] = True
    if node.list_key:
        data["list_key"] = node.list_key
    data["children"] = [to_dict(c) for c in node.children.values()]
    return data


def from_dict(data: dict[str, Any]) -> SchemaNode:
    """Rebuild a subtree, restoring parent links through add_child.

    Raises:
        KeyError: If a node lacks its 'name' field
        ValueError: If a type kind is unknown or sibling names collide

    """
    if "name" not in data:
        msg = "Missing required 'name' field in node data"
        raise KeyError(msg)
    node = SchemaNode(
        name=data["name"],
        type=type_from_dict(data["type"]) if data.get("type") else None,
        is_list=bool(data.get("is_list", False)),
        list_key=data.get("list_key", ""),
    )
    for child in data.get("children", ()):
        node.add_child(from_dict(child))
    return node


def to_json(node: SchemaNode, *, indent: int | None = 2) -> str:
    """Serialize a subtree to a JSON string (2-space indent by default)."""
    return json.dumps(to_dict(node), indent=indent)


def from_json(s: str) -> SchemaNode:
    """Deserialize a subtree from a JSON string.

    Raises:
        json.JSONDecodeError: If string is not valid JSON
        ValueError: If the JSON is not an object or holds invalid data
        KeyError: If required fields are missing

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object with 'name' field"
        raise ValueError(msg)
    return from_dict(data)
