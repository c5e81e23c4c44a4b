"""YANG type descriptors attached to schema nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TypeKind(StrEnum):
    """Built-in YANG type kinds, valued by their keyword spelling."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    DECIMAL64 = "decimal64"
    STRING = "string"
    BOOLEAN = "boolean"
    ENUMERATION = "enumeration"
    BITS = "bits"
    BINARY = "binary"
    LEAFREF = "leafref"
    IDENTITYREF = "identityref"
    EMPTY = "empty"
    UNION = "union"
    INSTANCE_IDENTIFIER = "instance-identifier"


@dataclass(frozen=True)
class YangType:
    """Type of a leaf: leafref(path="../config/name") -> YangType(LEAFREF, path=...).

    ``path`` only carries meaning for leafref kinds; ``name`` is the typedef
    name the type was declared through, if any.
    """

    kind: TypeKind
    path: str = ""
    name: str = ""

    @property
    def is_leafref(self) -> bool:
        """Return True if this type references another node by path."""
        return self.kind is TypeKind.LEAFREF
