"""yangref - Leafref path resolution over YANG schema trees."""

from yangref.config import RootConfig
from yangref.errors import (
    BrokenAncestorChain,
    LeafrefCycle,
    MalformedPath,
    NotALeafref,
    ResolutionError,
    SegmentNotFound,
)
from yangref.nodes import SchemaNode
from yangref.paths import (
    LeafrefPath,
    absolute_path_to,
    parse_path,
    strip_module_prefix,
)
from yangref.resolver import (
    Resolution,
    ResolveTypeArgs,
    find_leafref,
    leafref_target_type,
    resolve_leafref,
    resolve_leafref_chain,
    resolve_root_name,
)
from yangref.serialization import from_dict, from_json, to_dict, to_json
from yangref.types import TypeKind, YangType

__all__ = [
    # Errors
    "BrokenAncestorChain",
    "LeafrefCycle",
    # Paths
    "LeafrefPath",
    "MalformedPath",
    "NotALeafref",
    # Resolution
    "Resolution",
    "ResolutionError",
    "ResolveTypeArgs",
    # Configuration
    "RootConfig",
    # Schema tree
    "SchemaNode",
    "SegmentNotFound",
    "TypeKind",
    "YangType",
    "absolute_path_to",
    "find_leafref",
    # Serialization
    "from_dict",
    "from_json",
    "leafref_target_type",
    "parse_path",
    "resolve_leafref",
    "resolve_leafref_chain",
    "resolve_root_name",
    "strip_module_prefix",
    "to_dict",
    "to_json",
]
