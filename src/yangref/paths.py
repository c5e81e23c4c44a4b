"""Leafref path grammar.

Only the narrow grammar leafref paths use in practice is handled::

    /pfx:cont/pfx:list/pfx:name     absolute, from the tree root
    ../../pfx:config/pfx:name       relative, ascend twice then descend

Predicates and wildcards are not understood. The grammar is handled by
small independent passes (classification, ascent counting, prefix
stripping) that parse_path composes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yangref.nodes import SchemaNode

SEPARATOR = "/"
ASCEND = "../"
_PREFIX_SEPARATOR = ":"
_MIN_COMPONENTS = 2
_QUALIFIED_PARTS = 2


@dataclass(frozen=True)
class LeafrefPath:
    """A classified path with the downward segments already unprefixed."""

    raw: str
    absolute: bool
    ascents: int
    segments: tuple[str, ...]


def is_absolute(path: str) -> bool:
    """Return True if the path starts at the tree root."""
    return path.startswith(SEPARATOR)


def count_ascents(path: str) -> int:
    """Count ``../`` markers anywhere in the path."""
    return path.count(ASCEND)


def has_enough_components(path: str) -> bool:
    """Return True if the path names at least one segment past its anchor."""
    return len(path.split(SEPARATOR)) >= _MIN_COMPONENTS


def strip_module_prefix(segment: str) -> str:
    """Drop a ``prefix:`` qualifier: ``"oc-if:config"`` -> ``"config"``.

    Segments without a qualifier, or with more than one ``:``, are returned
    as they are.
    """
    parts = segment.split(_PREFIX_SEPARATOR)
    if len(parts) == _QUALIFIED_PARTS:
        return parts[1]
    return segment


def descent_list(path: str) -> list[str]:
    """Split a path into the segments walked downwards, prefixes kept.

    Absolute paths lose their leading ``/``; relative paths lose every
    ``../`` marker. Empty segments produced by doubled slashes are kept.
    """
    if is_absolute(path):
        return path[1:].split(SEPARATOR)
    return path.replace(ASCEND, "").split(SEPARATOR)


def parse_path(path: str) -> LeafrefPath:
    """Classify a path and produce its unprefixed downward segments."""
    absolute = is_absolute(path)
    return LeafrefPath(
        raw=path,
        absolute=absolute,
        ascents=0 if absolute else count_ascents(path),
        segments=tuple(strip_module_prefix(s) for s in descent_list(path)),
    )


def absolute_path_to(node: SchemaNode, prefix: str = "") -> str:
    """Build the absolute leafref path that designates node.

    The root itself is the anchor of absolute paths and is not named.

    Args:
        node: Target node
        prefix: Optional module prefix to qualify every segment with

    Returns:
        A path such as ``/pfx:cont/pfx:leaf``

    Raises:
        ValueError: If node is the root, which no path can name

    """
    names = [node.name, *(a.name for a in node.ancestors())][:-1]
    if not names:
        msg = f"Entry '{node.name}' is the root and cannot be addressed by a path"
        raise ValueError(msg)
    qualifier = f"{prefix}{_PREFIX_SEPARATOR}" if prefix else ""
    return SEPARATOR + SEPARATOR.join(qualifier + n for n in reversed(names))
