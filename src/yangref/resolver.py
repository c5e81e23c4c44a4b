"""Leafref resolution over a parent-linked schema tree.

Given a node whose type is a leafref, find the node its path designates::

    list "interface"                         key "name"
      leaf "name"      type leafref { path "../config/name"; }
      container "config"
        leaf "name"    type string

    find_leafref(interface.children["name"])  # -> config/name

Absolute paths start at the root reachable from the node; relative paths
ascend once per ``../`` starting from the node itself. Both then descend
by child name with module prefixes stripped. Nothing is mutated or cached;
every call walks the tree as it currently is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from yangref.errors import (
    BrokenAncestorChain,
    LeafrefCycle,
    MalformedPath,
    NotALeafref,
    ResolutionError,
    SegmentNotFound,
)
from yangref.logging import get_logger
from yangref.paths import has_enough_components, parse_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from yangref.nodes import SchemaNode
    from yangref.types import YangType

logger = get_logger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one leafref: either a target or an error."""

    target: SchemaNode | None = None
    error: ResolutionError | None = None

    def __post_init__(self) -> None:
        if (self.target is None) == (self.error is None):
            msg = "Resolution needs exactly one of target or error"
            raise ValueError(msg)

    @property
    def ok(self) -> bool:
        """Return True if a target was found."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> SchemaNode:
        """Return the target, raising the carried error if there is none."""
        if self.error is not None:
            raise self.error
        return cast("SchemaNode", self.target)


@dataclass(frozen=True)
class ResolveTypeArgs:
    """Input to type mapping: a type plus the entry it was declared in.

    The entry is needed for leafrefs, whose effective type is that of the
    node their path designates.
    """

    yang_type: YangType
    context_entry: SchemaNode | None = None


def find_leafref(node: SchemaNode) -> SchemaNode:
    """Find the node that a leafref's path designates.

    Args:
        node: Node whose type is a leafref

    Returns:
        The target node

    Raises:
        NotALeafref: If the node has no type or a non-leafref type
        MalformedPath: If the path has fewer than two components
        BrokenAncestorChain: If a relative path ascends past the root
        SegmentNotFound: If a segment names a missing child

    """
    if node.type is None or not node.type.is_leafref:
        raise NotALeafref(node.name)
    return _follow_path(node, node.type.path)


def resolve_leafref(node: SchemaNode) -> Resolution:
    """Resolve a leafref, returning failures as values instead of raising.

    Only ResolutionError subclasses are captured; any other exception
    propagates.
    """
    try:
        return Resolution(target=find_leafref(node))
    except ResolutionError as e:
        return Resolution(error=e)


def resolve_leafref_chain(node: SchemaNode) -> SchemaNode:
    """Follow leafrefs until reaching a node that is not itself a leafref.

    A leafref may point at another leafref; the type to generate is that of
    the last node in the chain.

    Raises:
        LeafrefCycle: If the chain revisits a node
        ResolutionError: Any failure from resolving a link of the chain

    """
    visited = [node]
    current = find_leafref(node)
    while current.is_leafref:
        if any(current is seen for seen in visited):
            chain = tuple(n.path() for n in [*visited, current])
            raise LeafrefCycle(node.name, chain)
        visited.append(current)
        current = find_leafref(current)
    logger.debug(
        "Leafref chain from %s ends at %s after %d hop(s)",
        node.path(),
        current.path(),
        len(visited),
    )
    return current


def leafref_target_type(args: ResolveTypeArgs) -> YangType:
    """Return the type a value of args.yang_type effectively carries.

    Non-leafref types are returned unchanged. For a leafref, the path of
    args.yang_type (not the entry's own type, which may be e.g. a union
    holding the leafref as a member) is followed from the context entry,
    then any further chain of leafrefs from the node it lands on.

    Raises:
        ValueError: If a leafref is given without a context entry, or the
            chain ends on an untyped node
        ResolutionError: If the chain cannot be resolved

    """
    if not args.yang_type.is_leafref:
        return args.yang_type
    if args.context_entry is None:
        msg = f"Leafref type with path '{args.yang_type.path}' needs a context entry"
        raise ValueError(msg)
    target = _follow_path(args.context_entry, args.yang_type.path)
    if target.is_leafref:
        target = resolve_leafref_chain(target)
    if target.type is None:
        msg = f"Leafref target {target.path()} has no type"
        raise ValueError(msg)
    return target.type


def resolve_root_name(name: str, default_name: str, generate_root: bool) -> str:
    """Pick the name of the generated root.

    Returns an empty string when no root is to be generated, otherwise name
    if it is set and default_name if not.
    """
    if not generate_root:
        return ""
    if not name:
        return default_name
    return name


def _follow_path(node: SchemaNode, raw: str) -> SchemaNode:
    if not has_enough_components(raw):
        raise MalformedPath(node.name, raw, node.path())

    path = parse_path(raw)
    logger.debug("Resolving leafref %s -> %s", node.path(), raw)

    start = node.root() if path.absolute else _ascend(node, path.ascents)
    target = _descend(start, path.segments)

    logger.debug("Leafref %s resolved to %s", node.path(), target.path())
    return target


def _ascend(node: SchemaNode, levels: int) -> SchemaNode:
    current = node
    for _ in range(levels):
        if current.parent is None:
            raise BrokenAncestorChain(current.name)
        current = current.parent
    return current


def _descend(start: SchemaNode, segments: Iterable[str]) -> SchemaNode:
    current = start
    for segment in segments:
        child = current.children.get(segment)
        if child is None:
            raise SegmentNotFound(segment, current.name)
        current = child
    return current
