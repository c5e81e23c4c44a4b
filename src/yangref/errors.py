"""Failures raised while resolving a leafref path.

Every failure is its own class deriving from ResolutionError, so callers
branch on the kind with ``except`` or ``isinstance`` rather than by
matching message text. The offending names are kept as attributes.
"""

from __future__ import annotations


class ResolutionError(Exception):
    """Base class for leafref resolution failures."""

    def __init__(self, node_name: str, message: str) -> None:
        super().__init__(message)
        self.node_name = node_name


class NotALeafref(ResolutionError):
    """Resolution was requested for a node whose type is not a leafref."""

    def __init__(self, node_name: str) -> None:
        super().__init__(node_name, f"entry {node_name} is not a leafref")


class MalformedPath(ResolutionError):
    """The leafref path has too few components to name a target."""

    def __init__(self, node_name: str, path: str, node_path: str) -> None:
        super().__init__(
            node_name,
            f"key {node_name} had an invalid path {node_path}",
        )
        self.path = path
        self.node_path = node_path


class BrokenAncestorChain(ResolutionError):
    """A relative path ascends past the root of the tree.

    ``node_name`` is the position at which the ascent ran out of parents.
    """

    def __init__(self, node_name: str) -> None:
        super().__init__(node_name, f"entry {node_name} does not have a parent")


class SegmentNotFound(ResolutionError):
    """A path segment names a child that does not exist."""

    def __init__(self, segment: str, node_name: str) -> None:
        super().__init__(node_name, f"entry {segment} not found in {node_name}")
        self.segment = segment


class LeafrefCycle(ResolutionError):
    """Following leafref targets came back to a node already visited."""

    def __init__(self, node_name: str, chain: tuple[str, ...]) -> None:
        super().__init__(
            node_name,
            f"leafref chain from {node_name} loops: {' -> '.join(chain)}",
        )
        self.chain = chain
