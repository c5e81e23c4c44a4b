"""Parent-linked schema tree consumed by the leafref resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from yangref.types import YangType


@dataclass(eq=False)
class SchemaNode:
    """A named entry of a schema tree.

    The tree owns its nodes top-down through ``children``. ``parent`` is a
    back-reference used only for upward navigation; it is left out of the
    repr so printing a node does not recurse through the whole tree.

    Nodes compare by identity: two entries with the same name and type at
    different positions are different nodes.
    """

    name: str
    type: YangType | None = None
    parent: SchemaNode | None = field(default=None, repr=False)
    children: dict[str, SchemaNode] = field(default_factory=dict, repr=False)
    is_list: bool = False
    list_key: str = ""

    def add_child(self, child: SchemaNode) -> SchemaNode:
        """Attach child under its name and point its parent link here.

        Args:
            child: Node to attach. Must not already belong to another parent.

        Returns:
            The attached child, so trees can be built inline.

        Raises:
            ValueError: If a sibling with the same name exists or the child
                is already attached elsewhere

        """
        if child.name in self.children:
            msg = f"Entry '{child.name}' already exists in '{self.name}'"
            raise ValueError(msg)
        if child.parent is not None and child.parent is not self:
            msg = (
                f"Entry '{child.name}' is already a child of '{child.parent.name}'"
            )
            raise ValueError(msg)
        child.parent = self
        self.children[child.name] = child
        return child

    @property
    def is_leafref(self) -> bool:
        """Return True if the node's type is a leafref."""
        return self.type is not None and self.type.is_leafref

    @property
    def depth(self) -> int:
        """Number of ancestors above this node."""
        return sum(1 for _ in self.ancestors())

    def ancestors(self) -> Iterator[SchemaNode]:
        """Yield the parent, grandparent, and so on up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def root(self) -> SchemaNode:
        """Return the topmost node reachable through parent links."""
        current = self
        while current.parent is not None:
            current = current.parent
        return current

    def path(self) -> str:
        """Schema path of the node, e.g. ``/module/container/leaf``."""
        names = [self.name, *(a.name for a in self.ancestors())]
        return "/" + "/".join(reversed(names))

    def walk(self) -> Iterator[SchemaNode]:
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children.values():
            yield from child.walk()
