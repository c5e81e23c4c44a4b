"""Shared schema trees for yangref tests."""

import pytest

from tests.trees import leaf
from yangref.nodes import SchemaNode
from yangref.types import TypeKind


@pytest.fixture
def interfaces() -> SchemaNode:
    """An openconfig-style tree.

    module (root)
      interfaces
        interface (list, key name)
          name           leafref ../t1:config/t1:name
          config
            name         string
            mtu          uint16
            parent-name  leafref /t1:interfaces/t1:interface/t1:name
          state
            counters
              in-pkts    uint64
              ref        leafref ../../../config/mtu
    """
    root = SchemaNode(name="module")
    container = root.add_child(SchemaNode(name="interfaces"))
    interface = container.add_child(
        SchemaNode(name="interface", is_list=True, list_key="name"),
    )
    interface.add_child(leaf("name", TypeKind.LEAFREF, "../t1:config/t1:name"))
    config = interface.add_child(SchemaNode(name="config"))
    config.add_child(leaf("name"))
    config.add_child(leaf("mtu", TypeKind.UINT16))
    config.add_child(
        leaf(
            "parent-name",
            TypeKind.LEAFREF,
            "/t1:interfaces/t1:interface/t1:name",
        ),
    )
    state = interface.add_child(SchemaNode(name="state"))
    counters = state.add_child(SchemaNode(name="counters"))
    counters.add_child(leaf("in-pkts", TypeKind.UINT64))
    counters.add_child(leaf("ref", TypeKind.LEAFREF, "../../../config/mtu"))
    return root

