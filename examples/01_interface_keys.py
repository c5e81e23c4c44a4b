"""
Interface Keys Example
======================

Resolving leafrefs in an openconfig-style interfaces tree, demonstrating:
- Building a schema tree with parent links
- Relative and absolute leafref paths
- Failures as exceptions and as result values
- Following a chain of leafrefs to the type it carries
"""

import logging

from yangref import (
    ResolveTypeArgs,
    SchemaNode,
    TypeKind,
    YangType,
    find_leafref,
    leafref_target_type,
    resolve_leafref,
)


# ============================================================================
# Build the tree
# ============================================================================

def build_tree() -> SchemaNode:
    root = SchemaNode(name="openconfig-interfaces")
    interfaces = root.add_child(SchemaNode(name="interfaces"))
    interface = interfaces.add_child(
        SchemaNode(name="interface", is_list=True, list_key="name")
    )
    interface.add_child(
        SchemaNode(
            name="name",
            type=YangType(kind=TypeKind.LEAFREF, path="../oc-if:config/oc-if:name"),
        )
    )
    config = interface.add_child(SchemaNode(name="config"))
    config.add_child(SchemaNode(name="name", type=YangType(kind=TypeKind.STRING)))

    subifs = root.add_child(SchemaNode(name="subinterface-refs"))
    subifs.add_child(
        SchemaNode(
            name="interface",
            type=YangType(
                kind=TypeKind.LEAFREF,
                path="/oc-if:interfaces/oc-if:interface/oc-if:name",
            ),
        )
    )
    subifs.add_child(
        SchemaNode(
            name="broken",
            type=YangType(kind=TypeKind.LEAFREF, path="/oc-if:interfaces/oc-if:nope"),
        )
    )
    return root


# ============================================================================
# Example Usage
# ============================================================================

def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    root = build_tree()

    key = root.children["interfaces"].children["interface"].children["name"]
    print(f"{key.path()} -> {find_leafref(key).path()}")

    ref = root.children["subinterface-refs"].children["interface"]
    print(f"{ref.path()} -> {find_leafref(ref).path()}")

    # The absolute reference points at the list key, itself a leafref.
    args = ResolveTypeArgs(yang_type=ref.type, context_entry=ref)
    carried = leafref_target_type(args)
    print(f"{ref.path()} carries values of type {carried.kind}")
    print()

    broken = root.children["subinterface-refs"].children["broken"]
    result = resolve_leafref(broken)
    if not result:
        print(f"{broken.path()} failed: {type(result.error).__name__}: {result.error}")


if __name__ == "__main__":
    main()
