"""Browsable view of a module tree with single-child chains collapsed."""

from __future__ import annotations

from typing import Optional

from pdbview.module_tree import (
    MODULE_PATH_SEPARATOR,
    ModuleInfo,
    ModulePath,
    ModuleTreeNode,
)


class ModuleTreeViewNode:
    """Node of a module tree view, backed by a tree node."""

    def __init__(self, name: str, tree_node: ModuleTreeNode) -> None:
        self.tree_node = tree_node
        self.name = name
        self.children: list[ModuleTreeViewNode] = []

    def is_leaf(self) -> bool:
        return not self.children

    @property
    def path(self) -> ModulePath:
        return self.tree_node.path

    @property
    def module_info(self) -> Optional[ModuleInfo]:
        return self.tree_node.module_info

    def __repr__(self) -> str:
        return f"ModuleTreeViewNode({self.name!r}, children={len(self.children)})"


def _sort_key(node: ModuleTreeViewNode) -> tuple[bool, str]:
    # Inner nodes come before leaves, then by name.
    return (node.is_leaf(), node.name)


def populate_tree_view(view_node: ModuleTreeViewNode) -> None:
    """Fill a view node's children from its backing node, merging chains.

    The backing node's children are consumed.
    """
    tree_children = view_node.tree_node.children
    view_node.tree_node.children = {}

    if len(tree_children) == 1:
        (child_name, child_node), = tree_children.items()
        child_view = ModuleTreeViewNode(child_name, child_node)
        populate_tree_view(child_view)
        if child_view.is_leaf():
            view_node.children.append(child_view)
        else:
            view_node.tree_node = child_view.tree_node
            view_node.name = f"{view_node.name}{MODULE_PATH_SEPARATOR}{child_view.name}"
            view_node.children = child_view.children
    elif tree_children:
        for child_name, child_node in tree_children.items():
            child_view = ModuleTreeViewNode(child_name, child_node)
            populate_tree_view(child_view)
            view_node.children.append(child_view)
        view_node.children.sort(key=_sort_key)


class ModuleTreeView:
    """Top level of a module tree view."""

    def __init__(self, children: Optional[list[ModuleTreeViewNode]] = None) -> None:
        self.children: list[ModuleTreeViewNode] = list(children) if children else []

    @classmethod
    def from_tree_node(cls, root_node: ModuleTreeNode) -> "ModuleTreeView":
        """Build a view, merging every node that has a single inner child.

        The given tree is consumed.
        """
        children = [
            ModuleTreeViewNode(name, node) for name, node in root_node.children.items()
        ]
        for view_node in children:
            populate_tree_view(view_node)
        children.sort(key=_sort_key)
        return cls(children)