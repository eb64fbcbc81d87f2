# pdbview

`pdbview` holds the browsing logic for a PDB type viewer. It builds a tree
out of module paths and collapses that tree so it is easy to browse. It
filters lists of types, symbols and modules by name and by kind, and keeps
a selectable list of named entries. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `pdbview.module_tree`

- `parse_module_path(path)` splits a path such as `d:\src\app\main.obj` into
  its components. Both `\` and `/` act as separators. A drive or UNC prefix is
  kept as the first component and the root is dropped.
- `ModulePath` is an immutable, hashable sequence of components. It offers
  `root()`, `parse(path)`, `parts`, `last()`, `is_root()`,
  `is_descendant_of(other)`, `is_child_of(other)`, `parent()`, `join(other)`
  and `hash64()`, a stable 64-bit hash. `str()` joins the components with `\`.
- `ModuleInfo(pdb_index)` is the information attached to a leaf.
- `ModuleTreeNode.add_module_by_path(module_path, module_info)` inserts a
  module and creates any missing intermediate nodes. It raises `ValueError`
  when the path does not belong under the node.

### `pdbview.module_tree_view`

`ModuleTreeView.from_tree_node(root)` merges every node whose only child is
an inner node into a single node named `parent\child`. This keeps the tree
shallow without losing information. In each node, inner nodes are listed
before leaves, and each group is sorted by name. Every `ModuleTreeViewNode`
has `name`, `children`, `is_leaf()`, and the `path` and `module_info`
properties of its backing node. Building the view consumes the given tree.

### `pdbview.filtering`

- `filter_by_query(entries, query, case_insensitive, use_regex)` keeps the
  entries whose first item contains the query as a substring, or matches it
  as a regular expression. An empty query keeps everything, and an invalid
  regular expression matches nothing.
- `TypeFilters` (`classes`, `unions`, `enums`) and `SymbolFilters`
  (`functions`, `variables`, `types`) switch kinds on or off. They are used
  with `filter_types_kind` and `filter_symbols_kind`, which look at
  `TypeKind` and `SymbolKind`.
- `filter_std(entries)` drops names that start with `std::`.
- `filter_type_list` and `filter_symbol_list` combine these steps. They take
  `(name, index, kind)` entries and return `(name, index)` pairs.
  `filter_type_list` can also sort the result by index.
- `filter_module_list` filters `(path, index)` modules.
- `merge_lists(lists)` merges lists from several files by name. The result is
  sorted, holds no duplicates, and sets every index to 0.

### `pdbview.index_list`

`IndexList(ordering)` holds `(name, index)` entries with at most one selected
row. With `IndexListOrdering.ALPHABETICAL` it sorts the entries by name.
`update_index_list` replaces the entries and clears the selection.
`select(row)` raises `IndexError` when the row is out of range.
`select_previous()` and `select_next()` move the selection by one row within
the bounds of the list. `selected()` returns the selected entry, or `None`.

## Examples

```python
from pdbview.module_tree import ModuleInfo, ModulePath, ModuleTreeNode
from pdbview.module_tree_view import ModuleTreeView

root = ModuleTreeNode()
root.add_module_by_path(ModulePath.parse("d:\\src\\app\\main.obj"), ModuleInfo(pdb_index=0))
root.add_module_by_path(ModulePath.parse("d:\\src\\app\\util.obj"), ModuleInfo(pdb_index=1))

view = ModuleTreeView.from_tree_node(root)
for node in view.children:
    print(node.name, [child.name for child in node.children])
# d:\src\app ['main.obj', 'util.obj']
```

```python
from pdbview.filtering import TypeFilters, TypeKind, filter_type_list

types = [
    ("Foo", 0x1002, TypeKind.CLASS),
    ("std::string", 0x1001, TypeKind.CLASS),
    ("FooFlags", 0x1000, TypeKind.ENUM),
]
print(filter_type_list(types, "foo", True, False, True, True, TypeFilters()))
# [('FooFlags', 4096), ('Foo', 4098)]
```

## What this package does not do

`pdbview` does not read PDB files and does not turn type records into C or
C++ declarations. Its functions work on names, indices and kinds that some
other code has already extracted. The package also has no command-line
program, no graphical interface, no text diffing of declarations, and no
stored settings.