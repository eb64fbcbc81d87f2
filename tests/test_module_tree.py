import pytest

from pdbview.module_tree import (
    ModuleInfo,
    ModulePath,
    ModuleTreeNode,
    parse_module_path,
)


def test_parse_windows_path_with_drive():
    assert parse_module_path("C:\\src\\main.obj") == ["C:", "src", "main.obj"]


def test_parse_unix_path_drops_root():
    assert parse_module_path("/usr/lib/x.o") == ["usr", "lib", "x.o"]


def test_parse_keeps_leading_curdir_and_parent_dirs():
    assert parse_module_path("./a/./b") == [".", "a", "b"]
    assert parse_module_path("a/../b") == ["a", "..", "b"]


def test_parse_collapses_repeated_separators():
    assert parse_module_path("a\\\\b//c") == ["a", "b", "c"]


def test_display_uses_backslash_and_round_trips():
    path = ModulePath.parse("a/b/c.obj")
    assert str(path) == "a\\b\\c.obj"
    assert ModulePath.parse(str(path)) == path


def test_root_properties():
    root = ModulePath.root()
    assert root.is_root()
    assert len(root) == 0
    assert root.parent() is None
    assert root.last() is None


def test_parent_last_and_join():
    path = ModulePath(["a", "b", "c"])
    assert path.last() == "c"
    assert path.parent() == ModulePath(["a", "b"])
    assert path.parent().join(ModulePath(["c"])) == path


def test_descendant_and_child_relations():
    a = ModulePath(["a"])
    ab = ModulePath(["a", "b"])
    abc = ModulePath(["a", "b", "c"])
    assert ab.is_child_of(a)
    assert abc.is_descendant_of(a)
    assert not abc.is_child_of(a)
    assert not a.is_descendant_of(a)
    assert not ModulePath(["x", "b"]).is_descendant_of(a)
    assert a.is_child_of(ModulePath.root())


def test_hash64_is_stable_and_distinguishes_paths():
    assert ModulePath(["a", "b"]).hash64() == ModulePath.parse("a\\b").hash64()
    assert ModulePath(["ab"]).hash64() != ModulePath(["a", "b"]).hash64()
    assert {ModulePath(["a"]), ModulePath(["a"])} == {ModulePath(["a"])}


def test_add_module_creates_intermediate_nodes():
    root = ModuleTreeNode()
    root.add_module_by_path(ModulePath.parse("a\\b\\c.obj"), ModuleInfo(pdb_index=3))
    a = root.children["a"]
    b = a.children["b"]
    leaf = b.children["c.obj"]
    assert a.module_info is None
    assert b.path == ModulePath(["a", "b"])
    assert leaf.module_info == ModuleInfo(pdb_index=3)
    assert leaf.path == ModulePath(["a", "b", "c.obj"])


def test_add_module_reuses_existing_branches():
    root = ModuleTreeNode()
    root.add_module_by_path(ModulePath.parse("a\\x.obj"), ModuleInfo(0))
    root.add_module_by_path(ModulePath.parse("a\\y.obj"), ModuleInfo(1))
    assert sorted(root.children["a"].children) == ["x.obj", "y.obj"]
    assert list(root.children) == ["a"]


def test_add_direct_child():
    root = ModuleTreeNode()
    root.add_module_by_path(ModulePath(["m.obj"]), ModuleInfo(7))
    assert root.children["m.obj"].module_info.pdb_index == 7


def test_add_root_path_is_rejected():
    with pytest.raises(ValueError):
        ModuleTreeNode().add_module_by_path(ModulePath.root(), ModuleInfo(0))


def test_add_foreign_path_to_subtree_is_rejected():
    node = ModuleTreeNode(path=ModulePath(["a"]))
    with pytest.raises(ValueError):
        node.add_module_by_path(ModulePath(["b", "c"]), ModuleInfo(0))