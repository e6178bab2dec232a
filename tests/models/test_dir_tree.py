#!/usr/bin/env python3
"""
Unit tests for models/tree.py
"""

import pytest

from dtree_mcp.models.errors import AlreadyExistsError, InvalidNameError, NoSuchChildError
from dtree_mcp.models.tree import DirTree, DirTreeView, format_path


def build(tree: DirTree, spec: dict) -> None:
    """Creates `spec` (a nested dict of names) below `tree` using mkdir only."""
    for name, sub in spec.items():
        tree.mkdir(name)
        build(tree.subdir_mut([name]), sub)


def count_leaves(spec: dict) -> int:
    if not spec:
        return 1
    return sum(count_leaves(sub) for sub in spec.values())


class TestMkdir:
    """Tests for DirTree.mkdir"""

    def test_mkdir_single(self):
        tree = DirTree()
        tree.mkdir("test")
        assert tree.paths() == ["/test/"]

    def test_mkdir_duplicate_fails_second_time(self):
        tree = DirTree()
        tree.mkdir("x")
        with pytest.raises(AlreadyExistsError) as exc_info:
            tree.mkdir("x")
        assert exc_info.value.name == "x"
        assert str(exc_info.value) == "x: directory exists"
        assert [child.name for child in tree.children] == ["x"]

    def test_same_name_at_different_levels(self):
        tree = DirTree()
        tree.mkdir("x")
        tree.subdir_mut(["x"]).mkdir("x")
        assert tree.paths() == ["/x/x/"]

    @pytest.mark.parametrize("name", ["a/b", "/", "a/", "/a"])
    def test_mkdir_rejects_separator(self, name):
        tree = DirTree()
        with pytest.raises(InvalidNameError) as exc_info:
            tree.mkdir(name)
        assert exc_info.value.name == name
        assert "slash in name is invalid" in str(exc_info.value)
        assert tree.children == []

    def test_children_keep_creation_order(self):
        tree = DirTree()
        for name in ["c", "a", "b"]:
            tree.mkdir(name)
        assert [child.name for child in tree.children] == ["c", "a", "b"]


class TestResolve:
    """Tests for DirTree.subdir and DirTree.subdir_mut"""

    @pytest.fixture
    def tree(self):
        tree = DirTree()
        build(tree, {"a": {"b": {}, "c": {"d": {}}}, "z": {}})
        return tree

    def test_empty_path_resolves_to_self(self, tree):
        assert tree.subdir_mut([]) is tree
        assert tree.subdir([]).child_names() == ["a", "z"]

    def test_resolves_left_to_right(self, tree):
        view = tree.subdir(["a", "c"])
        assert isinstance(view, DirTreeView)
        assert view.name == "c"
        assert view.child_names() == ["d"]

    def test_reports_first_missing_component(self, tree):
        with pytest.raises(NoSuchChildError) as exc_info:
            tree.subdir(["a", "missing", "also-missing"])
        assert exc_info.value.name == "missing"
        assert str(exc_info.value) == "missing: invalid element in path"

    def test_dot_names_are_literal(self, tree):
        with pytest.raises(NoSuchChildError) as exc_info:
            tree.subdir(["a", ".."])
        assert exc_info.value.name == ".."

    def test_mutable_resolution_modifies_tree(self, tree):
        tree.subdir_mut(["z"]).mkdir("y")
        assert "/z/y/" in tree.paths()
        assert "/z/" not in tree.paths()

    def test_view_is_read_only(self, tree):
        view = tree.subdir(["a"])
        assert not hasattr(view, "mkdir")
        with pytest.raises(AttributeError):
            view.name = "other"

    def test_view_reflects_later_changes(self, tree):
        view = tree.subdir(["z"])
        tree.subdir_mut(["z"]).mkdir("new")
        assert view.child_names() == ["new"]

    def test_view_subdir(self, tree):
        view = tree.subdir(["a"]).subdir(["c", "d"])
        assert view.name == "d"
        assert view.paths() == ["/"]


class TestPaths:
    """Tests for DirTree.paths"""

    def test_empty_tree(self):
        assert DirTree().paths() == ["/"]

    def test_nested(self):
        tree = DirTree()
        build(tree, {"a": {"b": {}}})
        assert tree.paths() == ["/a/b/"]

    def test_multi_branch_unordered(self):
        tree = DirTree()
        tree.mkdir("a")
        tree.mkdir("z")
        tree.subdir_mut(["a"]).mkdir("b")
        tree.subdir_mut(["a"]).mkdir("c")
        tree.subdir_mut(["a", "c"]).mkdir("d")
        assert set(tree.paths()) == {"/a/b/", "/a/c/d/", "/z/"}
        assert len(tree.paths()) == 3

    def test_paths_relative_to_subdirectory(self):
        tree = DirTree()
        build(tree, {"a": {"b": {"c": {}}, "e": {}}})
        assert sorted(tree.subdir(["a"]).paths()) == ["/b/c/", "/e/"]

    @pytest.mark.parametrize(
        "spec",
        [
            {"a": {}},
            {"a": {}, "b": {}, "c": {}},
            {"a": {"b": {"c": {"d": {}}}}},
            {"a": {"x": {}, "y": {"p": {}, "q": {}}}, "b": {"x": {}}},
            {"one": {"two": {}, "three": {"four": {}, "five": {"six": {}}}}, "seven": {}},
        ],
    )
    def test_one_path_per_leaf(self, spec):
        tree = DirTree()
        build(tree, spec)
        paths = tree.paths()
        assert len(paths) == count_leaves(spec)
        for path in paths:
            assert path.startswith("/") and path.endswith("/")
            node = spec
            for name in path.strip("/").split("/"):
                node = node[name]
            assert node == {}

    def test_format_path(self):
        assert format_path([]) == "/"
        assert format_path(["a", "b"]) == "/a/b/"


class TestWalk:
    """Tests for DirTree.walk"""

    def test_walk_pre_order(self):
        tree = DirTree()
        build(tree, {"a": {"b": {}}, "z": {}})
        walked = [(depth, path, node.name) for depth, path, node in tree.walk()]
        assert walked == [
            (1, "/a/", "a"),
            (2, "/a/b/", "b"),
            (1, "/z/", "z"),
        ]

    def test_model_dump(self):
        tree = DirTree()
        build(tree, {"a": {}})
        assert tree.model_dump() == {
            "name": "",
            "children": [{"name": "a", "children": []}],
        }
