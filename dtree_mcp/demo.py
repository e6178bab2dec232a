"""
Demonstration of the directory tree: builds a few small trees, logs their
leaf paths and checks them against the expected listings.
"""

import logging
import sys

from dtree_mcp.main import setup_environment
from dtree_mcp.models.session import OsState
from dtree_mcp.models.tree import DirTree

logger = logging.getLogger(__name__)


def nested_session() -> list[str]:
    state = OsState()
    state.mkdir("a")
    state.chdir(["a"])
    state.mkdir("b")
    state.chdir(["b"])
    state.mkdir("c")
    state.chdir([])
    return state.paths()


def branching_tree() -> list[str]:
    tree = DirTree()
    tree.mkdir("a")
    tree.mkdir("z")
    tree.subdir_mut(["a"]).mkdir("b")
    tree.subdir_mut(["a"]).mkdir("c")
    tree.subdir_mut(["a", "c"]).mkdir("d")
    return tree.paths()


def single_directory() -> list[str]:
    tree = DirTree()
    tree.mkdir("test")
    return tree.paths()


def two_levels() -> list[str]:
    tree = DirTree()
    tree.mkdir("a")
    tree.subdir_mut(["a"]).mkdir("b")
    return tree.paths()


SCENARIOS = [
    ("nested session", nested_session, {"/a/b/c/"}),
    ("branching tree", branching_tree, {"/a/b/", "/a/c/d/", "/z/"}),
    ("single directory", single_directory, {"/test/"}),
    ("two levels", two_levels, {"/a/b/"}),
]


def run_demo() -> None:
    """Runs every scenario, raising AssertionError on the first unexpected listing."""
    for label, build, expected in SCENARIOS:
        paths = build()
        logger.info("%s: %s", label, sorted(paths))
        if len(paths) != len(expected) or set(paths) != expected:
            raise AssertionError(f"{label}: expected {sorted(expected)}, got {sorted(paths)}")


def main() -> None:
    setup_environment()
    try:
        run_demo()
    except AssertionError as e:
        logger.critical("Demo failed: %s", e)
        sys.exit(1)
    logger.info("All scenarios produced the expected paths.")


if __name__ == "__main__":
    main()
