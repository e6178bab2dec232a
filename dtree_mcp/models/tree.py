"""In-memory directory tree."""

from collections.abc import Iterator, Sequence

from pydantic import BaseModel, Field

from dtree_mcp.models.errors import AlreadyExistsError, InvalidNameError, NoSuchChildError

SEPARATOR = "/"


def format_path(components: Sequence[str]) -> str:
    """Formats components as `/a/b/`: each one followed by the separator, plus a leading one."""
    return SEPARATOR + "".join(f"{name}{SEPARATOR}" for name in components)


class DirTree(BaseModel):
    """
    A directory node owning its subdirectories.

    The root of a tree has an empty name. Children keep their creation order
    and no two children share a name.
    """

    name: str = ""
    children: list["DirTree"] = Field(default_factory=list)

    def child(self, name: str) -> "DirTree | None":
        """Returns the immediate child called `name`, if any."""
        for entry in self.children:
            if entry.name == name:
                return entry
        return None

    def mkdir(self, name: str) -> None:
        """
        Makes an empty subdirectory called `name` in this directory.

        Raises:
            InvalidNameError: If `name` contains the separator.
            AlreadyExistsError: If a subdirectory called `name` already exists.
        """
        if SEPARATOR in name:
            raise InvalidNameError(name)
        if self.child(name) is not None:
            raise AlreadyExistsError(name)
        self.children.append(DirTree(name=name))

    def _resolve(self, path: Sequence[str]) -> "DirTree":
        node = self
        for name in path:
            found = node.child(name)
            if found is None:
                raise NoSuchChildError(name)
            node = found
        return node

    def subdir(self, path: Sequence[str]) -> "DirTreeView":
        """
        Resolves `path` below this directory for reading.

        An empty path resolves to this directory.

        Raises:
            NoSuchChildError: Naming the first component that does not exist.
        """
        return DirTreeView(self._resolve(path))

    def subdir_mut(self, path: Sequence[str]) -> "DirTree":
        """Same traversal as `subdir`, but hands back the node itself so it can be modified."""
        return self._resolve(path)

    def _leaf_components(self) -> Iterator[list[str]]:
        if not self.children:
            yield []
            return
        for entry in self.children:
            for rest in entry._leaf_components():
                yield [entry.name, *rest]

    def paths(self) -> list[str]:
        """
        Produces the path to each reachable leaf, in no particular order.

        Paths are relative to this directory and formatted as `/a/b/`.
        A directory without children yields the single path `/`.
        """
        return [format_path(components) for components in self._leaf_components()]

    def walk(self, _prefix: tuple[str, ...] = ()) -> Iterator[tuple[int, str, "DirTree"]]:
        """Pre-order walk below this directory, yielding `(depth, path, node)`."""
        for entry in self.children:
            components = (*_prefix, entry.name)
            yield len(components), format_path(components), entry
            yield from entry.walk(components)


class DirTreeView:
    """Read-only handle on a directory inside a `DirTree`."""

    __slots__ = ("_node",)

    def __init__(self, node: DirTree) -> None:
        self._node = node

    def __repr__(self) -> str:
        return f"DirTreeView(name={self._node.name!r}, children={self.child_names()!r})"

    @property
    def name(self) -> str:
        return self._node.name

    @property
    def children(self) -> tuple["DirTreeView", ...]:
        return tuple(DirTreeView(entry) for entry in self._node.children)

    def child_names(self) -> list[str]:
        return [entry.name for entry in self._node.children]

    def subdir(self, path: Sequence[str]) -> "DirTreeView":
        return self._node.subdir(path)

    def paths(self) -> list[str]:
        return self._node.paths()

    def walk(self) -> Iterator[tuple[int, str, "DirTreeView"]]:
        for depth, path, node in self._node.walk():
            yield depth, path, DirTreeView(node)
