import logging
from typing import override

from dtree_mcp.models.errors import DirError
from dtree_mcp.models.session import OsState

from .base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from .utils.formatting_utils import format_paths, format_tree

logger = logging.getLogger(__name__)

DirTreeToolSubCommands = ["mkdir", "cd", "pwd", "ls", "tree"]


class DirTreeTool(Tool):
    """
    Tool for building and navigating the in-memory directory tree of a session.
    Directories are created in the current working directory, `cd` moves
    relative to it and `ls` lists the path to every leaf below it.
    """

    def __init__(self, model_provider: str | None = None) -> None:
        super().__init__(model_provider)

    @override
    def get_model_provider(self) -> str | None:
        return self._model_provider

    @override
    def get_name(self) -> str:
        return "dir_tree"

    @override
    def get_description(self) -> str:
        return """A tool for building and navigating an in-memory directory tree.
Use `mkdir` to create a directory called `name` in the current working directory (names must not contain `/`).
Use `cd` with `path` as a list of directory names to move down relative to the current directory; an empty or missing `path` returns to the root.
There is no `.` or `..`: every name is taken literally.
Use `pwd` to show the current directory, `ls` to list the path to every leaf below it and `tree` to show every directory below it."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="subcommand",
                type="string",
                description=f"The command to run. Allowed options are: {', '.join(DirTreeToolSubCommands)}.",
                required=True,
                enum=DirTreeToolSubCommands,
            ),
            ToolParameter(
                name="name",
                type="string",
                description="Directory name for `mkdir`.",
                required=False,
            ),
            ToolParameter(
                name="path",
                type="array",
                description="Directory names for `cd`, relative to the current directory.",
                items={"type": "string"},
                required=False,
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        state = arguments.get("_fs_state")
        if not isinstance(state, OsState):
            return ToolExecResult(
                error="OsState not found in arguments. This is an internal server error.",
                error_code=-1,
            )

        subcommand = arguments.get("subcommand")
        if not isinstance(subcommand, str):
            return ToolExecResult(error="Subcommand must be a string.", error_code=-1)

        try:
            match subcommand:
                case "mkdir":
                    return self._mkdir_handler(state, arguments)
                case "cd":
                    return self._cd_handler(state, arguments)
                case "pwd":
                    return self._pwd_handler(state)
                case "ls":
                    return self._ls_handler(state)
                case "tree":
                    return self._tree_handler(state)
                case _:
                    return ToolExecResult(error=f"Unknown subcommand: {subcommand}", error_code=-1)
        except (DirError, ToolError, ValueError) as e:
            logger.info("dir_tree %s failed: %s", subcommand, e)
            return ToolExecResult(error=str(e), error_code=-1)

    def _mkdir_handler(self, state: OsState, args: ToolCallArguments) -> ToolExecResult:
        name = args.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("Name is required for mkdir and must be a non-empty string.")

        state.mkdir(name)
        return ToolExecResult(output=f"Created {state.pwd()}{name}/")

    def _cd_handler(self, state: OsState, args: ToolCallArguments) -> ToolExecResult:
        path = args.get("path") or []
        if not isinstance(path, list) or not all(isinstance(p, str) for p in path):
            raise ValueError("Path for cd must be a list of directory names.")

        state.chdir(path)
        return ToolExecResult(output=f"CWD is now {state.pwd()}")

    def _pwd_handler(self, state: OsState) -> ToolExecResult:
        return ToolExecResult(output=state.pwd())

    def _ls_handler(self, state: OsState) -> ToolExecResult:
        return ToolExecResult(output=format_paths(state.paths(), state.pwd()))

    def _tree_handler(self, state: OsState) -> ToolExecResult:
        current = state.dtree.subdir(state.cwd)
        items = [
            {
                "name": node.name,
                "depth": depth,
                "path": path,
                "is_leaf": not node.child_names(),
            }
            for depth, path, node in current.walk()
        ]
        return ToolExecResult(output=format_tree(items, state.pwd()))
