import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from dtree_mcp.models.errors import InvalidCwdError, InvalidNameError, NoSuchChildError
from dtree_mcp.models.tree import SEPARATOR, DirTree, format_path

logger = logging.getLogger(__name__)


class OsState(BaseModel):
    """Stores the directory tree and the current working directory for a single session."""

    dtree: DirTree = Field(default_factory=DirTree)
    # Component names from the root; empty means the root itself.
    cwd: list[str] = Field(default_factory=list)

    def pwd(self) -> str:
        return format_path(self.cwd)

    def chdir(self, path: Sequence[str]) -> None:
        """
        Changes the working directory to `path`, relative to the current one.

        An empty `path` returns to the root. There is no notion of `.` or `..`:
        every element is taken literally as a subdirectory name.

        Raises:
            NoSuchChildError: If the destination does not exist. The working
                directory is left unchanged.
        """
        if not path:
            self.cwd = []
            logger.debug("cwd reset to root")
            return

        target = [*self.cwd, *path]
        self.dtree.subdir(target)
        self.cwd = target
        logger.debug("cwd is now %s", self.pwd())

    def mkdir(self, name: str) -> None:
        """
        Makes a subdirectory called `name` in the working directory.

        Raises:
            InvalidNameError: If `name` contains the separator.
            InvalidCwdError: If the working directory does not resolve.
            AlreadyExistsError: If `name` already exists.
        """
        if SEPARATOR in name:
            raise InvalidNameError(name)

        try:
            current = self.dtree.subdir_mut(self.cwd)
        except NoSuchChildError as e:
            raise InvalidCwdError(self.cwd, e.name) from e

        current.mkdir(name)
        logger.debug("created %s%s%s", self.pwd(), name, SEPARATOR)

    def paths(self) -> list[str]:
        """
        Lists the path from the working directory to each reachable leaf, in no particular order.

        Raises:
            InvalidCwdError: If the working directory does not resolve.
        """
        if not self.cwd:
            return self.dtree.paths()

        try:
            current = self.dtree.subdir(self.cwd)
        except NoSuchChildError as e:
            raise InvalidCwdError(self.cwd, e.name) from e
        return current.paths()
