"""Errors raised while interacting with a directory tree."""


class DirError(Exception):
    """Base class for directory tree errors. `name` is the offending component."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class InvalidNameError(DirError):
    """The separator character is not allowed inside a component name."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"{name}: slash in name is invalid")


class AlreadyExistsError(DirError):
    """Only one subdirectory of a given name can exist in any directory."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"{name}: directory exists")


class NoSuchChildError(DirError):
    """Traversal failed due to a missing subdirectory."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(name, message or f"{name}: invalid element in path")


class InvalidCwdError(NoSuchChildError):
    """The session's working directory no longer resolves in its tree."""

    def __init__(self, cwd: list[str], missing: str) -> None:
        cwd_str = "/" + "".join(f"{part}/" for part in cwd)
        super().__init__(missing, f"{cwd_str}: invalid working directory, missing '{missing}'")
        self.cwd = list(cwd)
