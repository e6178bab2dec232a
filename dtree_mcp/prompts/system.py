"""Defines the composable prompts for the MCP server."""

BASE_PROMPT = """You are an agent working inside a simulated directory tree.
The tree lives only in memory for the duration of your session: it holds directories but no files, and nothing can be deleted or renamed.

Follow these steps:

1.  Orient Yourself:
    - Use `dir_tree` with `pwd` to see where you are and `ls` to list the path to every leaf below you.
    - A fresh session starts empty at the root `/`.

2.  Build the Structure:
    - Use `mkdir` with a single directory `name`. Names must not contain `/`.
    - Creating a name that already exists in the current directory is an error.

3.  Navigate:
    - Use `cd` with `path` as a list of names, e.g. `["src", "pkg"]`, to move down from the current directory.
    - There is no `.` or `..`. To go anywhere else, `cd` with an empty `path` to return to the root first.
    - A failed `cd` leaves the current directory unchanged.

4.  Verify:
    - Use `ls` or `tree` to confirm the structure matches what was asked for.
"""

RESET_INSTRUCTIONS = """
# Starting Over

Use the `reset_session` tool to discard the whole tree and begin again from an empty root.
"""


def get_prompts() -> dict[str, str]:
    """
    Returns a dictionary of available prompt components.
    """
    return {
        "base": BASE_PROMPT,
        "reset-instructions": RESET_INSTRUCTIONS,
    }
