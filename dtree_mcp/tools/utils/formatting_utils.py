import json
from typing import Dict, List


def format_paths(paths: List[str], cwd: str) -> str:
    """
    Format leaf paths as structured JSON for LLM consumption.

    Paths are sorted so the output is stable; the tree itself makes no
    ordering promise.
    """
    return json.dumps({
        "status": "success",
        "cwd": cwd,
        "count": len(paths),
        "paths": sorted(paths),
    }, indent=2)


def format_tree(tree_data: List[Dict], root_name: str) -> str:
    """
    Format tree structure as structured JSON for LLM consumption.

    Returns a JSON string with hierarchical structure that LLMs can easily
    parse and understand, instead of hard-to-parse plain text.
    """
    if not tree_data:
        return json.dumps({
            "status": "empty",
            "root": root_name,
            "message": "Directory is empty",
            "tree": []
        }, indent=2)

    tree_items = []
    for item in tree_data:
        tree_entry = {
            "name": item["name"],
            "type": "directory",
            "depth": item["depth"],
            "path": item["path"],
            "is_leaf": item["is_leaf"],
        }
        tree_items.append(tree_entry)

    return json.dumps({
        "status": "success",
        "root": root_name,
        "count": len(tree_items),
        "tree": tree_items
    }, indent=2)
