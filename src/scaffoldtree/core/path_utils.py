"""
Path helpers for structure tree nodes.

Node paths are always POSIX-style, relative to the structure root, and carry
a trailing slash when they name a directory.
"""


def to_posix_path(path: str) -> str:
    """Convert any path to a POSIX-style path with forward slashes."""
    return path.replace("\\", "/")


def strip_trailing_slashes(segment: str) -> str:
    """Remove every trailing "/" from a path token."""
    return segment.rstrip("/")


def join_node_path(parent_path: str | None, segment: str, is_dir: bool) -> str:
    """
    Build the canonical path of a node from its parent's path.

    Params:
        parent_path: Canonical path of the parent node, or None for a root node
        segment: The node's own segment name, trailing slashes already stripped
        is_dir: Whether the node is a directory (re-adds the trailing slash)

    Returns:
        Canonical forward-slash path

    Examples:
        join_node_path("src/", "index.ts", False) -> "src/index.ts"
        join_node_path(None, "src", True) -> "src/"
    """
    normalized = to_posix_path(segment)
    suffix = "/" if is_dir else ""
    base = parent_path.rstrip("/") if parent_path else ""
    if base:
        return f"{base}/{normalized}{suffix}"
    return f"{normalized}{suffix}"
