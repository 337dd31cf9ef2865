from __future__ import annotations

"""
Directory Tree Data Models.

An arena-backed directory tree built incrementally from a shell transcript.
Nodes live in a flat list and reference each other by index: a child knows
its parent's index and a directory maps child names to indexes. The tree is
only ever read after it has been fully built, so aggregate sizes are
recomputed on demand instead of cached.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from aoc2022.domain.errors import StructuralError

ROOT_MARKER = "/"
PARENT_MARKER = ".."

ROOT_INDEX = 0

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    A file or directory in the arena.

    Attributes:
        name: Path segment of the entry.
        size: Own size; 0 for directories.
        is_dir: True for internal nodes.
        parent: Arena index of the parent, None for the root.
        children: Child name to arena index.
    """
    name: str
    size: int = 0
    is_dir: bool = True
    parent: Optional[int] = None
    children: Dict[str, int] = field(default_factory=dict)


class DirectoryTree:
    """
    Mutable directory tree with a navigation cursor.

    The cursor starts at the root. `change_directory` moves it,
    `record_entry` adds children below it without moving it.
    """

    def __init__(self) -> None:
        self.nodes: List[Node] = [Node(name=ROOT_MARKER)]
        self.cursor: int = ROOT_INDEX

    @property
    def root(self) -> int:
        return ROOT_INDEX

    def node(self, index: int) -> Node:
        return self.nodes[index]

    # -------------------------------------------------------------------------
    # CONSTRUCTION
    # -------------------------------------------------------------------------

    def change_directory(self, name: str) -> int:
        """
        Move the cursor and return its new index.

        `/` resets to the root, `..` goes to the parent (staying put at the
        root), anything else descends into the named child, creating it as
        a directory if it was never listed.

        Raises:
            StructuralError: The named child is a file.
        """
        if name == ROOT_MARKER:
            self.cursor = ROOT_INDEX
        elif name == PARENT_MARKER:
            parent = self.nodes[self.cursor].parent
            self.cursor = ROOT_INDEX if parent is None else parent
        else:
            self.cursor = self._ensure_child(self.cursor, name, size=0, is_dir=True)
        return self.cursor

    def record_entry(self, kind: str, name: str, size: Optional[int] = None) -> int:
        """
        Insert or reuse an entry under the cursor.

        Args:
            kind: "dir" or "file".
            name: Entry name.
            size: File size, required for files.

        Returns:
            int: Arena index of the (possibly pre-existing) entry.

        Raises:
            StructuralError: The name is already used by an entry of the other kind.
        """
        if kind == "dir":
            return self._ensure_child(self.cursor, name, size=0, is_dir=True)
        if kind == "file":
            if size is None:
                raise ValueError(f"File entry '{name}' needs a size")
            return self._ensure_child(self.cursor, name, size=size, is_dir=False)
        raise ValueError(f"Unknown entry kind: {kind!r}")

    def _ensure_child(self, parent: int, name: str, *, size: int, is_dir: bool) -> int:
        children = self.nodes[parent].children
        existing = children.get(name)
        if existing is not None:
            if self.nodes[existing].is_dir != is_dir:
                kind = "directory" if self.nodes[existing].is_dir else "file"
                raise StructuralError(f"'{self.path_of(existing)}' is already a {kind}")
            return existing

        index = len(self.nodes)
        self.nodes.append(Node(name=name, size=size, is_dir=is_dir, parent=parent))
        children[name] = index
        return index

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def total_size(self, index: int = ROOT_INDEX) -> int:
        """Own size plus the total size of every descendant."""
        node = self.nodes[index]
        return node.size + sum(self.total_size(child) for child in node.children.values())

    def all_directories(self, index: int = ROOT_INDEX) -> Iterator[int]:
        """Yield every directory reachable from `index`, itself included, in pre-order."""
        node = self.nodes[index]
        if not node.is_dir:
            return
        yield index
        for child in node.children.values():
            if self.nodes[child].is_dir:
                yield from self.all_directories(child)

    def path_of(self, index: int) -> str:
        """Absolute slash separated path of a node."""
        parts: List[str] = []
        current: Optional[int] = index
        while current is not None and current != ROOT_INDEX:
            node = self.nodes[current]
            parts.append(node.name)
            current = node.parent
        return ROOT_MARKER + "/".join(reversed(parts))

    def render(self, index: int = ROOT_INDEX, prefix: str = "") -> List[str]:
        """Indented listing in the `- name (dir)` / `- name (file, size=N)` form."""
        node = self.nodes[index]
        if node.is_dir:
            lines = [f"{prefix}- {node.name} (dir)"]
        else:
            lines = [f"{prefix}- {node.name} (file, size={node.size})"]

        for child_name in sorted(node.children):
            lines.extend(self.render(node.children[child_name], prefix + "  "))
        return lines
