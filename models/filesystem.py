"""Virtual filesystem model.

The filesystem is a single arena: a flat mapping from absolute normalized
path to node. Directory nodes only record the *names* of their immediate
children; the child nodes themselves live in the arena. Every creation goes
through one method that updates both the arena and the parent's name list, so
listings never drift from the arena.
"""

import logging
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from models.errors import PathError

logger = logging.getLogger(__name__)

ROOT = "/"


def normalize_path(path: str) -> str:
    """Normalize a path to its canonical absolute form.

    Collapses repeated separators and drops a trailing separator. "." and
    ".." are ordinary names, so "/home/user/.." names a child called "..",
    which never exists unless someone creates it. Input that does not start
    with "/" is treated as relative to the root.

    Args:
        path: The path to normalize.

    Returns:
        The normalized absolute path. Normalizing it again returns it unchanged.

    Example:
        >>> normalize_path("/a//b/")
        '/a/b'
        >>> normalize_path("/home/user/..")
        '/home/user/..'
    """
    segments = [segment for segment in path.split("/") if segment]
    return ROOT + "/".join(segments)


def resolve_path(target: str, current_directory: str) -> str:
    """Resolve a command argument against the current directory.

    Args:
        target: Absolute path, or a path relative to current_directory.
        current_directory: The session's current directory.

    Returns:
        The normalized absolute path.
    """
    if target.startswith("/"):
        return normalize_path(target)
    return normalize_path(f"{current_directory}/{target}")


def split_path(path: str) -> tuple[Optional[str], str]:
    """Split a normalized path into (parent path, leaf name).

    The root has no parent and an empty name.
    """
    if path == ROOT:
        return None, ""
    parent, _, name = path.rpartition("/")
    return parent or ROOT, name


class DirectoryNode(BaseModel):
    """A directory in the virtual filesystem.

    Args:
        node_type: Always "directory".
        children: Names of immediate children, in creation order.
    """

    node_type: Literal["directory"] = "directory"
    children: list[str] = Field(
        default_factory=list, description="Names of immediate children"
    )


class FileNode(BaseModel):
    """A text file in the virtual filesystem.

    Args:
        node_type: Always "file".
        content: File content (may be empty).
    """

    node_type: Literal["file"] = "file"
    content: str = Field(default="", description="File content")


FileSystemNode = Annotated[
    Union[DirectoryNode, FileNode], Field(discriminator="node_type")
]


class VirtualFileSystem(BaseModel):
    """In-memory directory/file tree keyed by absolute path.

    Args:
        nodes: Arena mapping each normalized absolute path to its node.
            Always contains the root directory.
    """

    nodes: dict[str, FileSystemNode] = Field(
        default_factory=lambda: {ROOT: DirectoryNode()},
        description="Arena of all nodes keyed by normalized absolute path",
    )

    @classmethod
    def seeded(cls, directories: list[str]) -> "VirtualFileSystem":
        """Create a filesystem containing the given directories.

        Missing ancestors are created as well, so every seeded directory
        is reachable from the root.

        Args:
            directories: Directory paths to create.

        Returns:
            A new VirtualFileSystem.
        """
        filesystem = cls()
        for directory in directories:
            filesystem.ensure_directory(directory)
        return filesystem

    # ===== Lookup =====

    def get_node(self, path: str) -> Optional[Union[DirectoryNode, FileNode]]:
        """Return the node at path, or None if nothing exists there."""
        return self.nodes.get(normalize_path(path))

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self.nodes

    def is_directory(self, path: str) -> bool:
        return isinstance(self.get_node(path), DirectoryNode)

    def is_file(self, path: str) -> bool:
        return isinstance(self.get_node(path), FileNode)

    def list_directory(self, path: str) -> list[tuple[str, bool]]:
        """List the immediate children of a directory.

        Args:
            path: Directory path.

        Returns:
            (name, is_directory) pairs in creation order.

        Raises:
            PathError: If path is missing or is not a directory.
        """
        path = normalize_path(path)
        node = self.nodes.get(path)
        if not isinstance(node, DirectoryNode):
            raise PathError(path, "not a directory")

        base = path.rstrip("/")
        return [
            (name, isinstance(self.nodes.get(f"{base}/{name}"), DirectoryNode))
            for name in node.children
        ]

    def read_file(self, path: str) -> str:
        """Return the content of a file.

        Raises:
            PathError: If path is missing or is a directory.
        """
        path = normalize_path(path)
        node = self.nodes.get(path)
        if not isinstance(node, FileNode):
            raise PathError(path, "no such file")
        return node.content

    # ===== Mutation =====

    def create_directory(self, path: str) -> DirectoryNode:
        """Create a new, empty directory.

        Args:
            path: Path of the directory to create.

        Returns:
            The new DirectoryNode.

        Raises:
            PathError: If path already exists, or its parent is missing or
                is not a directory.
        """
        path = normalize_path(path)
        if path in self.nodes:
            raise PathError(path, "already exists")

        node = DirectoryNode()
        self._insert(path, node)
        return node

    def create_file(self, path: str, content: str = "") -> FileNode:
        """Create a file, or replace the content of an existing one.

        Args:
            path: Path of the file.
            content: Initial content.

        Returns:
            The FileNode stored at path.

        Raises:
            PathError: If path is an existing directory, or its parent is
                missing or is not a directory.
        """
        path = normalize_path(path)
        existing = self.nodes.get(path)

        if isinstance(existing, DirectoryNode):
            raise PathError(path, "is a directory")
        if isinstance(existing, FileNode):
            existing.content = content
            return existing

        node = FileNode(content=content)
        self._insert(path, node)
        return node

    def ensure_directory(self, path: str) -> None:
        """Create a directory and any missing ancestors (like mkdir -p).

        Raises:
            PathError: If any component already exists as a file.
        """
        path = normalize_path(path)
        current = ""
        for segment in path.strip("/").split("/"):
            if not segment:
                continue
            current = f"{current}/{segment}"
            node = self.nodes.get(current)
            if node is None:
                self._insert(current, DirectoryNode())
            elif not isinstance(node, DirectoryNode):
                raise PathError(current, "not a directory")

    def _insert(self, path: str, node: Union[DirectoryNode, FileNode]) -> None:
        """Add node to the arena and register its name with the parent."""
        parent_path, name = split_path(path)
        if parent_path is None:
            raise PathError(path, "cannot replace the root directory")

        parent = self.nodes.get(parent_path)
        if not isinstance(parent, DirectoryNode):
            raise PathError(path, f"parent {parent_path} is not a directory")

        self.nodes[path] = node
        if name not in parent.children:
            parent.children.append(name)
        logger.debug(f"Created {node.node_type} {path}")

    # ===== Inspection =====

    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable view of every node, sorted by path."""
        return {
            path: self.nodes[path].model_dump() for path in sorted(self.nodes)
        }

    def validate_state(self) -> list[str]:
        """Check arena consistency.

        Verifies that every non-root node is registered with an existing
        directory parent, and that every child name a directory records
        has a node in the arena.

        Returns:
            List of problems found (empty if consistent).
        """
        errors = []

        if not isinstance(self.nodes.get(ROOT), DirectoryNode):
            errors.append("root directory is missing")

        for path, node in self.nodes.items():
            if path != normalize_path(path):
                errors.append(f"{path}: path is not normalized")
                continue

            parent_path, name = split_path(path)
            if parent_path is not None:
                parent = self.nodes.get(parent_path)
                if not isinstance(parent, DirectoryNode):
                    errors.append(f"{path}: parent {parent_path} is not a directory")
                elif name not in parent.children:
                    errors.append(f"{path}: not registered in {parent_path}")

            if isinstance(node, DirectoryNode):
                base = path.rstrip("/")
                for child in node.children:
                    if f"{base}/{child}" not in self.nodes:
                        errors.append(f"{path}: child '{child}' has no node")

        return errors

    @property
    def summary(self) -> str:
        """Brief human-readable summary, e.g. "4 directories, 1 file"."""
        directories = sum(
            1 for node in self.nodes.values() if isinstance(node, DirectoryNode)
        )
        files = len(self.nodes) - directories
        return (
            f"{directories} {'directory' if directories == 1 else 'directories'}, "
            f"{files} {'file' if files == 1 else 'files'}"
        )
