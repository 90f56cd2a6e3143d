"""Prefix tree of duplicate file paths for hierarchical display."""

from collections.abc import Iterable, Iterator

# Tree drawing characters
BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
SPACE = "    "

SEPARATOR = "/"


class PathTree:
    """A node of a path prefix tree, keyed by path segment.

    Children are visited in lexicographic order of their segment names.
    """

    def __init__(self) -> None:
        self.children: dict[str, PathTree] = {}

    def add_path(self, path: str) -> None:
        """Insert a path, one tree level per segment.

        Empty segments (from repeated or trailing separators) are skipped. An absolute path is
        placed under a "/" node so that absolute and relative paths stay apart.
        """
        segments = [segment for segment in path.split(SEPARATOR) if segment]
        if path.startswith(SEPARATOR):
            segments.insert(0, SEPARATOR)
        self.add_segments(segments)

    def add_segments(self, segments: list[str]) -> None:
        node = self
        for segment in segments:
            node = node.children.setdefault(segment, PathTree())

    def render(self, prefix: str = "") -> Iterator[str]:
        """Yield the display lines of this node's descendants, depth first."""
        names = sorted(self.children)
        for i, name in enumerate(names):
            is_last = i == len(names) - 1
            yield f"{prefix}{LAST_BRANCH if is_last else BRANCH}{name}"
            yield from self.children[name].render(prefix + (SPACE if is_last else VERTICAL))

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "PathTree":
        tree = cls()
        for path in paths:
            tree.add_path(path)
        return tree
