"""DuplicateGroup record for one block of a duplicate-file report."""

from typing import Any

import msgpack


class DuplicateGroup:
    """A set of files reported as having identical content.

    Attributes:
        per_file_bytes: Size in bytes of one instance of the duplicated content, as stated by the
                        report header (e.g., "104857600 bytes each:").
        paths: Paths of every instance of the content, including the one considered the original,
               in order of appearance in the report.

    Derived values are computed on access and never stored:
        duplicate_count: Number of redundant copies, len(paths) - 1. A group listing zero or one
                         path contributes no duplicates rather than a negative count.
        redundant_bytes: Space that would be reclaimed by keeping a single instance,
                         per_file_bytes * duplicate_count.
    """

    def __init__(self, per_file_bytes: int, paths: list[str] | None = None):
        self.per_file_bytes: int = per_file_bytes
        self.paths: list[str] = paths if paths is not None else []

    @property
    def duplicate_count(self) -> int:
        return max(0, len(self.paths) - 1)

    @property
    def redundant_bytes(self) -> int:
        return self.per_file_bytes * self.duplicate_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DuplicateGroup):
            return False
        return self.per_file_bytes == other.per_file_bytes and self.paths == other.paths

    def __repr__(self) -> str:
        return f"DuplicateGroup({self.per_file_bytes}, {self.paths!r})"

    def to_msgpack(self) -> bytes:
        """Serialize to msgpack format for export.

        Returns:
            Msgpack-encoded bytes containing [per_file_bytes, paths]
        """
        result = msgpack.dumps([self.per_file_bytes, list(self.paths)])
        assert isinstance(result, bytes)
        return result

    @classmethod
    def from_msgpack(cls, data: bytes) -> "DuplicateGroup":
        """Deserialize from msgpack format."""
        decoded = msgpack.loads(data)
        return cls.from_unpacked(decoded)

    @classmethod
    def from_unpacked(cls, decoded: Any) -> "DuplicateGroup":
        """Build a group from an already unpacked [per_file_bytes, paths] record."""
        assert isinstance(decoded, list)
        per_file_bytes: int = decoded[0]
        paths: list[str] = decoded[1]
        return cls(per_file_bytes, list(paths))


def load_groups(data: bytes) -> list[DuplicateGroup]:
    """Decode consecutive msgpack group records, as written by an export."""
    unpacker = msgpack.Unpacker()
    unpacker.feed(data)
    return [DuplicateGroup.from_unpacked(decoded) for decoded in unpacker]
