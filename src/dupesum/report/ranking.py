"""Ranking and threshold filtering of duplicate groups."""

from collections.abc import Callable, Iterable
from enum import Enum

from .group import DuplicateGroup

DEFAULT_MIN_SIZE = 10 * 1024 * 1024


class SortKey(Enum):
    """Key used to rank duplicate groups, smallest first."""
    REDUNDANT = "redundant"  # Total redundant bytes of the group
    SIZE = "size"  # Size of a single file of the group


_SORT_KEYS: dict[SortKey, Callable[[DuplicateGroup], int]] = {
    SortKey.REDUNDANT: lambda group: group.redundant_bytes,
    SortKey.SIZE: lambda group: group.per_file_bytes,
}


def sort_groups(groups: Iterable[DuplicateGroup], sort_key: SortKey) -> list[DuplicateGroup]:
    """Sort groups ascending by the given key.

    The sort is stable: groups with equal keys keep their relative input order.

    Returns:
        A new list; the input is not modified
    """
    return sorted(groups, key=_SORT_KEYS[sort_key])


def filter_groups(groups: Iterable[DuplicateGroup], min_size: int) -> list[DuplicateGroup]:
    """Select the groups whose per-file size is at least min_size, preserving order."""
    return [group for group in groups if group.per_file_bytes >= min_size]
