"""Aggregate statistics over the duplicate groups of a report."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .group import DuplicateGroup
from .ranking import DEFAULT_MIN_SIZE, SortKey, filter_groups, sort_groups

logger = logging.getLogger(__name__)


class NoDuplicateGroups(Exception):
    """Raised when a report contains no duplicate group to summarize."""

    def __init__(self, message: str = "No duplicate groups found"):
        super().__init__(message)


class AggregationPolicy(Enum):
    """Where the extremal statistics of a summary come from.

    Both policies count duplicates over every parsed group and wasted space over the displayed
    groups only. They differ for the extremal values:

    GROUP: biggest_file is the largest per-file size among displayed groups, and biggest_group is
           the last group of the full sorted sequence, even if the threshold hid it.
    FILE: smallest_file and biggest_file are the per-file sizes of the first and last groups of
          the full sorted sequence, and biggest_group_bytes is the largest redundant size among
          displayed groups.
    """
    GROUP = "group"
    FILE = "file"


@dataclass
class SummaryOptions:
    """Options for ranking, filtering and aggregating duplicate groups.

    Attributes:
        min_size: Minimum per-file size in bytes for a group to be displayed
        sort_by: Ranking key applied to the full group sequence
        policy: Source of the extremal statistics
    """
    min_size: int = DEFAULT_MIN_SIZE
    sort_by: SortKey = SortKey.REDUNDANT
    policy: AggregationPolicy = AggregationPolicy.GROUP


@dataclass
class Summary:
    """Result of summarizing a report.

    Attributes:
        displayed: Groups passing the threshold, in sorted order
        total_duplicates: Redundant copies across all parsed groups, displayed or not
        wasted_bytes: Redundant bytes across displayed groups
        biggest_file: Largest per-file size, per the policy
        biggest_group_bytes: Redundant bytes of the biggest group, per the policy
        biggest_group: The biggest group itself (GROUP policy only)
        smallest_file: Smallest per-file size (FILE policy only)
    """
    policy: AggregationPolicy
    displayed: list[DuplicateGroup] = field(default_factory=list)
    total_duplicates: int = 0
    wasted_bytes: int = 0
    biggest_file: int = 0
    biggest_group_bytes: int = 0
    biggest_group: DuplicateGroup | None = None
    smallest_file: int | None = None


def summarize(groups: Iterable[DuplicateGroup], options: SummaryOptions | None = None) -> Summary:
    """Rank, filter and aggregate duplicate groups.

    Args:
        groups: All groups parsed from a report
        options: Summary options; defaults to SummaryOptions()

    Returns:
        Summary for the groups

    Raises:
        NoDuplicateGroups: There are no groups at all
    """
    if options is None:
        options = SummaryOptions()

    ranked = sort_groups(groups, options.sort_by)
    if not ranked:
        raise NoDuplicateGroups()

    displayed = filter_groups(ranked, options.min_size)
    logger.info(f"Displaying {len(displayed)} of {len(ranked)} duplicate group(s) "
                f"at or above {options.min_size} bytes per file")

    summary = Summary(
        policy=options.policy,
        displayed=displayed,
        total_duplicates=sum(group.duplicate_count for group in ranked),
        wasted_bytes=sum(group.redundant_bytes for group in displayed),
    )

    if options.policy is AggregationPolicy.GROUP:
        summary.biggest_file = max((group.per_file_bytes for group in displayed), default=0)
        summary.biggest_group = ranked[-1]
        summary.biggest_group_bytes = ranked[-1].redundant_bytes
    else:
        summary.smallest_file = ranked[0].per_file_bytes
        summary.biggest_file = ranked[-1].per_file_bytes
        summary.biggest_group_bytes = max((group.redundant_bytes for group in displayed), default=0)

    return summary
