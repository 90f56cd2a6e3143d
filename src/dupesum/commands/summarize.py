"""Summarize subcommand: print the wasted-space accounting of a duplicate report."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..report.group import DuplicateGroup
from ..report.parser import read_report
from ..report.summary import AggregationPolicy, Summary, SummaryOptions, summarize
from ..report.tree import PathTree
from ..utils.size import format_size

logger = logging.getLogger(__name__)


class ExportFailed(Exception):
    """Raised when the displayed groups cannot be written to the export file."""


@dataclass
class DisplayOptions:
    """Options controlling how a summary is printed.

    Attributes:
        use_bytes: If True, show sizes in bytes instead of human-readable binary units
        show_tree: If True, print the path tree of the displayed groups before the totals
        export_path: If set, also write the displayed groups there as msgpack records
    """
    use_bytes: bool = False
    show_tree: bool = False
    export_path: Path | None = None


def do_summarize(report_path: str | Path, options: SummaryOptions | None = None,
                 display: DisplayOptions | None = None) -> Summary:
    """Read a report, summarize it and print the result to standard output.

    Raises:
        OSError: The report cannot be read
        NoDuplicateGroups: The report contains no group
        ExportFailed: The export file cannot be written
    """
    if display is None:
        display = DisplayOptions()

    groups = read_report(report_path)
    summary = summarize(groups, options)
    print_summary(summary, display)

    if display.export_path is not None:
        try:
            export_groups(summary.displayed, display.export_path)
        except OSError as e:
            raise ExportFailed(f"Cannot write export {display.export_path}: {e}") from e

    return summary


def print_summary(summary: Summary, display: DisplayOptions | None = None) -> None:
    """Print displayed groups followed by the aggregate statistics."""
    if display is None:
        display = DisplayOptions()

    def size(value: int) -> str:
        return str(value) if display.use_bytes else format_size(value)

    for group in summary.displayed:
        print(f"{size(group.per_file_bytes)} each, {size(group.redundant_bytes)} total duplicates:")
        for path in group.paths:
            print(path)
        print()

    if display.show_tree:
        tree = PathTree.from_paths(path for group in summary.displayed for path in group.paths)
        for line in tree.render():
            print(line)
        print()

    print(f"Total number duplicates: {summary.total_duplicates}, "
          f"using {size(summary.wasted_bytes)} of disk space")

    if summary.policy is AggregationPolicy.FILE and summary.smallest_file is not None:
        print(f"smallest file: {size(summary.smallest_file)}")
    print(f"biggest file: {size(summary.biggest_file)}")
    print(f"biggest group: {size(summary.biggest_group_bytes)}")

    if summary.policy is AggregationPolicy.GROUP and summary.biggest_group is not None:
        for path in summary.biggest_group.paths:
            print(path)


def export_groups(groups: Iterable[DuplicateGroup], export_path: Path) -> int:
    """Write groups to a file as consecutive msgpack records.

    Returns:
        Number of groups written
    """
    count = 0
    with open(export_path, 'wb') as f:
        for group in groups:
            f.write(group.to_msgpack())
            count += 1
    logger.info(f"Exported {count} duplicate group(s) to {export_path}")
    return count
