"""Tests for summary aggregation."""
import unittest

from dupesum.report.group import DuplicateGroup
from dupesum.report.ranking import SortKey
from dupesum.report.summary import AggregationPolicy, NoDuplicateGroups, SummaryOptions, summarize

MIB = 1024 * 1024


def two_block_groups():
    return [
        DuplicateGroup(104857600, ['/a/x.bin', '/a/y.bin']),
        DuplicateGroup(2097152, ['/b/p.txt', '/b/q.txt', '/b/r.txt']),
    ]


class SummarizeTest(unittest.TestCase):
    """Tests for summarize function."""

    def test_default_options(self):
        options = SummaryOptions()

        self.assertEqual(10 * MIB, options.min_size)
        self.assertEqual(SortKey.REDUNDANT, options.sort_by)
        self.assertEqual(AggregationPolicy.GROUP, options.policy)

    def test_two_blocks_with_10_mib_threshold(self):
        """Only the 100 MiB group is displayed, but duplicates are counted across all groups."""
        summary = summarize(two_block_groups(), SummaryOptions(min_size=10 * MIB))

        self.assertEqual([DuplicateGroup(104857600, ['/a/x.bin', '/a/y.bin'])], summary.displayed)
        self.assertEqual(3, summary.total_duplicates)
        self.assertEqual(100 * MIB, summary.wasted_bytes)
        self.assertEqual(104857600, summary.biggest_file)
        self.assertEqual(104857600, summary.biggest_group_bytes)
        self.assertEqual(['/a/x.bin', '/a/y.bin'], summary.biggest_group.paths)
        self.assertIsNone(summary.smallest_file)

    def test_displayed_groups_are_sorted(self):
        groups = [
            DuplicateGroup(30, ['/a', '/b']),
            DuplicateGroup(10, ['/c', '/d', '/e', '/f', '/g']),
            DuplicateGroup(20, ['/h', '/i']),
        ]

        by_redundant = summarize(groups, SummaryOptions(min_size=0))
        by_size = summarize(groups, SummaryOptions(min_size=0, sort_by=SortKey.SIZE))

        self.assertEqual([20, 30, 40], [group.redundant_bytes for group in by_redundant.displayed])
        self.assertEqual([10, 20, 30], [group.per_file_bytes for group in by_size.displayed])

    def test_group_policy_biggest_group_ignores_threshold(self):
        """The biggest group comes from every parsed group, even one hidden by the threshold."""
        hidden_but_wasteful = DuplicateGroup(MIB, ['/many'] * 201)  # 200 MiB redundant
        shown = DuplicateGroup(50 * MIB, ['/big/1', '/big/2'])  # 50 MiB redundant

        summary = summarize([hidden_but_wasteful, shown], SummaryOptions(min_size=10 * MIB))

        self.assertEqual([shown], summary.displayed)
        self.assertIs(hidden_but_wasteful, summary.biggest_group)
        self.assertEqual(200 * MIB, summary.biggest_group_bytes)
        self.assertEqual(50 * MIB, summary.biggest_file)
        self.assertEqual(50 * MIB, summary.wasted_bytes)

    def test_group_policy_biggest_file_among_displayed_only(self):
        hidden = DuplicateGroup(5 * MIB, ['/a', '/b'])

        summary = summarize([hidden], SummaryOptions(min_size=10 * MIB))

        self.assertEqual([], summary.displayed)
        self.assertEqual(0, summary.biggest_file)
        self.assertEqual(0, summary.wasted_bytes)
        self.assertEqual(1, summary.total_duplicates)
        self.assertIs(hidden, summary.biggest_group)

    def test_file_policy_extremal_files_ignore_threshold(self):
        """Smallest and biggest file come from the full sorted sequence."""
        groups = [
            DuplicateGroup(20 * MIB, ['/m/1', '/m/2']),
            DuplicateGroup(MIB // 2, ['/s/1', '/s/2', '/s/3']),
            DuplicateGroup(30 * MIB, ['/l/1', '/l/2']),
        ]

        summary = summarize(groups, SummaryOptions(min_size=MIB, sort_by=SortKey.SIZE,
                                                   policy=AggregationPolicy.FILE))

        self.assertEqual(MIB // 2, summary.smallest_file)
        self.assertEqual(30 * MIB, summary.biggest_file)
        self.assertEqual([20 * MIB, 30 * MIB], [group.per_file_bytes for group in summary.displayed])
        self.assertEqual(30 * MIB, summary.biggest_group_bytes)
        self.assertEqual(50 * MIB, summary.wasted_bytes)
        self.assertEqual(4, summary.total_duplicates)
        self.assertIsNone(summary.biggest_group)

    def test_file_policy_biggest_group_among_displayed_only(self):
        hidden_but_wasteful = DuplicateGroup(MIB, ['/many'] * 201)
        shown = DuplicateGroup(50 * MIB, ['/big/1', '/big/2'])

        summary = summarize([hidden_but_wasteful, shown], SummaryOptions(
            min_size=10 * MIB, sort_by=SortKey.SIZE, policy=AggregationPolicy.FILE))

        self.assertEqual(50 * MIB, summary.biggest_group_bytes)

    def test_file_policy_nothing_displayed(self):
        summary = summarize([DuplicateGroup(10, ['/a', '/b'])], SummaryOptions(
            min_size=MIB, policy=AggregationPolicy.FILE))

        self.assertEqual(0, summary.biggest_group_bytes)
        self.assertEqual(10, summary.smallest_file)
        self.assertEqual(10, summary.biggest_file)

    def test_degenerate_groups_count_zero_duplicates(self):
        groups = [DuplicateGroup(MIB * 20), DuplicateGroup(MIB * 20, ['/only']), DuplicateGroup(MIB * 20, ['/a', '/b'])]

        summary = summarize(groups, SummaryOptions())

        self.assertEqual(1, summary.total_duplicates)
        self.assertEqual(20 * MIB, summary.wasted_bytes)

    def test_empty_input_reports_no_data(self):
        for policy in AggregationPolicy:
            with self.assertRaises(NoDuplicateGroups):
                summarize([], SummaryOptions(policy=policy))

    def test_no_duplicate_groups_message(self):
        self.assertEqual("No duplicate groups found", str(NoDuplicateGroups()))

    def test_accepts_iterators(self):
        summary = summarize(iter(two_block_groups()), SummaryOptions(min_size=0))

        self.assertEqual(2, len(summary.displayed))


if __name__ == '__main__':
    unittest.main()
