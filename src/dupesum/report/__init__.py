"""Report module for parsing and summarizing duplicate-file reports.

This package contains:
- group: DuplicateGroup record and its derived metrics
- parser: ReportParser state machine and report readers
- ranking: SortKey, sort_groups and filter_groups
- summary: Summary aggregation with AggregationPolicy
- tree: PathTree for hierarchical display of paths
"""
