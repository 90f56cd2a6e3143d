"""Tests for report module.

Test Files and Coverage:
========================

| Test File          | Test Classes                     | Tested Constructs               | Tested Functionalities                     |
|--------------------|----------------------------------|---------------------------------|--------------------------------------------|
| test_group.py      | DuplicateGroupTest               | DuplicateGroup, load_groups     | Derived metrics, degenerate groups, msgpack|
| test_parser.py     | ParseHeaderTest                  | parse_header()                  | Header recognition, malformed headers      |
|                    | ReportParserTest                 | ReportParser, parse_report()    | State machine, flush on EOF, streaming     |
|                    | ReadReportTest                   | read_report()                   | File and stdin input, I/O errors           |
| test_ranking.py    | SortGroupsTest, FilterGroupsTest | sort_groups(), filter_groups()  | Sort keys, stability, threshold            |
| test_summary.py    | SummarizeTest                    | summarize(), SummaryOptions     | Both policies, filtered statistics, empty  |
| test_tree.py       | PathTreeTest                     | PathTree                        | Insertion, ordering, box-drawing rendering |
"""
