import logging

from .report.group import DuplicateGroup
from .report.parser import ReportParser, parse_report, read_report
from .report.ranking import SortKey, sort_groups, filter_groups
from .report.summary import AggregationPolicy, NoDuplicateGroups, Summary, SummaryOptions, summarize
from .report.tree import PathTree

logging.getLogger(__name__).addHandler(logging.NullHandler())
