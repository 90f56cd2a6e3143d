import argparse
import cProfile
import functools
import logging
import os
import sys
import textwrap
import time
from pathlib import Path

from .config.path import resolve_settings_path
from .config.settings import (
    Settings, SETTING_MIN_SIZE, SETTING_SORT_BY, SETTING_POLICY, SETTING_LOG_PATH, SETTING_LOG_LEVEL
)
from .commands.summarize import DisplayOptions, ExportFailed, do_summarize
from .report.ranking import DEFAULT_MIN_SIZE, SortKey
from .report.summary import AggregationPolicy, NoDuplicateGroups, SummaryOptions
from .utils.size import parse_size

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
PROFILE_ENVIRONMENT_VARIABLE = 'DUPESUM_PROFILE'

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dupesum',
        description='Summarize a duplicate-file report (fdupes --size format) into an accounting of wasted '
                    'disk space.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              dupesum duplicates.txt
              dupesum --min-size 1MiB --sort-by size --policy file duplicates.txt
              fdupes --recurse --size /data | dupesum -

            Settings are read from --config, the DUPESUM_CONFIG environment variable, or the nearest
            .dupesum.toml above the current directory. Command line options take precedence.
            ''').strip()
    )
    parser.add_argument(
        'report',
        nargs='?',
        metavar='REPORT',
        help='Path to the duplicate report, or "-" to read standard input')
    parser.add_argument(
        '--min-size',
        metavar='SIZE',
        help='Hide groups whose files are smaller than SIZE, in bytes or with a binary suffix such as 10MiB '
             f'(default: {DEFAULT_MIN_SIZE})')
    parser.add_argument(
        '--sort-by',
        choices=[key.value for key in SortKey],
        help='Rank groups by: redundant (total redundant bytes, default) or size (size of one file)')
    parser.add_argument(
        '--policy',
        choices=[policy.value for policy in AggregationPolicy],
        help='Statistics policy: group (biggest file among shown groups, biggest group of all, default) or '
             'file (smallest and biggest file of all, biggest group among shown groups)')
    parser.add_argument(
        '--bytes',
        action='store_true',
        help='Show sizes in bytes instead of human-readable format (e.g., 1048576 instead of 1 MiB)')
    parser.add_argument(
        '--tree',
        action='store_true',
        help='Also print the directory tree of the shown duplicate files')
    parser.add_argument(
        '--export',
        metavar='PATH',
        help='Write the shown groups to PATH as msgpack records')
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to a TOML settings file')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log debug information to standard error')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, uses logging.path from settings or no '
             'logging.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=LOG_LEVELS,
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when a log file is used.')
    return parser


def configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure logging from the command line, falling back to settings.

    A log file receives records at the configured level. --verbose adds DEBUG records on standard
    error, alongside the log file if there is one. Nothing is configured when neither is requested.
    """
    log_file = args.log_file or settings.get(SETTING_LOG_PATH)
    log_level = str(args.log_level or settings.get(SETTING_LOG_LEVEL) or 'INFO').upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"invalid logging level: {log_level!r}")

    handlers: list[logging.Handler] = []
    if log_file:
        file_handler = logging.FileHandler(str(log_file))
        file_handler.setLevel(getattr(logging, log_level))
        handlers.append(file_handler)
    if args.verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        handlers.append(stderr_handler)

    if handlers:
        logging.basicConfig(
            handlers=handlers,
            level=min(handler.level for handler in handlers),
            format=LOG_FORMAT
        )


def profiled(func):
    """Dump a cProfile of each call to {DUPESUM_PROFILE}/dupesum_{timestamp_ms}_{pid}.prof.

    Calls run unprofiled when DUPESUM_PROFILE is not set.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        profile_dir = os.environ.get(PROFILE_ENVIRONMENT_VARIABLE)
        if not profile_dir:
            return func(*args, **kwargs)

        profile_file = Path(profile_dir) / f"dupesum_{int(time.time() * 1000)}_{os.getpid()}.prof"
        profile_file.parent.mkdir(parents=True, exist_ok=True)

        profiler = cProfile.Profile()
        try:
            return profiler.runcall(func, *args, **kwargs)
        finally:
            profiler.dump_stats(str(profile_file))

    return wrapper


def build_summary_options(args: argparse.Namespace, settings: Settings) -> SummaryOptions:
    """Combine command line arguments and settings into SummaryOptions.

    Raises:
        ValueError: A size, sort key or policy is invalid
    """
    min_size = args.min_size if args.min_size is not None else settings.get(SETTING_MIN_SIZE, DEFAULT_MIN_SIZE)
    sort_by = args.sort_by or settings.get(SETTING_SORT_BY, SortKey.REDUNDANT.value)
    policy = args.policy or settings.get(SETTING_POLICY, AggregationPolicy.GROUP.value)

    return SummaryOptions(
        min_size=parse_size(min_size),
        sort_by=SortKey(sort_by),
        policy=AggregationPolicy(policy)
    )


@profiled
def dupesum_main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.report is None:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    try:
        settings = Settings(resolve_settings_path(args.config))
        configure_logging(args, settings)
        options = build_summary_options(args, settings)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if settings.path is not None:
        logger.info(f"Loaded settings from {settings.path}")

    display = DisplayOptions(
        use_bytes=args.bytes,
        show_tree=args.tree,
        export_path=Path(args.export) if args.export else None
    )

    try:
        do_summarize(args.report, options, display)
    except NoDuplicateGroups as e:
        logger.warning(str(e))
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except ExportFailed as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read report {args.report}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    dupesum_main()
