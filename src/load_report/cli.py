"""Command line entry point for the report generator."""
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from src.shared.config import Config
from src.shared.logging import LoggingManager
from .constants import ReportConstants
from .exceptions import LoadReportError, UsageError
from .runner import ReportRunner


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def parse_args(argv: List[str]) -> Tuple[str, str, str]:
    """
    Split argv into (system A log, system B log, title).

    Raises:
        UsageError: Unless exactly three arguments follow the program name.
    """
    prog = Path(argv[0]).name if argv else "load-report"
    if len(argv) != 4:
        raise UsageError(ReportConstants.USAGE.format(prog=prog))
    return argv[1], argv[2], argv[3]


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the report and return the process exit status."""
    argv = sys.argv if argv is None else argv
    try:
        path_a, path_b, title = parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE

    config = Config()
    LoggingManager.setup_logging(config=config)

    try:
        ReportRunner(config).run(path_a, path_b, title)
    except LoadReportError:
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
