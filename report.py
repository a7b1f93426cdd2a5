# Entry point: python report.py <system_a_metrics> <system_b_metrics> <title>

import sys
from src.load_report.cli import main


if __name__ == "__main__":
    sys.exit(main())
