"""Report runner to orchestrate one comparison run."""
from pathlib import Path
from typing import Union
import logging

from src.shared.config import Config
from .models import ComparisonReport
from .exceptions import LoadReportError
from .report_generator import ReportGenerator


logger = logging.getLogger(__name__)


class ReportRunner:
    """Orchestrates report generation and prints the console summary."""

    def __init__(self, config: Config):
        self.config = config
        self.generator = ReportGenerator(config)

    def run(self, path_a: Union[Path, str], path_b: Union[Path, str], title: str) -> ComparisonReport:
        """Run the complete report generation process."""
        try:
            logger.info(f"Generating report '{title}' from {path_a} and {path_b}")
            report = self.generator.generate(path_a, path_b, title)

            print(self.generator.result_exporter.format_summary(report.title, report.labels, report.metrics))

            logger.info(f"Report completed successfully: {report.output_path}")
            return report

        except LoadReportError as e:
            logger.error(f"Report failed: {e}")
            raise
