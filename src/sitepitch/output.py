"""Report writer: persists the finished report text."""

import json
import logging
from pathlib import Path
from typing import Optional

from sitepitch.constants import DEFAULT_REPORT_FILE
from sitepitch.exceptions import ReportWriteError

logger = logging.getLogger(__name__)


class ReportWriter:
    """Writes reports as UTF-8 files below an output directory."""

    def __init__(self, output_dir: str = "."):
        """Initialize report writer.

        Args:
            output_dir: Directory that relative report paths are resolved against
        """
        self.output_dir = Path(output_dir)

    def write(self, report: str, filename: Optional[str] = None) -> Path:
        """Write report text to a file.

        Args:
            report: Report text
            filename: Target file name or path (default SALGS-RAPPORT.txt)

        Returns:
            Path of the written file

        Raises:
            ReportWriteError: If the file cannot be written
        """
        path = self.output_dir / (filename or DEFAULT_REPORT_FILE)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(report)
        except OSError as e:
            raise ReportWriteError(f"Could not write report to {path}: {e}", target=str(path))

        logger.info("Report written to %s", path)
        return path

    def write_json(self, data: dict, filename: str) -> Path:
        """Write a JSON document (signals, findings and report) to a file."""
        return self.write(json.dumps(data, indent=2, ensure_ascii=False), filename)
