import csv
import logging
from pathlib import Path
from typing import List, Optional

from . import config
from .models import RomRecord


class ReportGenerator:
    """
    Collects one decision per discovered file during a run and writes them
    out as a CSV.
    """

    def __init__(self):
        self.rows: List[list] = []

    def add(self,
            record: RomRecord,
            status: str,
            dest: Optional[Path] = None,
            preferred: Optional[RomRecord] = None):
        self.rows.append([
            str(record.source_path),
            status,
            record.platform.display_name if record.platform else "",
            record.region.code if record.region else "",
            record.quality.marker,
            record.clean_title,
            str(dest) if dest else "",
            str(preferred.source_path) if preferred else "",
        ])

    def write_csv(self, output_csv: Path):
        logging.info(f"Writing report -> {output_csv}")
        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(config.REPORT_HEADERS)
            # Keep the report in source path order regardless of decision order
            for row in sorted(self.rows, key=lambda r: r[0].lower()):
                writer.writerow(row)
        logging.info(f"Report complete. {len(self.rows)} files listed.")
