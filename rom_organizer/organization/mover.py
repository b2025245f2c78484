import shutil
import logging
from pathlib import Path
from typing import List, Set

from tqdm import tqdm

from ..exceptions import FileOperationError
from ..models import RunSummary
from .rules import PlannedCopy


class RomCopier:
    """
    Creates the output folders and copies planned survivors into them.
    A failure on one file is logged and counted; the run carries on.
    """

    def __init__(self, output_root: Path):
        self.output_root = output_root
        self._known_dirs: Set[Path] = set()

    def execute(self, plan: List[PlannedCopy], summary: RunSummary, dry_run: bool = False) -> RunSummary:
        if not plan:
            logging.info("No files need copying.")
            return summary

        logging.info(f"Copying {len(plan)} files (DryRun={dry_run})...")

        for item in tqdm(plan, desc="Organizing"):
            src = item.record.source_path
            dest = item.dest

            if dest.exists():
                logging.info(f"Already present, skipping: {dest}")
                summary.already_present += 1
                continue

            if dry_run:
                logging.info(f"[DRY RUN] Copy {src} -> {dest}")
                continue

            try:
                self.ensure_directories(dest.parent, summary)
                self.copy_file(src, dest)
                logging.info(f"copied {dest.name}")
                summary.copied += 1
            except FileOperationError as e:
                logging.error(f"Failed to copy {src} -> {dest}: {e}")
                summary.failed += 1

        return summary

    def ensure_directories(self, folder: Path, summary: RunSummary):
        """Creates output_root and each folder below it down to `folder`, one level at a time."""
        chain = [folder]
        while chain[-1] != self.output_root and chain[-1] != chain[-1].parent:
            chain.append(chain[-1].parent)

        for directory in reversed(chain):
            if directory in self._known_dirs:
                continue
            if self.make_directory(directory):
                summary.created_dirs.append(directory)
            self._known_dirs.add(directory)

    def make_directory(self, path: Path) -> bool:
        """
        Creates exactly `path` (no parents). Returns False if it already
        existed, which is not an error.
        """
        try:
            path.mkdir()
        except FileExistsError:
            if not path.is_dir():
                raise FileOperationError(f"{path} exists and is not a directory")
            return False
        except OSError as e:
            raise FileOperationError(f"Cannot create directory {path}: {e}") from e
        logging.info(f"created directory: {path}")
        return True

    def copy_file(self, src: Path, dest: Path):
        if dest.exists():
            raise FileOperationError(f"Destination already exists: {dest}")
        try:
            shutil.copy2(str(src), str(dest))
        except OSError as e:
            raise FileOperationError(str(e)) from e
