import logging
from pathlib import Path
from typing import Optional, Set

from . import config
from .models import Region, RunSummary
from .scanning.filesystem import RomScanner
from .ranking.resolver import DuplicateResolver
from .organization.rules import DestinationPlanner
from .organization.mover import RomCopier
from .reporting import ReportGenerator


class RomOrganizerApp:
    def __init__(self,
                 separate_by_region: bool = False,
                 region_filter: Optional[Region] = None,
                 multi_region_policy: str = config.DEFAULT_MULTI_REGION_POLICY,
                 verified_only: bool = False):
        self.separate_by_region = separate_by_region
        self.region_filter = region_filter
        self.multi_region_policy = multi_region_policy
        self.verified_only = verified_only

    def organize(self,
                 src_root: Path,
                 dest_root: Optional[Path] = None,
                 dry_run: bool = False,
                 skip_dirs: Optional[Set[Path]] = None,
                 report_csv: Optional[Path] = None) -> RunSummary:
        """
        Runs the whole pipeline in one pass.
        1. Scan & Parse
        2. Filter (verified-only, region)
        3. Resolve duplicates
        4. Plan destinations
        5. Copy

        Output lands in <dest_root>/filtered. dest_root defaults to src_root.
        """
        dest_root = dest_root or src_root
        output_root = dest_root / config.OUTPUT_DIR_NAME
        summary = RunSummary()
        report = ReportGenerator()

        planner = DestinationPlanner(
            output_root,
            separate_by_region=self.separate_by_region,
            region_filter=self.region_filter,
            multi_region_policy=self.multi_region_policy,
            verified_only=self.verified_only,
        )

        # --- Step 1: Scanning ---
        # Never re-ingest our own output
        skip = set(skip_dirs or set())
        skip.add(output_root)

        region_desc = self.region_filter.code if self.region_filter else "any"
        logging.info(f"Scanning {src_root} (Region={region_desc}, VerifiedOnly={self.verified_only})...")
        scanner = RomScanner()
        records = list(scanner.scan(src_root, skip))
        summary.discovered = len(records)
        logging.info(f"Scan complete. Found {summary.discovered} files.")

        # --- Step 2: Filtering ---
        candidates = []
        for record in records:
            reason = planner.rejection_reason(record) if record.platform else None
            if reason is None:
                candidates.append(record)
                continue
            if reason == config.STATUS_NOT_VERIFIED:
                summary.filtered_unverified += 1
            else:
                summary.filtered_region += 1
            logging.debug(f"{reason}: {record.source_path}")
            report.add(record, reason)

        # --- Step 3: Resolving ---
        resolver = DuplicateResolver()
        survivors = resolver.resolve(candidates)
        summary.unknown_platform = len(resolver.skipped)
        summary.duplicates = len(resolver.rejected)
        summary.survivors = len(survivors)
        for record in resolver.skipped:
            report.add(record, config.STATUS_UNKNOWN_PLATFORM)
        for loser, winner in resolver.rejected:
            report.add(loser, config.STATUS_DUPLICATE, preferred=winner)
        logging.info(
            f"Resolved {summary.survivors} titles "
            f"({summary.duplicates} duplicates, {summary.unknown_platform} unknown platform)."
        )

        # --- Step 4: Planning ---
        plan = planner.plan_all(survivors)
        for loser, winner in planner.collisions:
            report.add(loser, config.STATUS_DUPLICATE, preferred=winner)
        summary.duplicates += len(planner.collisions)
        summary.survivors = len(plan)
        for item in plan:
            report.add(item.record, config.STATUS_KEPT, dest=item.dest)

        # --- Step 5: Execution ---
        copier = RomCopier(output_root)
        copier.execute(plan, summary, dry_run=dry_run)

        if report_csv:
            report.write_csv(report_csv)

        logging.info(
            f"ALL DONE. Copied {summary.copied}, already present {summary.already_present}, "
            f"failed {summary.failed}."
        )
        return summary
