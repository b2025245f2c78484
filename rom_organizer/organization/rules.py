import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .. import config
from ..exceptions import ConfigurationError
from ..models import DumpQuality, Region, RomRecord
from ..ranking.comparator import compare_records


@dataclass
class PlannedCopy:
    record: RomRecord
    dest: Path


class DestinationPlanner:
    """
    Decides which records are eligible for output and where each survivor goes:

        <output_root>/<platform>/[<region>/]<clean title>.<ext>

    `output_root` is already the `filtered` folder.
    """

    def __init__(self,
                 output_root: Path,
                 separate_by_region: bool = False,
                 region_filter: Optional[Region] = None,
                 multi_region_policy: str = config.DEFAULT_MULTI_REGION_POLICY,
                 verified_only: bool = False):
        if multi_region_policy not in config.MULTI_REGION_POLICIES:
            raise ConfigurationError(
                f"Unknown multi-region policy {multi_region_policy!r} "
                f"(expected one of {', '.join(config.MULTI_REGION_POLICIES)})"
            )
        self.output_root = output_root
        self.separate_by_region = separate_by_region
        self.region_filter = region_filter
        self.multi_region_policy = multi_region_policy
        self.verified_only = verified_only
        self.collisions: List[Tuple[RomRecord, RomRecord]] = []

    def rejection_reason(self, record: RomRecord) -> Optional[str]:
        """
        Returns the report status for a record that must not be output,
        or None if it is eligible. Applied before duplicate resolution.
        """
        if self.verified_only and record.quality is not DumpQuality.VERIFIED:
            return config.STATUS_NOT_VERIFIED

        if self.region_filter is None or self._is_unknown(record.region):
            return None

        region = record.region
        if region is self.region_filter:
            return None
        if region.covers(self.region_filter):
            if self.multi_region_policy == config.MULTI_REGION_EXCLUDE:
                return config.STATUS_OUTSIDE_REGION
            return None
        return config.STATUS_OUTSIDE_REGION

    def region_folder(self, record: RomRecord) -> str:
        region = record.region
        if self._is_unknown(region):
            return config.UNKNOWN_REGION_DIR
        if self.region_filter is None or region is self.region_filter:
            return region.code
        if region.covers(self.region_filter):
            if self.multi_region_policy == config.MULTI_REGION_MATCH:
                return region.code
            return config.UNKNOWN_REGION_DIR
        return region.code

    def destination_for(self, record: RomRecord) -> Path:
        folder = self.output_root / record.platform.directory
        if self.separate_by_region:
            folder = folder / self.region_folder(record)
        return folder / self.file_name(record)

    def file_name(self, record: RomRecord) -> str:
        ext = record.extension
        title = record.clean_title or record.raw_name
        # With no region the clean title is the whole raw name, extension included
        if title.endswith(f".{ext}"):
            return title
        return f"{title}.{ext}"

    def plan_all(self, survivors: List[RomRecord]) -> List[PlannedCopy]:
        """
        One PlannedCopy per destination. Survivors of different groups can
        still land on the same file (`Zelda (U).nes` and `Zelda.nes`); the
        comparator picks which one is copied and the other is recorded in
        `collisions` as (loser, winner).
        """
        dropped = []
        planned: Dict[Path, PlannedCopy] = {}
        for record in survivors:
            dest = self.destination_for(record)
            current = planned.get(dest)
            if current is None:
                planned[dest] = PlannedCopy(record, dest)
                continue

            if compare_records(record, current.record) < 0:
                loser = current.record
                planned[dest] = PlannedCopy(record, dest)
            else:
                loser = record
            dropped.append((loser, dest))

        self.collisions = [(loser, planned[dest].record) for loser, dest in dropped]
        for loser, winner in self.collisions:
            logging.warning(f"Destination collision: {loser.source_path} would overwrite {winner.raw_name}, skipping")
        return list(planned.values())

    def _is_unknown(self, region: Optional[Region]) -> bool:
        return region is None or region is Region.UNKNOWN
