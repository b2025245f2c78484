import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import Platform, RomRecord
from .comparator import compare_records, sort_records

GroupKey = Tuple[Platform, str]


class DuplicateResolver:
    """
    Picks one record per (platform, clean title).

    After `resolve` runs, `skipped` holds the records dropped for having no
    known platform and `rejected` lists (loser, winner) pairs.
    """

    def __init__(self):
        self.skipped: List[RomRecord] = []
        self.rejected: List[Tuple[RomRecord, RomRecord]] = []

    def resolve(self, records: Iterable[RomRecord]) -> List[RomRecord]:
        self.skipped = []
        self.rejected = []

        # dicts keep insertion order, so groups and members stay in encounter order
        groups: Dict[GroupKey, List[RomRecord]] = defaultdict(list)
        for record in records:
            if record.platform is None:
                logging.warning(f"Skipping {record.source_path}: unknown platform")
                self.skipped.append(record)
                continue
            groups[record.group_key].append(record)

        winners = []
        for group in groups.values():
            best = self._pick_best(group)
            for record in group:
                if record is not best:
                    logging.debug(f"Duplicate: {record.source_path} loses to {best.raw_name}")
                    self.rejected.append((record, best))
            winners.append(best)

        return sort_records(winners)

    def _pick_best(self, group: List[RomRecord]) -> RomRecord:
        best: Optional[RomRecord] = None
        for record in group:
            # strict '<' keeps the first-seen record on ties
            if best is None or compare_records(record, best) < 0:
                best = record
        return best


def resolve_duplicates(records: Iterable[RomRecord]) -> List[RomRecord]:
    return DuplicateResolver().resolve(records)
