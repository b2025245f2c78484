"""
Preference order between ROM records.

compare_records(a, b) < 0 means `a` is the copy to keep. Keys are applied in
sequence and each one only breaks ties left by the ones before it:

1. different clean titles: not duplicates, ordered by title then raw name
2. dump quality: [!] < [f] < [a] < none
3. region: U < E < J < other codes alphabetically < Unk < no region
4. same length names: alphabetical
5. otherwise the shorter name
"""
from functools import cmp_to_key
from typing import Optional, Tuple

from ..models import Region, RomRecord


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def region_rank(region: Optional[Region]) -> Tuple[int, str]:
    if region is None:
        return (3, "")
    return region.preference_rank


def compare_records(a: RomRecord, b: RomRecord) -> int:
    if a.raw_name == b.raw_name:
        return 0

    if a.clean_title != b.clean_title:
        return _cmp((a.clean_title, a.raw_name), (b.clean_title, b.raw_name))

    result = _cmp(a.quality.rank, b.quality.rank)
    if result:
        return result

    result = _cmp(region_rank(a.region), region_rank(b.region))
    if result:
        return result

    if len(a.raw_name) == len(b.raw_name):
        return _cmp(a.raw_name, b.raw_name)
    return _cmp(len(a.raw_name), len(b.raw_name))


rank_key = cmp_to_key(compare_records)


def sort_records(records):
    """Returns a new list, most preferred first."""
    return sorted(records, key=rank_key)
