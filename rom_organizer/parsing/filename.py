"""
Filename metadata parser.

Turns a GoodTools-style ROM file name such as ``Metroid (U) [!].nes`` into a
RomRecord. Nothing here raises: a name that doesn't follow the convention
just produces a record with empty fields.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .. import config
from ..models import DumpQuality, Platform, Region, RomRecord


def find_first_group(raw_name: str) -> Optional[Tuple[int, str]]:
    """
    Returns (index of the opening paren, text inside) for the first
    ``(...)`` group, or None.

    Nested parentheses are not supported: the group runs from the first
    '(' to the first ')' after it.
    """
    start = raw_name.find("(")
    if start == -1:
        return None
    end = raw_name.find(")", start + 1)
    if end == -1:
        return None
    return start, raw_name[start + 1:end]


def parse_region(raw_name: str) -> Optional[Region]:
    group = find_first_group(raw_name)
    if group is None:
        return None
    return Region.from_code(group[1])


def parse_platform(raw_name: str) -> Optional[Platform]:
    if "." not in raw_name:
        return None
    return Platform.from_extension(raw_name.rsplit(".", 1)[1])


def parse_quality(raw_name: str) -> DumpQuality:
    for marker in config.QUALITY_MARKERS:
        if marker in raw_name:
            return DumpQuality(marker)
    return DumpQuality.NONE


def clean_title(raw_name: str, region: Optional[Region]) -> str:
    """Everything before the region group, trimmed. The raw name if there is no region."""
    if region is None:
        return raw_name
    group = find_first_group(raw_name)
    # The region came from the first group, so the group is always there.
    return raw_name[:group[0]].strip()


def parse_rom_name(raw_name: str, source_path: Union[Path, str, None] = None) -> RomRecord:
    region = parse_region(raw_name)
    record = RomRecord(
        raw_name=raw_name,
        source_path=Path(source_path) if source_path is not None else Path(raw_name),
        region=region,
        platform=parse_platform(raw_name),
        quality=parse_quality(raw_name),
        clean_title=clean_title(raw_name, region),
    )
    logging.debug(
        f"Parsed {raw_name!r}: title={record.clean_title!r} "
        f"region={region.code if region else None} "
        f"platform={record.platform.display_name if record.platform else None} "
        f"quality={record.quality.name}"
    )
    return record
