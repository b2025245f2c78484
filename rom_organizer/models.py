from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from . import config


class Region(Enum):
    """
    Release market encoded as a parenthesized token in a GoodTools-style name.

    Combined codes (JU, UE, JE) are members in their own right and are never
    split into their constituent regions.
    """
    USA = "U"
    EUROPE = "E"
    JAPAN = "J"
    AUSTRALIA = "A"
    BRAZIL = "B"
    CHINA = "C"
    FRANCE = "F"
    GERMANY = "G"
    HOLLAND = "H"
    ITALY = "I"
    KOREA = "K"
    SPAIN = "S"
    WORLD = "W"
    FRENCH_CANADIAN = "FC"
    FINLAND = "FN"
    GREECE = "GR"
    HONG_KONG = "HK"
    NETHERLANDS = "NL"
    SWEDEN = "SW"
    ENGLAND = "UK"
    JAPAN_USA = "JU"
    USA_EUROPE = "UE"
    JAPAN_EUROPE = "JE"
    UNKNOWN = "Unk"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _REGION_NAMES[self]

    @property
    def constituents(self) -> Tuple["Region", ...]:
        """Single regions a combined code stands for. Empty for plain codes."""
        return _COMBINED_REGIONS.get(self, ())

    @property
    def is_combined(self) -> bool:
        return self in _COMBINED_REGIONS

    def covers(self, other: "Region") -> bool:
        """True if this combined code includes `other` without being it."""
        return other in self.constituents

    @property
    def preference_rank(self) -> Tuple[int, str]:
        """
        Sort key, lower = preferred.
        U, E, J first in that order, then every other code alphabetically,
        then the Unk sentinel.
        """
        if self.value in config.PREFERRED_REGIONS:
            return (0, str(config.PREFERRED_REGIONS.index(self.value)))
        if self is Region.UNKNOWN:
            return (2, "")
        return (1, self.value)

    @classmethod
    def from_code(cls, text: str) -> Optional["Region"]:
        """Case-insensitive lookup. Returns None for anything that isn't a region code."""
        return _REGIONS_BY_CODE.get(text.upper())


_REGION_NAMES = {
    Region.USA: "USA",
    Region.EUROPE: "Europe",
    Region.JAPAN: "Japan",
    Region.AUSTRALIA: "Australia",
    Region.BRAZIL: "Brazil",
    Region.CHINA: "China",
    Region.FRANCE: "France",
    Region.GERMANY: "Germany",
    Region.HOLLAND: "Holland",
    Region.ITALY: "Italy",
    Region.KOREA: "Korea",
    Region.SPAIN: "Spain",
    Region.WORLD: "World",
    Region.FRENCH_CANADIAN: "French Canadian",
    Region.FINLAND: "Finland",
    Region.GREECE: "Greece",
    Region.HONG_KONG: "Hong Kong",
    Region.NETHERLANDS: "Netherlands",
    Region.SWEDEN: "Sweden",
    Region.ENGLAND: "England",
    Region.JAPAN_USA: "Japan & USA",
    Region.USA_EUROPE: "USA & Europe",
    Region.JAPAN_EUROPE: "Japan & Europe",
    Region.UNKNOWN: "Unknown",
}

_COMBINED_REGIONS = {
    Region.JAPAN_USA: (Region.JAPAN, Region.USA),
    Region.USA_EUROPE: (Region.USA, Region.EUROPE),
    Region.JAPAN_EUROPE: (Region.JAPAN, Region.EUROPE),
}

_REGIONS_BY_CODE = {r.value.upper(): r for r in Region}


class Platform(Enum):
    """Cartridge platform, keyed by the exact file extension (no dot)."""
    NES = "nes"
    SNES = "smc"
    GENESIS = "gen"
    N64 = "z64"
    GAME_BOY = "gb"
    GAME_BOY_COLOR = "gbc"
    GAME_BOY_ADVANCE = "gba"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _PLATFORM_INFO[self][0]

    @property
    def directory(self) -> str:
        """Subdirectory name under the output root."""
        return _PLATFORM_INFO[self][1]

    @classmethod
    def from_extension(cls, ext: str) -> Optional["Platform"]:
        try:
            return cls(ext)
        except ValueError:
            return None


# Platform -> (display name, output directory)
_PLATFORM_INFO = {
    Platform.NES: ("NES", "NES"),
    Platform.SNES: ("SNES", "SNES"),
    Platform.GENESIS: ("Genesis", "Genesis"),
    Platform.N64: ("N64", "N64"),
    Platform.GAME_BOY: ("Game Boy", "GB"),
    Platform.GAME_BOY_COLOR: ("Game Boy Color", "GBC"),
    Platform.GAME_BOY_ADVANCE: ("Game Boy Advance", "GBA"),
}


class DumpQuality(Enum):
    """Dump quality marker. Declaration order is preference order."""
    VERIFIED = config.VERIFIED_MARKER
    FIXED = config.FIXED_MARKER
    ALTERNATE = config.ALTERNATE_MARKER
    NONE = ""

    @property
    def marker(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _QUALITY_ORDER.index(self)


_QUALITY_ORDER = list(DumpQuality)


@dataclass(frozen=True)
class RomRecord:
    """
    One ROM file found during a scan.

    Every derived field comes from `raw_name`; equality and hashing use the
    name alone, so the same file name found in two folders is one record.
    """
    raw_name: str
    source_path: Path = field(default=Path(), compare=False)
    region: Optional[Region] = field(default=None, compare=False)
    platform: Optional[Platform] = field(default=None, compare=False)
    quality: DumpQuality = field(default=DumpQuality.NONE, compare=False)
    clean_title: str = field(default="", compare=False)

    @property
    def extension(self) -> str:
        """Text after the last dot, or '' if the name has none."""
        if "." not in self.raw_name:
            return ""
        return self.raw_name.rsplit(".", 1)[1]

    @property
    def group_key(self) -> Tuple[Optional[Platform], str]:
        return (self.platform, self.clean_title)


@dataclass
class RunSummary:
    """Totals for one organize run. Returned by the orchestrator instead of kept in globals."""
    discovered: int = 0
    unknown_platform: int = 0
    filtered_region: int = 0
    filtered_unverified: int = 0
    duplicates: int = 0
    survivors: int = 0
    copied: int = 0
    already_present: int = 0
    failed: int = 0
    created_dirs: list = field(default_factory=list)
