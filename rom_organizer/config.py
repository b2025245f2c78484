"""
Configuration constants for the ROM organizer.
"""

# --- Output Layout ---
OUTPUT_DIR_NAME = "filtered"
UNKNOWN_REGION_DIR = "_unknown_region"
LOG_FILE_NAME = "rom_organizer.log"

# --- Filename Parsing ---
# Dump quality markers, checked in this order. First match wins.
VERIFIED_MARKER = "[!]"
FIXED_MARKER = "[f]"
ALTERNATE_MARKER = "[a]"
QUALITY_MARKERS = (VERIFIED_MARKER, FIXED_MARKER, ALTERNATE_MARKER)

# --- Ranking ---
# Regions ranked ahead of everything else, best first.
# Remaining regions compare alphabetically by code.
PREFERRED_REGIONS = ("U", "E", "J")

# --- Region Filter ---
# What to do with combined codes (e.g. JU) that contain the filter region
MULTI_REGION_MATCH = "match"
MULTI_REGION_UNKNOWN = "unknown"
MULTI_REGION_EXCLUDE = "exclude"
MULTI_REGION_POLICIES = (MULTI_REGION_MATCH, MULTI_REGION_UNKNOWN, MULTI_REGION_EXCLUDE)
DEFAULT_MULTI_REGION_POLICY = MULTI_REGION_UNKNOWN

# --- Reporting ---
REPORT_HEADERS = [
    "Source Path",
    "Status",
    "Platform",
    "Region",
    "Quality",
    "Clean Title",
    "Destination",
    "Preferred Copy",
]

STATUS_KEPT = "Kept"
STATUS_DUPLICATE = "Duplicate"
STATUS_UNKNOWN_PLATFORM = "Unknown Platform"
STATUS_OUTSIDE_REGION = "Outside Region"
STATUS_NOT_VERIFIED = "Not Verified"
