import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config
from .core import RomOrganizerApp
from .exceptions import ConfigurationError
from .models import Region


def setup_logging(output_root: Path, verbose: bool):
    """Sets up logging to both console and a file in the output folder."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Create the output folder up front so we can log there
    output_root.mkdir(parents=True, exist_ok=True)
    log_file = output_root / config.LOG_FILE_NAME

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="ROM Organizer: keep the best dump of every title")

    p.add_argument("src", type=Path, nargs="?", default=Path.cwd(), help="Directory tree to scan (default: current directory)")
    p.add_argument("--dest", type=Path, default=None, help="Output root; files go to DEST/filtered (default: src)")

    p.add_argument("--separate-regions", action=argparse.BooleanOptionalAction, default=None,
                   help="Put each region in its own subfolder (asks when omitted)")
    p.add_argument("--region", default=None, help="Only keep this region code, e.g. U")
    p.add_argument("--multi-region", choices=config.MULTI_REGION_POLICIES, default=config.DEFAULT_MULTI_REGION_POLICY,
                   help="How to treat combined codes like JU when --region is set")
    p.add_argument("--verified-only", action="store_true", help="Only keep Verified Good [!] dumps")
    p.add_argument("--dry-run", action="store_true", help="Simulate actions without modifying disk")
    p.add_argument("--report-csv", type=Path, default=None, help="Write a per-file decision report to this CSV")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def ask_yes_no(question: str, default: bool = False) -> bool:
    """Prompts until the answer is yes, no, or empty (default)."""
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        answer = input(f"{question} {hint} ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer y or n.")


def resolve_region(code: Optional[str]) -> Optional[Region]:
    if code is None:
        return None
    region = Region.from_code(code)
    if region is None:
        raise ConfigurationError(f"Unknown region code: {code}")
    return region


def main(argv=None):
    args = parse_args(argv)

    # 1. Setup
    src_root = args.src.resolve()
    dest_root = args.dest.resolve() if args.dest else src_root

    try:
        region_filter = resolve_region(args.region)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    separate = args.separate_regions
    if separate is None:
        separate = ask_yes_no("Separate output by region?") if sys.stdin.isatty() else False

    setup_logging(dest_root / config.OUTPUT_DIR_NAME, args.verbose)

    logging.info("=== ROM Organizer Started ===")
    logging.info(f"Source: {src_root}")
    logging.info(f"Dest:   {dest_root / config.OUTPUT_DIR_NAME}")

    # 2. Execution
    app = RomOrganizerApp(
        separate_by_region=separate,
        region_filter=region_filter,
        multi_region_policy=args.multi_region,
        verified_only=args.verified_only,
    )

    try:
        summary = app.organize(
            src_root=src_root,
            dest_root=dest_root,
            dry_run=args.dry_run,
            report_csv=args.report_csv,
        )
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during organization.")
        sys.exit(1)

    logging.info(
        f"Discovered {summary.discovered}, kept {summary.survivors}, "
        f"duplicates {summary.duplicates}, unknown platform {summary.unknown_platform}, "
        f"outside region {summary.filtered_region}, not verified {summary.filtered_unverified}"
    )


if __name__ == "__main__":
    main()
