"""
Command-line interface for the name validator.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .types import Config, DecisionRecord, RunSummary
from .errors import UsageError, exit_code_for_exception
from .registry import load_canonical_names
from .matcher import Matcher
from .validator import Validator, summarize
from .jsonoutput import JSONOutput
from .spreadsheet import write_workbook
from .tui import run_tui

LOG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)s: %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="name-validator",
        description="Check filenames against a list of canonical names and fix misspellings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The name list is a JSON document of [id, name] pairs. The part of each
filename before the first underscore is matched to the closest name.
Results are written to name-validation-results.json and .xlsx.
        """
    )

    # Both positionals are required; checked in parse_args so a missing one
    # raises UsageError instead of exiting from inside argparse
    parser.add_argument(
        "names",
        nargs="?",
        help="JSON file with [id, name] pairs"
    )
    parser.add_argument(
        "folder",
        nargs="?",
        help="Folder whose filenames should be checked"
    )

    parser.add_argument(
        "--rename",
        action="store_true",
        help="Rename mismatched files to the canonical spelling"
    )
    parser.add_argument(
        "--report-dir",
        type=str,
        default=".",
        help="Directory to write the reports to (default: current directory)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the results as JSON instead of a summary"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print a plain-text summary instead of the rich table"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="",
        help="Optional path to write detailed operation log"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> Config:
    """Parse command-line arguments and create Config."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.names or not args.folder:
        raise UsageError(parser.format_usage().strip())

    folder_path = os.path.abspath(args.folder)
    if not os.path.isdir(folder_path):
        raise UsageError(f"Folder is not a directory: {folder_path}")

    return Config(
        names_path=args.names,
        folder_path=folder_path,
        rename=args.rename,
        report_dir=args.report_dir,
        json=args.json,
        plain=args.plain,
        verbose=args.verbose,
        log_file=args.log_file if args.log_file else None,
    )


def setup_logging(config: Config) -> Optional[logging.Handler]:
    """Apply the verbosity and optional log file from the config.

    Returns the file handler, if one was added, so the caller can close it.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if config.verbose else logging.INFO)
    if not config.log_file:
        return None
    handler = logging.FileHandler(config.log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(handler)
    return handler


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # Setup logging with timestamp and milliseconds
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )

    log_handler = None
    try:
        config = parse_args(argv)
        log_handler = setup_logging(config)
        logging.info(f"Starting name validator with config: {config}")

        if not config.json and not config.plain:
            return run_tui(config)

        return process_files(config)
    except UsageError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return exit_code_for_exception(e)
    finally:
        if log_handler is not None:
            logging.getLogger().removeHandler(log_handler)
            log_handler.close()


def process_files(config: Config) -> int:
    """Validate the folder and write reports according to the configuration."""
    names = load_canonical_names(config.names_path)

    validator = Validator(config.folder_path, Matcher(names), do_rename=config.rename)
    records = validator.validate_folder()
    logging.info(f"Checked {len(records)} entries in {config.folder_path}")

    summary = summarize(records, do_rename=config.rename)

    write_reports(records, config.report_dir)

    if config.json:
        print(JSONOutput.to_json(records))
    else:
        print_human_output(records, summary, config.rename)

    return 0


def write_reports(records: List[DecisionRecord], report_dir: str) -> None:
    """Write the JSON and spreadsheet reports."""
    os.makedirs(report_dir, exist_ok=True)
    JSONOutput.write(records, report_dir)
    write_workbook(records, report_dir)


def print_human_output(records: List[DecisionRecord], summary: RunSummary, do_rename: bool) -> None:
    """Print a plain-text validation summary."""
    print("\n📋 VALIDATION SUMMARY:")
    for record in records:
        print(f"{record.status.label} → {record.original} | "
              f"Match: {record.matched_name} | Distance: {record.distance}")

    print("-" * 40)
    print(f"Total: {summary.total} | Correct: {summary.correct} | "
          f"Renamed: {summary.renamed} | Not matched: {summary.not_matched}")

    if do_rename:
        print(f"Renames performed: {summary.renames_performed} | "
              f"Failed: {summary.rename_failures}")
    else:
        print("Rename was NOT enabled (dry-run mode).")

    if summary.collisions:
        print("\n⚠️  Several files map to the same corrected name:")
        for target, originals in summary.collisions.items():
            print(f"  {target} <- {', '.join(originals)}")


if __name__ == "__main__":
    sys.exit(main())
