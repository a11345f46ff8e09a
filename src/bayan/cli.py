#!/usr/bin/env python3
"""
Bayan CLI — Command line interface for finding byte-identical files.
Prints every group of identical files, one path per line, groups separated by a blank line.
Optional --keep-one moves all but the first file of each group to the system trash, never permanent erase.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

from bayan.core.errors import ConfigurationError
from bayan.core.models import DuplicateGroup, ScanParams
from bayan.core.pattern import compile_mask
from bayan.commands import DuplicateSearchCommand
from bayan.utils.convert_utils import ConvertUtils
from bayan.services.file_service import FileService
from bayan.services.duplicate_service import DuplicateService
from bayan.aliases import HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT, LEVEL_HELP_TEXT, EPILOG_TEXT

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="bayan",
            description="Bayan — finds groups of byte-identical files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Input directory to scan for duplicates"
        )

        # Filtering options
        parser.add_argument(
            "--exclude", "-e",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            dest="excluded_dirs",
            help="Skip files whose directory path ends with any of these suffixes (space separated)"
        )
        parser.add_argument(
            "--level", "-l",
            default=1,
            type=int,
            metavar='',
            help=LEVEL_HELP_TEXT
        )
        parser.add_argument(
            "--min-size", "-m",
            default="1",
            type=str,
            metavar='',
            help="Minimum file size (e.g., 1, 500KB, 1MB). Default: 1"
        )
        parser.add_argument(
            "--mask", "-n",
            default="*",
            type=str,
            metavar='',
            help="File name mask: '*' any characters, '?' exactly one character. Default: *"
        )

        # Comparison options
        parser.add_argument(
            "--block-size", "-b",
            default="4K",
            type=str,
            metavar='',
            help="Block size used for reading and hashing (e.g., 512, 4K, 1M). Default: 4K"
        )
        parser.add_argument(
            "--hash", "-a",
            choices=HASH_CHOICES,
            default="crc32",
            type=str,
            dest="algorithm",
            help=HASH_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--keep-one",
            action="store_true",
            help="Keep the first file of every group and move the rest to trash. "
                 "Always shows preview before deletion for safety."
        )

        # Output options
        parser.add_argument(
            "--force",
            action="store_true",
            help="Skip confirmation prompt when used with --keep-one (for automation/scripts)"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Print duplicate groups only"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics and progress"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging"
        )

        return parser.parse_args(args)

    @staticmethod
    def configure_logging(debug: bool = False) -> None:
        level = logging.DEBUG if debug else logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT)
        logging.getLogger("bayan").setLevel(level)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.force and not args.keep_one:
            self.error_exit("--force can only be used with --keep-one")

        # Prevent interactive confirmation in non-TTY environments
        if args.keep_one and not args.force:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Cannot request interactive confirmation in non-interactive session.\n"
                    "Use --force flag to proceed without confirmation when piping output or running in scripts."
                )

        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        if args.level < 0:
            self.error_exit("Level cannot be negative")

        try:
            compile_mask(args.mask)
        except ConfigurationError as e:
            self.error_exit(str(e))

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=str(Path(args.input).resolve()),
                min_size_str=args.min_size,
                block_size_str=args.block_size,
                excluded_dirs=args.excluded_dirs,
                level=args.level,
                name_pattern=args.mask,
                algorithm=HASH_ALIASES[args.algorithm],
            )
        except ConfigurationError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
            sys.stderr.flush()
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files found...\n")
            sys.stderr.flush()

    def run_search(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute the duplicate search."""
        command = DuplicateSearchCommand()
        if self.verbose:
            print(f"Comparing blocks of {ConvertUtils.format_size(params.block_size_bytes)} "
                  f"(hash: {params.algorithm.display_name})...", file=sys.stderr)

        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except ConfigurationError as e:
            self.error_exit(f"Parameter error: {e}")
        except (RuntimeError, OSError) as e:
            self.error_exit(f"Search failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)

        if stats.unreadable_files:
            self.warning(f"{len(stats.unreadable_files)} file(s) could not be read and were skipped")

        return groups

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Print groups: one path per line, groups separated by an empty line."""
        if not groups:
            if self.verbose:
                print("No duplicate groups found.", file=sys.stderr)
            return

        if self.verbose:
            total_files = sum(g.duplicate_count for g in groups)
            print(f"Found {len(groups)} duplicate groups ({total_files} files)", file=sys.stderr)

        blocks = ["\n".join(group.files) for group in groups]
        print("\n\n".join(blocks))

    def execute_keep_one(self, groups: List[DuplicateGroup], force: bool = False) -> None:
        """Keep one file per group, trash the rest. Always shows preview before deletion."""
        if not groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        files_to_delete = DuplicateService.keep_only_one_file_per_group(groups)
        space_saved_str = ConvertUtils.format_size(DuplicateService.reclaimable_bytes(groups))

        # Always show deletion preview before action (safety first)
        print()
        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.format_size(group.size)
            print(f"Group {idx} | File size: {size_str} | Files: {group.duplicate_count}")
            print("-" * 60)
            print(f"   [KEEP] {group.representative}")
            for path in group.files[1:]:
                print(f"   [DEL]  {path}")
            print()

        print("=" * 60)
        print(f"Summary: Keep 1 file per group ({len(groups)} files preserved, "
              f"{len(files_to_delete)} files deleted)")
        print(f"Total space saved: {space_saved_str}")
        print()

        if force:
            print("⚠️  WARNING: --force flag skips confirmation. Proceeding with deletion...")
        else:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Lost interactive terminal during operation. "
                    "Use --force to proceed in non-interactive environments."
                )

            response = input(f"Are you sure you want to move {len(files_to_delete)} files to trash? [y/N]: ")
            if response.strip().lower() not in ("y", "yes"):
                print("Deletion cancelled by user.")
                return

        # Continue past individual file errors
        print(f"\nMoving {len(files_to_delete)} files to trash...")
        deleted_count = 0
        failed_files = []

        for i, path in enumerate(files_to_delete, 1):
            if self.verbose:
                print(f"  [{i}/{len(files_to_delete)}] {os.path.basename(path)}")

            try:
                FileService.move_to_trash(path)
                deleted_count += 1
            except (OSError, RuntimeError) as e:
                failed_files.append((path, str(e)))
                self.warning(f"Failed to delete {path}: {e}")

        if failed_files:
            print(f"\n⚠️  Partial success: {deleted_count}/{len(files_to_delete)} files moved to trash.")
            print(f"Failed to delete {len(failed_files)} file(s):")
            for path, error in failed_files[:5]:
                print(f"  • {os.path.basename(path)}: {error.split(':')[-1].strip()}")
            if len(failed_files) > 5:
                print(f"  ...and {len(failed_files) - 5} more files")
        else:
            print(f"✅ Successfully moved {deleted_count} files to trash.")
            print(f"Total space saved: {space_saved_str}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(args.debug)

        self.validate_args(args)
        params = self.create_params(args)

        if self.verbose:
            print(f"Scanning directory: {params.root_dir}", file=sys.stderr)

        groups = self.run_search(params)

        if args.keep_one:
            self.execute_keep_one(groups, force=args.force)
        else:
            self.output_results(groups)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
