"""
Command-line front end: scan a folder, show what is there, then organize (or preview).
"""
import argparse
import logging
import sys
from typing import List, Optional

from .errors import FileOrganizerError
from .models import DirectoryStructure, OrganizeStats
from .organizer import FileOrganizer
from .scanner import FolderScanner
from .utils import ensure_directory, format_bytes

logger = logging.getLogger(__name__)

RULE = "=" * 60
THIN_RULE = "-" * 60

EPILOG = """\
examples:
  file-organizer ./Downloads
  file-organizer ./Downloads --dry-run
  file-organizer --directory ~/Documents
  file-organizer ./test-folder -d

Organizes files in the specified directory by moving them into
subdirectories based on file type (images, documents, videos, etc.).
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="file-organizer",
        description="Organize your files automatically.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("directory", nargs="?", help="Directory to organize.")
    p.add_argument("--directory", "-dir", dest="directory_opt", metavar="PATH",
                   help="Specify directory to organize.")
    p.add_argument("--dry-run", "-d", action="store_true",
                   help="Preview changes without actually moving files.")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return p


def print_structure(structure: DirectoryStructure) -> None:
    print(f"Found {len(structure.files)} file(s) and {len(structure.folders)} folder(s)\n")
    if not structure.files:
        return
    print("Files to organize:")
    print(THIN_RULE)
    for f in structure.files:
        print(f"  {f.name:40} [{f.category}] {format_bytes(f.size)}")
    print(THIN_RULE + "\n")


def print_stats(stats: OrganizeStats, dry_run: bool) -> None:
    print("\n" + RULE)
    print("Organization Results")
    print(RULE)

    if dry_run:
        print("DRY RUN MODE - No files were actually moved\n")
    else:
        print(f"Files moved: {stats.files_moved}")
        print(f"Folders created: {stats.folders_created}")

    if stats.organized_files:
        print("\nOrganized files:")
        print(THIN_RULE)
        for o in stats.organized_files:
            print(f"  {o.original:35} -> {o.destination}")

    if stats.errors:
        print(f"\nErrors: {len(stats.errors)}")
        for err in stats.errors:
            print(f"   - {err.file_name}: {err.error_message}")

    print(RULE + "\n")

    if dry_run:
        print("Run without --dry-run to actually organize the files\n")
    elif stats.files_moved > 0:
        print("Organization complete!\n")
    else:
        print("No files needed organization\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    directory_arg = args.directory_opt or args.directory
    if not directory_arg:
        print("Error: Directory path is required", file=sys.stderr)
        print("\nUse --help for usage information\n", file=sys.stderr)
        return 1

    try:
        directory = ensure_directory(directory_arg)
    except FileOrganizerError as e:
        print(f'Error: Directory "{directory_arg}" does not exist or is not accessible', file=sys.stderr)
        print(f"   {e}\n", file=sys.stderr)
        return 1

    print("\n" + RULE)
    print("File Organizer CLI")
    print(RULE)
    print(f"Directory: {directory}")
    print(f"Mode: {'DRY RUN (Preview only)' if args.dry_run else 'ORGANIZE'}")
    print(RULE + "\n")

    try:
        print("Scanning directory...\n")
        structure = FolderScanner(directory_arg).scan()
        logger.debug("Scanned %s: %d files, %d folders",
                     directory, len(structure.files), len(structure.folders))
        print_structure(structure)

        print("Previewing organization..." if args.dry_run else "Organizing files...")
        stats = FileOrganizer(directory_arg, dry_run=args.dry_run).organize()
        logger.debug("Organize finished: moved=%d created=%d errors=%d",
                     stats.files_moved, stats.folders_created, len(stats.errors))
    except FileOrganizerError as e:
        print(f"\nError: {e}\n", file=sys.stderr)
        return 1

    print_stats(stats, args.dry_run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
