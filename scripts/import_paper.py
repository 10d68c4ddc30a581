"""
CLI script to import PDF files into the library.

Usage:
    python scripts/import_paper.py paper.pdf              # Import one file
    python scripts/import_paper.py a.pdf b.pdf            # Import several, concurrently
    python scripts/import_paper.py --list                 # List stored papers
    python scripts/import_paper.py --config path/to/config.json paper.pdf
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from papershelf.app import AppState, db_health_check, get_papers, run_command
from papershelf.core import get_config, ConfigurationError, StorageInitError
from papershelf.core.config_loader import Config, reload_config


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Import PDF files into the paper library"
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="PDF files to import"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List stored papers after importing"
    )

    return parser.parse_args()


def load_config(config_arg: str = None) -> Config:
    """Explicit config file, else config/config.json, else built-in defaults."""
    if config_arg:
        config_path = Path(config_arg)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(1)
        return reload_config(config_path)

    try:
        return get_config()
    except ConfigurationError:
        return Config.default()


async def run(args, config: Config) -> int:
    """Import every file, then report. Returns the number of failures."""
    async with await AppState.start(config) as state:
        print(f"Library:           {state.papers_dir}")
        print(f"Database path:     {state.pool.db_path}")
        print("=" * 60)

        responses = await asyncio.gather(
            *(run_command(state.pipeline.ingest_path, path) for path in args.files)
        )

        failures = 0
        for path, response in zip(args.files, responses):
            if response.ok:
                print(f"  + {response.value.message}")
            else:
                failures += 1
                print(f"  ! {path}: {response.error}")

        health = await run_command(db_health_check, state)
        print("=" * 60)
        print(health.value if health.ok else f"Database error: {health.error}")

        if args.list:
            listing = await run_command(get_papers, state)
            if not listing.ok:
                print(f"Database error: {listing.error}")
                return failures + 1
            for paper in listing.value:
                print(f"  [{paper['id']}] {paper['title']}  ({paper['created_at']})")

        return failures


def main():
    """Main entry point for the import CLI."""
    args = parse_args()
    config = load_config(args.config)

    print("=" * 60)
    print("PaperShelf - Import")
    print("=" * 60)

    try:
        failures = asyncio.run(run(args, config))
    except StorageInitError as e:
        print(f"Failed to connect to database: {e.message}")
        sys.exit(2)

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
