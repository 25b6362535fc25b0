#!/usr/bin/env python3
"""
CLI script to import vessel, reference and emission snapshots.

Usage:
    # Import from the configured data directory
    python scripts/import_data.py

    # Use a different data directory
    python scripts/import_data.py --data-dir path/to/snapshots

    # Skip migrations (schema already up to date)
    python scripts/import_data.py --skip-migrations
"""

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from emissions_tracker.core.config import get_environment_config
from emissions_tracker.database.base import apply_db_migration, get_db_url, get_engine_kw
from emissions_tracker.database.session_manager.db_session import Database
from emissions_tracker.pydantic_models.data_import import ImportStats
from emissions_tracker.services.data_import import DataImportService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

console = Console()


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_stats(stats: ImportStats):
    """Print import statistics using Rich Table."""
    print_header("IMPORT STATISTICS", "bold green")

    stats_table = Table(show_header=True, box=None, padding=(0, 2))
    stats_table.add_column("Category", style="bold cyan", width=30)
    stats_table.add_column("Count", justify="right", style="bold green")

    stats_table.add_row("🚢 Vessels", str(stats.vessels))
    stats_table.add_row("📈 Reference Lines", str(stats.reference_lines))
    stats_table.add_row("🧾 Daily Log Emissions", str(stats.emissions))
    stats_table.add_row("⚠️  Skipped Records", str(stats.skipped))

    console.print(stats_table)
    console.print()

    if stats.errors:
        for i, error in enumerate(stats.errors[:5], 1):
            console.print(f"  {i}. [dim]{error}[/dim]")
        if len(stats.errors) > 5:
            console.print(f"  [dim]... and {len(stats.errors) - 5} more[/dim]")
        console.print()


async def main():
    """Main entry point for the import script."""
    parser = argparse.ArgumentParser(
        description="Import vessel, reference and emission snapshots"
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory containing the snapshot files (default: from config)",
    )
    parser.add_argument(
        "--skip-migrations",
        action="store_true",
        help="Do not apply database migrations before importing",
    )

    args = parser.parse_args()

    print_header("DATA IMPORT", "bold cyan")

    try:
        config = get_environment_config()
        if not args.skip_migrations:
            await apply_db_migration(config)

        async_db_url = get_db_url(config)
        Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
        logger.info("Database initialized")

        settings = dict(config.section("data_import"))
        if args.data_dir:
            settings["data_dir"] = args.data_dir

        with console.status("[bold cyan]Importing snapshots...", spinner="dots"):
            async with DataImportService.from_config(settings) as importer:
                stats = await importer.import_all()

        print_stats(stats)
        console.print(
            Panel(
                Text("✅ IMPORT COMPLETED SUCCESSFULLY", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Import failed: {e}", exc_info=True)
        console.print(
            Panel(
                f"[bold red]❌ IMPORT FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        sys.exit(1)
    finally:
        await Database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
