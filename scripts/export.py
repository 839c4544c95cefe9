"""
VAsA demo and export entry point.
Builds a seeded workspace, prints the dashboard and optionally writes the
planner day as .ics and every invoice as PDF.

Example:
    python scripts/export.py --date 2025-06-01 --block "09:00-10:00|Standup|meeting" --invoices
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from vasa.core.config_manager import Config
from vasa.core.exceptions import SchedulingConflict, VasaError
from vasa.core.workspace import WorkspaceFactory
from vasa.models import TimeBlock, time_block_from_dict
from vasa.utils.logger import setup_logger

logger = setup_logger(__name__)


def parse_block(value: str) -> TimeBlock:
    """Parse 'HH:MM-HH:MM|Label[|category]' into a TimeBlock."""
    parts = value.split('|')
    if len(parts) < 2 or '-' not in parts[0]:
        raise argparse.ArgumentTypeError(f"Expected 'HH:MM-HH:MM|Label[|category]', got {value!r}")
    try:
        start, end = (p.strip() for p in parts[0].split('-', 1))
        start_h, start_m = (int(x) for x in start.split(':'))
        end_h, end_m = (int(x) for x in end.split(':'))
        return time_block_from_dict({
            'start_hour': start_h, 'start_minute': start_m,
            'end_hour': end_h, 'end_minute': end_m,
            'label': parts[1],
            'category': parts[2].strip() if len(parts) > 2 else "task",
        })
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid block {value!r}: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="VAsA workspace demo and exporter")
    parser.add_argument("--date", help="Planner date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--block", action="append", type=parse_block, default=[],
                        help="Block to schedule: 'HH:MM-HH:MM|Label[|task|meeting|focus]'")
    parser.add_argument("--invoices", action="store_true", help="Export every invoice as PDF")
    parser.add_argument("--output", type=Path, default=Config.OUTPUT_DIR, help="Output directory")
    parser.add_argument("--no-seed", action="store_true", help="Start from an empty workspace")
    return parser


def main(argv=None) -> int:
    """
    Main execution function.
    
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    start_time = time.time()
    
    try:
        workspace = WorkspaceFactory.create(seed_data=not args.no_seed)
        day = args.date or Config.today().isoformat()
        
        for block in args.block:
            try:
                workspace.planner.save_block(day, block)
            except SchedulingConflict as e:
                logger.error(f"Skipping '{block.label}': {e.message}")
        
        for title, value in workspace.dashboard().widgets(Config.CURRENCY_SYMBOL):
            logger.info(f"{title:<18} {value}")
        
        if args.date or args.block:
            path = workspace.export_planner_day(day, args.output)
            logger.info(f"Planner exported to {path}")
        
        if args.invoices:
            for invoice in workspace.invoices.list():
                path = workspace.export_invoice(invoice.id, args.output)
                logger.info(f"Invoice exported to {path}")
        
        return 0
    
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    
    except VasaError as e:
        logger.error("Workspace error", exc_info=True)
        logger.error(str(e))
        return 1
    
    except OSError as e:
        logger.error(f"Could not write export: {e}")
        return 1
    
    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
