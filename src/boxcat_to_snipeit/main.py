#!/usr/bin/env python3
"""
Box Catalogue to Snipe-IT Converter - Main Entry Point

Reads the box catalogue CSV exported from the spreadsheet and writes a CSV
file ready for the Snipe-IT asset importer.

Usage:
    boxcat-to-snipeit catalogue.csv snipeit_import.csv [--log-level DEBUG]

Example:
    python -m boxcat_to_snipeit.main data/box_catalogue.csv output/assets.csv
"""

import sys
import argparse
import logging
from typing import List, Optional

from .pipeline.pipeline_runner import PipelineRunner
from .pipeline.pipeline_config import PipelineConfig


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration"""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='boxcat-to-snipeit',
        description='Convert the box catalogue CSV to a Snipe-IT asset import CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  boxcat-to-snipeit box_catalogue.csv snipeit_assets.csv
  boxcat-to-snipeit box_catalogue.csv snipeit_assets.csv --log-level DEBUG

Rows before the "Box","Fullness" header are ignored. Verification rows,
blank boxes and empty/destroyed/unassigned/unprinted/unused boxes are not
exported; inconsistent ones are reported in the log.
        """
    )

    parser.add_argument(
        'paths',
        nargs='*',
        metavar='PATH',
        help='Input catalogue CSV followed by the output Snipe-IT CSV'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING'],
        default='INFO',
        help='Set the logging level (default: INFO); row diagnostics log at WARNING'
    )

    parser.add_argument(
        '--log-file',
        help='Also write the log to this file'
    )

    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Quiet mode - no conversion summary banner'
    )

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, exactly two paths are required"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.paths) != 2:
        parser.error(f"Exactly 2 arguments required but {len(args.paths)} supplied")

    args.input_file, args.output_file = args.paths
    return args


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = parse_arguments(argv)

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Starting conversion: {args.input_file} -> {args.output_file}")

        runner = PipelineRunner(PipelineConfig(), quiet_mode=args.quiet)
        success = runner.run_pipeline(args.input_file, args.output_file)

        sys.exit(0 if success else 1)

    except KeyboardInterrupt:
        logger.info("Conversion interrupted by user")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
