"""
Box Catalogue to Snipe-IT Converter

Converts the spreadsheet box catalogue (exported as CSV) into a CSV file
that the Snipe-IT asset management system can import.

Features:
- Skips the catalogue's free-text preamble up to the Box/Fullness header
- Drops verification, blank and retired box rows, flagging inconsistent ones
- Synthesises a unique asset tag per item from box label, time and position
- Writes the 19-column Snipe-IT import layout with a BoxName custom field

Usage:
    from boxcat_to_snipeit import PipelineRunner, PipelineConfig

    runner = PipelineRunner(PipelineConfig())
    success = runner.run_pipeline('catalogue.csv', 'snipeit_import.csv')
"""

from .pipeline import PipelineConfig, PipelineRunner

__version__ = "1.0.0"
__all__ = ["PipelineConfig", "PipelineRunner"]
