"""
Box Catalogue to Snipe-IT Conversion Pipeline

A step-by-step pipeline that turns the box catalogue CSV into a
Snipe-IT asset import CSV.

Main Components:
- PipelineConfig: Catalogue layout, drop rules and import header
- PipelineRunner: Orchestrator for the pipeline steps
- Steps 00-03: Load, parse, map and write

Usage:
    from boxcat_to_snipeit.pipeline import PipelineRunner, PipelineConfig

    runner = PipelineRunner(PipelineConfig())
    success = runner.run_pipeline('catalogue.csv', 'snipeit_import.csv')
"""

from .pipeline_config import PipelineConfig
from .pipeline_runner import PipelineRunner

__all__ = ['PipelineConfig', 'PipelineRunner']
