"""
Pipeline Steps Package

Contains the four pipeline steps for box catalogue to Snipe-IT conversion.
Each step is a self-contained module with an execute() function.
"""

from . import (
    step_00_load_catalogue,
    step_01_parse_catalogue,
    step_02_map_to_snipeit,
    step_03_write_export
)

__all__ = [
    'step_00_load_catalogue',
    'step_01_parse_catalogue',
    'step_02_map_to_snipeit',
    'step_03_write_export'
]
