"""
Pipeline Runner

Orchestrates the box catalogue to Snipe-IT conversion.
Executes the read, parse, map and write steps in sequence with logging.
"""

import logging
import time
from datetime import datetime
from typing import Callable, Dict, Any, List, Optional

from .pipeline_config import PipelineConfig
from ..exceptions import BoxCatError
from ..transformation_summary import TransformationSummary, describe_parse_stats
from .steps import (
    step_00_load_catalogue,
    step_01_parse_catalogue,
    step_02_map_to_snipeit,
    step_03_write_export
)


class PipelineRunner:
    """Main pipeline orchestrator"""

    def __init__(self, config: Optional[PipelineConfig] = None, quiet_mode: bool = False,
                 clock: Optional[Callable[[], datetime]] = None):
        self.config = config or PipelineConfig()
        self.quiet_mode = quiet_mode
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        self.data: Dict[str, Any] = {}
        self.summary = TransformationSummary(quiet_mode)

    def run_pipeline(self, input_file: str, output_file: str) -> bool:
        """
        Execute the complete pipeline

        Args:
            input_file: Path to the catalogue CSV
            output_file: Path of the Snipe-IT import CSV to create

        Returns:
            bool: True if pipeline completed successfully
        """
        start_time = time.time()
        self.logger.info("Starting box catalogue to Snipe-IT conversion pipeline")
        self.summary.print_header(input_file, output_file)

        self.data = {
            'input_file': input_file,
            'output_file': output_file,
            'config': self.config,
            'clock': self.clock,
            'stats': {'start_time': start_time}
        }

        steps = [
            ("00", "Load Catalogue", step_00_load_catalogue),
            ("01", "Parse Catalogue", step_01_parse_catalogue),
            ("02", "Map to Snipe-IT", step_02_map_to_snipeit),
            ("03", "Write Export", step_03_write_export)
        ]

        try:
            for step_num, step_name, step_func in steps:
                self._run_step(step_num, step_name, step_func)
        except BoxCatError as e:
            self.logger.error(f"Pipeline failed: {e}")
            self.summary.print_footer(False)
            return False

        duration = time.time() - start_time
        self.logger.info(f"Pipeline completed successfully in {duration:.2f} seconds")
        self._log_final_stats()
        self.summary.print_footer(True, self.data.get('output_path', output_file))

        return True

    def _run_step(self, step_num: str, step_name: str, step_func):
        """Execute a single pipeline step and record its row counts"""
        step_start = time.time()
        self.logger.info(f"Step {step_num}: {step_name}")
        before = self._row_count()

        try:
            result = step_func.execute(self.data)
        except BoxCatError as e:
            self.logger.error(f"Step {step_num} failed: {e}")
            raise

        if result:
            self.data.update(result)

        step_duration = time.time() - step_start
        self.logger.info(f"Step {step_num} completed in {step_duration:.2f} seconds")
        self.summary.add_step(step_name, before, self._row_count(),
                              self._step_changes(step_num), step_duration)

    def _row_count(self) -> int:
        """Rows held by the most recent stage"""
        if 'export_stats' in self.data:
            return self.data['export_stats']['rows_written']
        if 'snipeit_records' in self.data:
            return len(self.data['snipeit_records'])
        if 'catalogue_entries' in self.data:
            return len(self.data['catalogue_entries'])
        if 'raw_df' in self.data:
            return len(self.data['raw_df'])
        return 0

    def _step_changes(self, step_num: str) -> List[str]:
        if step_num == "01":
            return describe_parse_stats(self.data['parse_stats'])
        if step_num == "03":
            return [f"{self.data['export_stats']['columns']} Snipe-IT columns written"]
        return []

    def _log_final_stats(self):
        """Log final pipeline statistics"""
        for stats_key in ('input_stats', 'parse_stats', 'export_stats'):
            for key, value in self.data.get(stats_key, {}).items():
                self.logger.info(f"Stats - {key}: {value}")
