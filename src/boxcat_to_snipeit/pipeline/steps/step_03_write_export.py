"""
Step 03: Write Export

Writes the Snipe-IT import CSV: the fixed 19-column header followed by one row
per asset. Fields are quoted only when they contain a comma, quote or newline.
"""

import csv
import logging
import pandas as pd
from pathlib import Path
from typing import Dict, Any

from ...exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Write the Snipe-IT import file

    Args:
        data: Pipeline context containing snipeit_df, output_file and config

    Returns:
        Dict containing the output path and export statistics
    """
    logger.info("Writing Snipe-IT import file...")

    df = data['snipeit_df']
    config = data['config']
    output_file = Path(data['output_file'])

    write_snipeit_csv(df, output_file, config.output_header, config.output_encoding)

    export_stats = {
        'rows_written': len(df),
        'columns': len(config.output_header),
        'export_size_kb': round(output_file.stat().st_size / 1024, 2)
    }

    logger.info(f"Snipe-IT CSV exported: {output_file}")
    for key, value in export_stats.items():
        logger.info(f"Export stats - {key}: {value}")

    return {
        'output_path': str(output_file),
        'export_stats': export_stats
    }


def write_snipeit_csv(df: pd.DataFrame, output_file, header, encoding: str = "utf-8") -> None:
    """Create or truncate output_file and write df under the given header"""
    try:
        df.to_csv(
            output_file,
            columns=list(header),
            index=False,
            encoding=encoding,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator='\n'
        )
    except OSError as e:
        raise OutputWriteError(f"Unable to write output file {output_file}: {e}") from e
