"""
Step 00: Load Catalogue

Reads the whole catalogue CSV into memory as a frame of strings. The file has
a free-text preamble above the real header, so no header row is inferred here.
"""

import csv
import logging
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List

from ...exceptions import InputReadError, InputParseError, MalformedRowError
from ...models import CATALOGUE_FIELD_COUNT

logger = logging.getLogger(__name__)


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Load the catalogue CSV file

    Args:
        data: Pipeline context containing input_file and config

    Returns:
        Dict containing the raw dataframe and input statistics
    """
    logger.info("Loading catalogue CSV file...")

    input_file = data['input_file']
    config = data['config']

    df = read_catalogue(input_file, config.input_encoding, config.fallback_encodings)

    stats = {
        'total_rows': len(df),
        'columns_count': len(df.columns),
    }
    for key, value in stats.items():
        logger.info(f"Input stats - {key}: {value}")

    return {
        'raw_df': df,
        'input_stats': stats
    }


def read_catalogue(input_file, encoding: str = "utf-8-sig", fallback_encodings=()) -> pd.DataFrame:
    """
    Parse a CSV file into a dataframe of strings, one column per field

    Every record must carry at least six fields; a narrower record fails the
    whole read. Records wider than others are padded with empty strings so the
    frame stays rectangular. Blank lines are skipped and an empty file gives an
    empty frame.
    """
    path = Path(input_file)
    if not path.is_file():
        raise InputReadError(f"Unable to read input file {input_file}: file not found")

    for attempt in [encoding, *fallback_encodings]:
        try:
            records = _read_records(path, attempt)
            if attempt != encoding:
                logger.info(f"Successfully loaded with {attempt} encoding")
            break
        except UnicodeDecodeError as e:
            logger.warning(f"Encoding error with {attempt}: {e}")
    else:
        raise InputReadError(f"Could not decode {input_file} with any supported encoding")

    for index, record in enumerate(records):
        if len(record) < CATALOGUE_FIELD_COUNT:
            raise MalformedRowError(len(record), CATALOGUE_FIELD_COUNT, index)

    if not records:
        logger.warning(f"Input file is empty: {input_file}")
        return pd.DataFrame(columns=range(CATALOGUE_FIELD_COUNT), dtype=str)

    width = max(len(record) for record in records)
    df = pd.DataFrame(
        [record + [''] * (width - len(record)) for record in records],
        dtype=str
    )

    logger.info(f"Loaded {len(df)} rows from {input_file}")
    return df


def _read_records(path: Path, encoding: str) -> List[List[str]]:
    """All non-blank CSV records of the file, each with its own field count"""
    try:
        with open(path, 'r', encoding=encoding, newline='') as infile:
            reader = csv.reader(infile, strict=True)
            return [record for record in reader if record]
    except csv.Error as e:
        raise InputParseError(f"Unable to parse file as CSV for {path}: {e}") from e
    except OSError as e:
        raise InputReadError(f"Unable to read input file {path}: {e}") from e
