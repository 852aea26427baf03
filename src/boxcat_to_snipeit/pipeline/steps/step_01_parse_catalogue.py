"""
Step 01: Parse Catalogue

Walks the raw catalogue rows, skips the preamble up to the "Box"/"Fullness"
header and turns every remaining row into a catalogue entry or drops it.

Dropped rows are catalogue bookkeeping: blank labels, verification marks and
boxes that are empty, destroyed or never used. The catalogue is maintained by
hand, so each drop path checks that the rest of the row agrees with the claimed
state and logs an anomaly when it does not. Anomalies never stop the run.
"""

import logging
import pandas as pd
from typing import Dict, Any, Iterable, List, Optional, Sequence, Tuple

from ..pipeline_config import PipelineConfig
from ...models import Anomaly, CatalogueEntry, CatalogueRow, ParseState, RowKind

logger = logging.getLogger(__name__)


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse raw catalogue rows into validated entries

    Args:
        data: Pipeline context containing raw_df and config

    Returns:
        Dict containing catalogue entries, anomalies and parse statistics
    """
    logger.info("Parsing catalogue rows...")

    df: pd.DataFrame = data['raw_df']
    config = data['config']

    rows = df.itertuples(index=False, name=None)
    entries, anomalies, stats = parse_catalogue(rows, config)

    if anomalies:
        logger.warning(f"Found {len(anomalies)} catalogue rows needing review")

    for key, value in stats.items():
        logger.info(f"Parse stats - {key}: {value}")

    return {
        'catalogue_entries': entries,
        'anomalies': anomalies,
        'parse_stats': stats
    }


def parse_catalogue(
    rows: Iterable[Sequence[str]],
    config: Optional[PipelineConfig] = None
) -> Tuple[List[CatalogueEntry], List[Anomaly], Dict[str, int]]:
    """
    Run the header search and row classification over raw rows

    Args:
        rows: Raw rows in file order, each at least six fields wide
        config: Pipeline configuration

    Returns:
        Tuple of (entries, anomalies, stats)
    """
    config = config or PipelineConfig()

    entries: List[CatalogueEntry] = []
    anomalies: List[Anomaly] = []
    stats = {
        'preamble_rows': 0,
        'blank_rows': 0,
        'verification_rows': 0,
        'retired_rows': 0,
        'no_content_rows': 0,
        'entries': 0,
        'anomalies': 0,
    }

    state = ParseState.SKIPPING
    for index, fields in enumerate(rows):
        row = CatalogueRow.from_fields(fields)

        if state is ParseState.SKIPPING:
            if config.is_header_row(row.box, row.fullness):
                state = ParseState.COLLECTING
            else:
                stats['preamble_rows'] += 1
            continue

        kind, anomaly = classify_row(row, config, index)

        if anomaly is not None:
            logger.warning(anomaly.describe())
            anomalies.append(anomaly)

        if kind is RowKind.ENTRY:
            entries.append(CatalogueEntry.from_row(row))
        else:
            stats[_STAT_KEYS[kind]] += 1

    if state is ParseState.SKIPPING:
        logger.warning(
            f"No '{config.header_box_label}'/'{config.header_fullness_label}' header row found; "
            f"no catalogue entries read"
        )

    stats['entries'] = len(entries)
    stats['anomalies'] = len(anomalies)
    return entries, anomalies, stats


_STAT_KEYS = {
    RowKind.BLANK: 'blank_rows',
    RowKind.VERIFICATION: 'verification_rows',
    RowKind.RETIRED: 'retired_rows',
    RowKind.NO_CONTENT: 'no_content_rows',
}


def classify_row(
    row: CatalogueRow,
    config: Optional[PipelineConfig] = None,
    index: int = 0
) -> Tuple[RowKind, Optional[Anomaly]]:
    """
    Classify one data row, first matching rule wins

    Returns:
        Tuple of (row kind, anomaly or None)
    """
    config = config or PipelineConfig()

    # Box label with nothing else
    if not any(row.data_fields):
        return RowKind.BLANK, None

    if row.box.lower().startswith(config.verification_prefix):
        return RowKind.VERIFICATION, check_verification(row, config, index)

    fullness = config.normalize_fullness(row.fullness)
    if fullness in config.retired_states:
        return RowKind.RETIRED, check_retired(row, fullness, config, index)

    if not row.contents:
        return RowKind.NO_CONTENT, Anomaly(
            index, 'no_contents', config.no_content_message, row.as_list()
        )

    return RowKind.ENTRY, None


def check_verification(row: CatalogueRow, config: PipelineConfig, index: int) -> Optional[Anomaly]:
    """Every data field of 'Verification Vn' must read 'Vn'"""
    suffix = row.box[len(config.verification_prefix):]
    expected = config.verification_value_prefix + suffix
    if all(value == expected for value in row.data_fields):
        return None
    return Anomaly(index, 'bad_verification', config.bad_verification_message, row.as_list())


def check_retired(row: CatalogueRow, fullness: str, config: PipelineConfig, index: int) -> Optional[Anomaly]:
    """Retired boxes should carry no sealed/location/category/contents data"""
    kind, message = config.retired_states[fullness]

    if fullness == config.empty_state:
        has_data = bool(row.contents)
    else:
        has_data = any((row.sealed, row.location, row.category, row.contents))

    if not has_data:
        return None
    return Anomaly(index, kind, message, row.as_list())
