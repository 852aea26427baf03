"""
Step 02: Map to Snipe-IT

Converts catalogue entries into Snipe-IT asset records. Each asset gets a tag
built from its box label, the current time and its position in this run; the
position suffix is what keeps tags unique within one import file.
"""

import logging
import pandas as pd
from datetime import datetime
from typing import Callable, Dict, Any, List, Optional, Sequence

from ..pipeline_config import PipelineConfig
from ...models import CatalogueEntry, SnipeITRecord

logger = logging.getLogger(__name__)


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map catalogue entries to Snipe-IT records

    Args:
        data: Pipeline context containing catalogue_entries and config

    Returns:
        Dict containing the records and their dataframe
    """
    logger.info("Mapping catalogue entries to Snipe-IT assets...")

    entries = data['catalogue_entries']
    config = data['config']
    clock = data.get('clock') or datetime.now

    records = build_snipeit_records(entries, config, clock)
    df = records_to_dataframe(records, config)

    logger.info(f"Mapped {len(records)} assets")

    return {
        'snipeit_records': records,
        'snipeit_df': df
    }


def build_snipeit_records(
    entries: Sequence[CatalogueEntry],
    config: Optional[PipelineConfig] = None,
    clock: Optional[Callable[[], datetime]] = None
) -> List[SnipeITRecord]:
    """One record per entry, in catalogue order"""
    config = config or PipelineConfig()
    clock = clock or datetime.now
    records = []

    for index, entry in enumerate(entries):
        # Tag uses the time at which this record is built
        asset_tag = config.format_asset_tag(entry.box_name, index, clock())
        records.append(SnipeITRecord(
            item_name=entry.contents,
            category=entry.category,
            model_name=config.model_name,
            asset_tag=asset_tag,
            location=entry.location,
            box_name=entry.box_name,
        ))

    return records


def records_to_dataframe(records: Sequence[SnipeITRecord], config: Optional[PipelineConfig] = None) -> pd.DataFrame:
    """Frame with the Snipe-IT column names, one row per record"""
    config = config or PipelineConfig()
    return pd.DataFrame(
        [record.as_row() for record in records],
        columns=config.output_header,
        dtype=str
    )
