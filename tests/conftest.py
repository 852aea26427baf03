import csv
from datetime import datetime

import pytest

from boxcat_to_snipeit.pipeline.pipeline_config import PipelineConfig

CATALOGUE_HEADER = ["Box", "Fullness", "Sealed", "Location", "Category", "Contents"]

PREAMBLE = [
    ["Box catalogue for the loft and garage", "", "", "", "", ""],
    ["Fullness is one of Full, Partial, Empty", "", "", "", "", ""],
]


@pytest.fixture
def config():
    return PipelineConfig()


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-03-05 07:08:09"""
    return lambda: datetime(2024, 3, 5, 7, 8, 9)


@pytest.fixture
def write_catalogue(tmp_path):
    """Write rows (preamble + header + given data rows) to a CSV file"""

    def _write(data_rows, name="catalogue.csv", preamble=PREAMBLE, header=CATALOGUE_HEADER):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerows(preamble)
            if header is not None:
                writer.writerow(header)
            writer.writerows(data_rows)
        return path

    return _write


@pytest.fixture
def read_output():
    """Read a written CSV back as lists of fields"""

    def _read(path):
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    return _read
