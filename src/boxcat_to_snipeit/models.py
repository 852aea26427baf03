"""
Data Model

Records passed between the pipeline steps: the named view of a raw catalogue
row, the validated catalogue entry and the Snipe-IT import record.
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from enum import Enum
from typing import List, Sequence, Tuple

from .exceptions import MalformedRowError

CATALOGUE_FIELD_COUNT = 6


class ParseState(Enum):
    """Header search state of the catalogue parser"""
    SKIPPING = "skipping"
    COLLECTING = "collecting"


class RowKind(Enum):
    """How a data row was classified once the header has been seen"""
    BLANK = "blank"
    VERIFICATION = "verification"
    RETIRED = "retired"
    NO_CONTENT = "no_content"
    ENTRY = "entry"


@dataclass(frozen=True)
class CatalogueRow:
    """Named view of one row of the catalogue CSV"""
    box: str
    fullness: str
    sealed: str
    location: str
    category: str
    contents: str
    extra: Tuple[str, ...] = ()

    @classmethod
    def from_fields(cls, row_fields: Sequence[str]) -> "CatalogueRow":
        if len(row_fields) < CATALOGUE_FIELD_COUNT:
            raise MalformedRowError(len(row_fields), CATALOGUE_FIELD_COUNT)
        values = ["" if value is None else str(value) for value in row_fields]
        return cls(*values[:CATALOGUE_FIELD_COUNT], extra=tuple(values[CATALOGUE_FIELD_COUNT:]))

    @property
    def data_fields(self) -> Tuple[str, str, str, str, str]:
        """Fields 1-5: fullness, sealed, location, category, contents"""
        return (self.fullness, self.sealed, self.location, self.category, self.contents)

    def as_list(self) -> List[str]:
        return [self.box, *self.data_fields, *self.extra]


@dataclass(frozen=True)
class CatalogueEntry:
    box_name: str
    fullness: str
    sealed: str
    location: str
    category: str
    contents: str

    @classmethod
    def from_row(cls, row: CatalogueRow) -> "CatalogueEntry":
        return cls(
            box_name=row.box,
            fullness=row.fullness,
            sealed=row.sealed,
            location=row.location,
            category=row.category,
            contents=row.contents,
        )


@dataclass
class SnipeITRecord:
    """One asset row of the Snipe-IT import file, fields in header order"""
    full_name: str = ""
    email: str = ""
    username: str = ""
    item_name: str = ""
    category: str = ""
    model_name: str = ""
    manufacturer: str = ""
    model_number: str = ""
    serial_number: str = ""
    asset_tag: str = ""
    location: str = ""
    notes: str = ""
    purchase_date: str = ""
    purchase_cost: str = ""
    company: str = ""
    status: str = ""
    warranty: str = ""
    supplier: str = ""
    box_name: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in dataclass_fields(cls)]

    def as_row(self) -> List[str]:
        return [getattr(self, name) for name in self.field_names()]


@dataclass
class Anomaly:
    """A data-quality problem found in a dropped catalogue row"""
    row_index: int
    kind: str
    message: str
    fields: List[str] = field(default_factory=list)

    def describe(self) -> str:
        return f"{self.message} at {self.row_index} {self.fields}"
