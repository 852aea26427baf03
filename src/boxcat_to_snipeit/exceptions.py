"""
Pipeline Errors

Fatal failures raised by the pipeline steps. Data-quality problems in
individual catalogue rows are not errors; they are logged and the row dropped.
"""

from typing import Optional


class BoxCatError(Exception):
    """Base class for fatal conversion errors"""


class InputReadError(BoxCatError):
    """The catalogue file could not be opened or decoded"""


class InputParseError(BoxCatError):
    """The catalogue file is not well-formed CSV"""


class MalformedRowError(BoxCatError):
    """A catalogue row has fewer than the six required fields"""

    def __init__(self, field_count: int, required: int = 6, row_index: Optional[int] = None):
        self.field_count = field_count
        self.required = required
        self.row_index = row_index
        where = f" at row {row_index}" if row_index is not None else ""
        super().__init__(
            f"Catalogue row{where} has {field_count} fields, at least {required} required"
        )


class OutputWriteError(BoxCatError):
    """The import file could not be created or written"""
