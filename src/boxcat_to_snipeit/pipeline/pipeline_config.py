"""
Pipeline Configuration

Centralized constants for the box catalogue to Snipe-IT conversion: how the
catalogue is recognised, which rows are dropped and how the import file is laid out.
"""

from datetime import datetime


class PipelineConfig:
    """Configuration for the box catalogue to Snipe-IT pipeline"""

    def __init__(self):
        # === Encodings ===
        self.input_encoding = "utf-8-sig"
        self.fallback_encodings = ["cp1252", "latin-1"]
        self.output_encoding = "utf-8"

        # === Catalogue Layout ===
        self.header_box_label = "Box"
        self.header_fullness_label = "Fullness"
        self.verification_prefix = "verification v"
        self.verification_value_prefix = "V"

        # === Retired Box States ===
        # fullness value -> (anomaly kind, message when the row still carries data)
        self.retired_states = {
            "empty": ("empty_with_data", "Empty box with data"),
            "destroyed": ("destroyed_with_data", "Destroyed box with data"),
            "unassigned": ("unassigned_with_data", "Unassigned box with data"),
            "not printed": ("unprinted_with_data", "Unprinted box label with data"),
            "printed-unused": ("unused_with_data", "Unused box label with data"),
        }
        # An empty box may still name a location, so only the contents are checked
        self.empty_state = "empty"

        self.bad_verification_message = "Badly formatted verification line"
        self.no_content_message = "Unhandled no data stat"

        # === Snipe-IT Asset Defaults ===
        self.model_name = "Generic-Model"
        self.tag_timestamp_format = "%Y%m%d%H%M%S"
        self.tag_index_width = 8

        # === Snipe-IT Import Header (19 columns) ===
        self.output_header = [
            "Full Name", "Email", "Username", "item Name", "Category", "Model name",
            "Manufacturer", "Model Number", "Serial number", "Asset Tag", "Location",
            "Notes", "Purchase Date", "Purchase Cost", "Company", "Status",
            "Warranty", "Supplier", "BoxName"
        ]

    def is_header_row(self, box: str, fullness: str) -> bool:
        """Catalogue header row: 'Box' then 'Fullness', exact match"""
        return box == self.header_box_label and fullness == self.header_fullness_label

    def normalize_fullness(self, fullness: str) -> str:
        return fullness.strip().lower()

    def format_asset_tag(self, box_name: str, index: int, now: datetime) -> str:
        """Box label, wall-clock timestamp and zero-padded entry index"""
        timestamp = now.strftime(self.tag_timestamp_format)
        return f"{box_name}-{timestamp}-{index:0{self.tag_index_width}d}"
