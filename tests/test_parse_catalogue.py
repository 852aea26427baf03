"""
Catalogue parsing tests: header search, row classification and anomaly reporting.

Run: pytest tests/test_parse_catalogue.py -v
"""

import logging

import pandas as pd
import pytest

from boxcat_to_snipeit.exceptions import MalformedRowError
from boxcat_to_snipeit.models import CatalogueEntry, CatalogueRow, RowKind
from boxcat_to_snipeit.pipeline.steps import step_01_parse_catalogue
from boxcat_to_snipeit.pipeline.steps.step_01_parse_catalogue import classify_row, parse_catalogue

HEADER = ["Box", "Fullness", "Sealed", "Location", "Category", "Contents"]


def row(*values):
    return CatalogueRow.from_fields(list(values))


def parse(data_rows, preamble=()):
    return parse_catalogue([*preamble, HEADER, *data_rows])


class TestHeaderSearch:

    def test_rows_before_header_are_ignored(self):
        preamble = [
            ["BX99", "Full", "Sealed", "Attic", "Books", "Should not appear"],
            ["Notes", "", "", "", "", "Anything"],
        ]

        entries, anomalies, stats = parse([["BX01", "Full", "", "Loft", "Toys", "Kite"]], preamble)

        assert [e.box_name for e in entries] == ["BX01"]
        assert anomalies == []
        assert stats['preamble_rows'] == 2

    def test_header_match_is_case_sensitive(self):
        rows = [
            ["box", "fullness", "", "", "", ""],
            ["BX01", "Full", "", "Loft", "Toys", "Kite"],
        ]

        entries, _, stats = parse_catalogue(rows)

        assert entries == []
        assert stats['preamble_rows'] == 2

    def test_header_row_is_not_emitted(self):
        entries, _, _ = parse([])

        assert entries == []

    def test_second_header_row_is_treated_as_data(self):
        entries, _, _ = parse([HEADER])

        assert entries == [CatalogueEntry("Box", "Fullness", "Sealed", "Location", "Category", "Contents")]

    def test_missing_header_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            entries, _, _ = parse_catalogue([["BX01", "Full", "", "Loft", "Toys", "Kite"]])

        assert entries == []
        assert "header row found" in caplog.text

    def test_short_row_is_malformed(self):
        with pytest.raises(MalformedRowError):
            parse_catalogue([["Box", "Fullness", "", "", ""]])


class TestClassifyRow:

    def test_blank_data_row(self):
        assert classify_row(row("BX02", "", "", "", "", "")) == (RowKind.BLANK, None)

    def test_blank_data_wins_over_verification(self):
        assert classify_row(row("Verification V3", "", "", "", "", "")) == (RowKind.BLANK, None)

    def test_good_verification_row(self):
        assert classify_row(row("Verification V1", "V1", "V1", "V1", "V1", "V1")) == (RowKind.VERIFICATION, None)

    def test_verification_prefix_is_case_insensitive(self):
        kind, anomaly = classify_row(row("VERIFICATION V7", "V7", "V7", "V7", "V7", "V7"))

        assert kind is RowKind.VERIFICATION
        assert anomaly is None

    def test_bad_verification_row(self):
        kind, anomaly = classify_row(row("Verification V2", "V2", "WRONG", "V2", "V2", "V2"), index=14)

        assert kind is RowKind.VERIFICATION
        assert anomaly.kind == 'bad_verification'
        assert anomaly.message == "Badly formatted verification line"
        assert anomaly.row_index == 14
        assert anomaly.fields == ["Verification V2", "V2", "WRONG", "V2", "V2", "V2"]

    def test_verification_suffix_keeps_original_case(self):
        kind, anomaly = classify_row(row("verification v2a", "V2a", "V2a", "V2a", "V2a", "V2a"))

        assert kind is RowKind.VERIFICATION
        assert anomaly is None

    @pytest.mark.parametrize("fullness", ["Empty", " EMPTY ", "Destroyed", "unassigned", "Not Printed", "printed-unused"])
    def test_retired_states_are_dropped(self, fullness):
        kind, anomaly = classify_row(row("BX05", fullness, "", "", "", ""))

        assert kind is RowKind.RETIRED
        assert anomaly is None

    def test_empty_box_may_name_a_location(self):
        kind, anomaly = classify_row(row("BX06", "Empty", "Sealed", "Garage", "Tools", ""))

        assert kind is RowKind.RETIRED
        assert anomaly is None

    def test_empty_box_with_contents(self):
        kind, anomaly = classify_row(row("BX03", "Empty", "", "", "", "LeftoverNote"))

        assert kind is RowKind.RETIRED
        assert anomaly.message == "Empty box with data"

    @pytest.mark.parametrize("fullness, message", [
        ("Destroyed", "Destroyed box with data"),
        ("Unassigned", "Unassigned box with data"),
        ("not printed", "Unprinted box label with data"),
        ("printed-unused", "Unused box label with data"),
    ])
    def test_retired_box_with_data(self, fullness, message):
        kind, anomaly = classify_row(row("BX07", fullness, "", "Loft", "", ""))

        assert kind is RowKind.RETIRED
        assert anomaly.message == message

    def test_no_contents_fallback(self):
        kind, anomaly = classify_row(row("BX04", "Partial", "", "", "", ""), index=3)

        assert kind is RowKind.NO_CONTENT
        assert anomaly.kind == 'no_contents'
        assert anomaly.message == "Unhandled no data stat"

    def test_regular_entry(self):
        assert classify_row(row("BX01", "Full", "Sealed", "ShelfA", "Books", "Old Atlas")) == (RowKind.ENTRY, None)


class TestParseCatalogue:

    def test_end_to_end_example(self, caplog):
        data_rows = [
            ["BX01", "Full", "Sealed", "ShelfA", "Books", "Old Atlas"],
            ["BX02", "Empty", "", "", "", ""],
            ["BX03", "Empty", "", "", "", "LeftoverNote"],
            ["Verification V1", "V1", "V1", "V1", "V1", "V1"],
            ["Verification V2", "V2", "WRONG", "V2", "V2", "V2"],
            ["BX04", "Partial", "", "", "", ""],
        ]

        with caplog.at_level(logging.WARNING):
            entries, anomalies, stats = parse(data_rows)

        assert entries == [CatalogueEntry("BX01", "Full", "Sealed", "ShelfA", "Books", "Old Atlas")]
        assert [a.message for a in anomalies] == [
            "Empty box with data",
            "Badly formatted verification line",
            "Unhandled no data stat",
        ]
        assert "Empty box with data at 3" in caplog.text
        assert "Badly formatted verification line at 5" in caplog.text
        assert "Unhandled no data stat at 6" in caplog.text
        assert stats['blank_rows'] == 0
        assert stats['verification_rows'] == 2
        assert stats['retired_rows'] == 2
        assert stats['no_content_rows'] == 1
        assert stats['entries'] == 1
        assert stats['anomalies'] == 3

    def test_unhandled_no_data_row(self):
        entries, anomalies, stats = parse([["BX04", "Partial", "Sealed", "", "", ""]])

        assert entries == []
        assert [a.kind for a in anomalies] == ['no_contents']
        assert stats['no_content_rows'] == 1

    def test_blank_rows_produce_no_diagnostic(self, caplog):
        with caplog.at_level(logging.WARNING):
            entries, anomalies, _ = parse([["BX10", "", "", "", "", ""], ["", "", "", "", "", ""]])

        assert entries == []
        assert anomalies == []
        assert caplog.text == ""

    def test_entries_keep_catalogue_order_and_extra_columns_are_ignored(self):
        entries, _, _ = parse([
            ["BX01", "Full", "", "Loft", "Toys", "Kite", "ignored"],
            ["BX02", "Partial", "Taped", "Shed", "Tools", "Saw", "also ignored"],
        ])

        assert [(e.box_name, e.contents) for e in entries] == [("BX01", "Kite"), ("BX02", "Saw")]

    def test_entries_keep_fields_verbatim(self):
        entries, _, _ = parse([["  BX01 ", " full ", "", " Loft ", "Toys ", " Kite"]])

        assert entries == [CatalogueEntry("  BX01 ", " full ", "", " Loft ", "Toys ", " Kite")]


class TestParseStep:

    def test_execute_reads_raw_frame(self, config):
        raw_df = pd.DataFrame([
            ["Intro", "", "", "", "", ""],
            HEADER,
            ["BX01", "Full", "", "Loft", "Toys", "Kite"],
            ["BX02", "Destroyed", "", "", "", ""],
        ])

        result = step_01_parse_catalogue.execute({'raw_df': raw_df, 'config': config})

        assert len(result['catalogue_entries']) == 1
        assert result['anomalies'] == []
        assert result['parse_stats']['preamble_rows'] == 1
        assert result['parse_stats']['retired_rows'] == 1
