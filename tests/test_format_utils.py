"""Tests for format_utils module."""

from datetime import date

from rearrangepdf.utils.format_utils import (
    format_elapsed_time,
    format_file_size,
    suggest_output_name,
)


class TestFormatFileSize:
    def test_zero_bytes(self):
        assert format_file_size(0) == "0 B"

    def test_bytes(self):
        assert format_file_size(500) == "500 B"

    def test_kilobytes(self):
        assert format_file_size(1024) == "1.00 KB"
        assert format_file_size(1536) == "1.50 KB"

    def test_megabytes(self):
        assert format_file_size(1024 * 1024) == "1.00 MB"
        assert format_file_size(15 * 1024 * 1024) == "15.0 MB"

    def test_large_values_no_decimals(self):
        assert format_file_size(200 * 1024 * 1024) == "200 MB"

    def test_negative_returns_zero(self):
        assert format_file_size(-1) == "0 B"


class TestFormatElapsedTime:
    def test_milliseconds(self):
        assert format_elapsed_time(0.35) == "350ms"

    def test_zero(self):
        assert format_elapsed_time(0) == "0ms"

    def test_seconds(self):
        assert format_elapsed_time(1.5) == "1.50s"

    def test_negative_treated_as_zero(self):
        assert format_elapsed_time(-2) == "0ms"


class TestSuggestOutputName:
    def test_strips_pdf_extension(self):
        name = suggest_output_name("Quarterly Report.pdf", today=date(2025, 1, 31))
        assert name == "Quarterly Report_edited_20250131.pdf"

    def test_extension_case_insensitive(self):
        name = suggest_output_name("SCAN.PDF", today=date(2025, 12, 1))
        assert name == "SCAN_edited_20251201.pdf"

    def test_name_without_extension(self):
        assert suggest_output_name("notes", today=date(2025, 6, 7)) == "notes_edited_20250607.pdf"

    def test_only_trailing_extension_removed(self):
        name = suggest_output_name("a.pdf.backup.pdf", today=date(2025, 6, 7))
        assert name == "a.pdf.backup_edited_20250607.pdf"
