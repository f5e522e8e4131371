"""
Tests for export/report generation.
"""
import io

import pandas as pd
import pytest

from compounding.export.reports import (
    create_csv_report,
    create_excel_report,
    format_amount,
    format_nok,
    format_nok_full,
    format_percentage,
)


class TestFormatting:
    def test_format_nok_millions(self):
        assert format_nok(1_500_000) == "1.5M"

    def test_format_nok_thousands(self):
        assert format_nok(250_000) == "250k"

    def test_format_nok_small(self):
        assert format_nok(999) == "999"

    def test_format_amount_groups_digits(self):
        assert format_amount(1_234_567.4) == "1\u00a0234\u00a0567"

    def test_format_nok_full(self):
        assert format_nok_full(848_640) == "848\u00a0640 kr"

    def test_format_percentage(self):
        assert format_percentage(0.77) == "77%"


class TestExcelReport:
    def test_returns_xlsx_bytes(self, calculator_results):
        data = create_excel_report(calculator_results)
        assert isinstance(data, bytes)
        assert data[:2] == b"PK"

    def test_sheets(self, calculator_results):
        data = create_excel_report(calculator_results)
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None)
        assert set(sheets) == {
            "Sammendrag", "Vekst", "Vente", "Sammenligning", "Pensjon", "Milepæler"
        }
        assert len(sheets["Vekst"]) == 26


class TestCsvReport:
    def test_sections(self, calculator_results):
        csv = create_csv_report(calculator_results)
        assert "=== Sammendrag ===" in csv
        assert "=== Vekst ===" in csv
        assert "Start i dag" in csv
        assert "=== Milepæler ===" in csv

    def test_tax_rows(self, calculator_results):
        csv = create_csv_report(calculator_results)
        assert f"Skatt,{calculator_results.tax.tax}" in csv


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
