"""
Tests for top-down trends, projected values and projection to a year.

"""

from __future__ import annotations

import math
from functools import partial

import pandas as pd
import pytest

from kayadata.library.diagnostics import DiagnosticSink
from kayadata.library.exceptions import (
    InputValidationError,
    NoDataWarning,
    YearOutOfRangeError,
)
from kayadata.library.kaya import get_projected_values, get_trends, project_to_year
from kayadata.library.kaya.top_down import TREND_COLUMNS, VALUE_COLUMNS


class TestTrends:
    """Test derived trends of the Kaya ratios."""

    def test_columns(self, kaya_tables):
        result = get_trends("Alphaland", tables=kaya_tables)
        assert list(result.columns) == TREND_COLUMNS
        assert len(result) == 1

    def test_ratio_trends_are_differences(self, kaya_tables):
        row = get_trends("Alphaland", tables=kaya_tables).iloc[0]
        assert row["g"] == pytest.approx(0.03 - 0.01)
        assert row["e"] == pytest.approx(0.02 - 0.03)
        assert row["f"] == pytest.approx(0.015 - 0.02)
        assert row["ef"] == pytest.approx(0.015 - 0.03)

    def test_by_code(self, kaya_tables):
        result = get_trends(region_code="WLD", tables=kaya_tables)
        assert result["region"].tolist() == ["World"]
        assert result["ef"].iloc[0] == pytest.approx(-0.025)

    def test_missing_region(self, kaya_tables):
        """Betaland has projections but no trends."""
        with pytest.warns(NoDataWarning, match="Betaland"):
            result = get_trends("Betaland", tables=kaya_tables)
        assert result.empty
        assert list(result.columns) == TREND_COLUMNS


class TestProjectedValues:
    """Test projected values with derived ratios."""

    def test_columns_and_years(self, kaya_tables):
        result = get_projected_values("Alphaland", tables=kaya_tables)
        assert list(result.columns) == VALUE_COLUMNS
        assert result["year"].tolist() == [2020, 2030, 2040]

    def test_ratios(self, kaya_tables):
        result = get_projected_values("Alphaland", tables=kaya_tables)
        assert result["g"].tolist() == pytest.approx([10.0, 10.0, 5.0])
        assert result["e"].tolist() == pytest.approx([0.5, 0.25, 0.5])
        assert result["f"].tolist() == pytest.approx([20.0, 10.0, 5.0])
        assert result["ef"].tolist() == pytest.approx([10.0, 2.5, 2.5])

    def test_stored_ratio_columns_ignored(self, kaya_tables):
        """Ratios are always derived, never read from the table."""
        assert "g" not in kaya_tables.td_values.columns

    def test_unknown_code(self, kaya_tables):
        sink = DiagnosticSink()
        result = get_projected_values(
            region_code="QQQ", tables=kaya_tables, diagnostics=sink
        )
        assert result.empty
        assert sink.messages == [
            "There is no country or region with code QQQ.",
            "There is no data for country or region QQQ",
        ]


class TestProjectToYear:
    """Test piecewise-linear interpolation of projected values."""

    def test_at_knot(self, kaya_tables):
        """Projecting to a stored year reproduces the stored values."""
        result = project_to_year("Alphaland", 2030, tables=kaya_tables)
        stored = get_projected_values("Alphaland", tables=kaya_tables)
        stored = stored.loc[stored["year"] == 2030].reset_index(drop=True)
        pd.testing.assert_frame_equal(result, stored, check_dtype=False)

    def test_between_knots(self, kaya_tables):
        row = project_to_year("Alphaland", 2025, tables=kaya_tables).iloc[0]
        assert row["year"] == 2025
        assert row["P"] == pytest.approx(1.5)
        assert row["G"] == pytest.approx(15.0)
        assert row["E"] == pytest.approx(5.0)
        assert row["F"] == pytest.approx(75.0)

    def test_ratios_from_interpolated_values(self, kaya_tables):
        """Ratios are derived after interpolation, not interpolated themselves."""
        row = project_to_year("Alphaland", 2025, tables=kaya_tables).iloc[0]
        assert row["g"] == pytest.approx(10.0)
        assert row["e"] == pytest.approx(1.0 / 3.0)
        assert row["f"] == pytest.approx(15.0)
        assert row["ef"] == pytest.approx(5.0)

    def test_sparse_knots(self, kaya_tables):
        """World only has 2020 and 2040, so 2030 is their midpoint."""
        row = project_to_year("World", 2030, tables=kaya_tables).iloc[0]
        assert row["P"] == pytest.approx(4.0)
        assert row["G"] == pytest.approx(22.0)
        assert row["F"] == pytest.approx(120.0)

    def test_fractional_year(self, kaya_tables):
        row = project_to_year("World", 2022.5, tables=kaya_tables).iloc[0]
        assert row["P"] == pytest.approx(3.25)

    def test_single_knot(self, kaya_tables):
        """A region with one stored year has values only at that year."""
        at_knot = project_to_year("Betaland", 2030, tables=kaya_tables).iloc[0]
        assert at_knot["P"] == pytest.approx(2.0)
        assert at_knot["g"] == pytest.approx(2.0)

        elsewhere = project_to_year("Betaland", 2025, tables=kaya_tables).iloc[0]
        assert math.isnan(elsewhere["P"])
        assert math.isnan(elsewhere["g"])

    def test_several_regions(self, kaya_tables):
        result = project_to_year(["World", "Alphaland"], 2040, tables=kaya_tables)
        assert result["region"].tolist() == ["Alphaland", "World"]
        assert result["P"].tolist() == pytest.approx([4.0, 5.0])

    @pytest.mark.parametrize("year", [2019, 2040.5, 1990])
    def test_out_of_range(self, kaya_tables, year):
        with pytest.raises(YearOutOfRangeError, match="between 2020 and 2040"):
            project_to_year("Alphaland", year, tables=kaya_tables)

    def test_out_of_range_not_suppressed(self, kaya_tables):
        """quiet=True only silences diagnostics, never errors."""
        with pytest.raises(YearOutOfRangeError) as excinfo:
            project_to_year("Alphaland", 2050, quiet=True, tables=kaya_tables)
        assert excinfo.value.year == 2050
        assert excinfo.value.min_year == 2020
        assert excinfo.value.max_year == 2040

    def test_range_is_whole_table(self, kaya_tables):
        """The allowed range comes from all regions, not just the requested one."""
        result = project_to_year("Betaland", 2020, tables=kaya_tables)
        assert len(result) == 1
        assert math.isnan(result["P"].iloc[0])

    def test_missing_year(self, kaya_tables):
        with pytest.raises(InputValidationError, match="No projection year"):
            project_to_year("Alphaland", tables=kaya_tables)

    @pytest.mark.parametrize(
        "query",
        [get_trends, get_projected_values, partial(project_to_year, year=2030)],
    )
    def test_no_region_given(self, kaya_tables, query):
        with pytest.raises(InputValidationError, match="No country or region given"):
            query(tables=kaya_tables)

    def test_unknown_region(self, kaya_tables):
        with pytest.warns(NoDataWarning, match="Atlantis"):
            result = project_to_year("Atlantis", 2030, tables=kaya_tables)
        assert result.empty
        assert list(result.columns) == VALUE_COLUMNS

    def test_unknown_code_reported_once(self, kaya_tables):
        """A code that fails to resolve gives a single diagnostic."""
        sink = DiagnosticSink()
        result = project_to_year(
            region_code="QQQ", year=2030, tables=kaya_tables, diagnostics=sink
        )
        assert result.empty
        assert sink.messages == ["There is no country or region with code QQQ."]

    def test_quiet(self, kaya_tables):
        sink = DiagnosticSink()
        project_to_year(
            "Atlantis", 2030, quiet=True, tables=kaya_tables, diagnostics=sink
        )
        assert len(sink) == 0
