"""
Tests for historical Kaya identity queries.

"""

from __future__ import annotations

import warnings

import pandas as pd
import pytest

from kayadata.library.diagnostics import DiagnosticSink
from kayadata.library.exceptions import InputValidationError, NoDataWarning
from kayadata.library.kaya import get_historical
from kayadata.library.kaya.historical import HISTORICAL_COLUMNS


class TestMarketExchangeRates:
    """Test the default MER query."""

    def test_columns(self, kaya_tables):
        """Only the Kaya columns are returned, without GDP variants or codes."""
        result = get_historical("Alphaland", tables=kaya_tables)
        assert list(result.columns) == HISTORICAL_COLUMNS
        assert "G_ppp" not in result.columns
        assert "region_code" not in result.columns

    def test_stored_values(self, kaya_tables):
        result = get_historical("Alphaland", tables=kaya_tables)
        assert result["year"].tolist() == [2000, 2001]
        assert result["G"].tolist() == [10.0, 12.0]
        assert result["g"].iloc[0] == pytest.approx(10.0)
        assert result["ef"].iloc[1] == pytest.approx(9.0)

    def test_identities_hold(self, kaya_tables):
        """Returned rows satisfy g = G/P, e = E/G, f = F/E and ef = F/G."""
        result = get_historical(
            ["Alphaland", "Betaland", "World"], tables=kaya_tables
        )
        assert result["g"].tolist() == pytest.approx((result["G"] / result["P"]).tolist())
        assert result["e"].tolist() == pytest.approx((result["E"] / result["G"]).tolist())
        assert result["f"].tolist() == pytest.approx((result["F"] / result["E"]).tolist())
        assert result["ef"].tolist() == pytest.approx((result["F"] / result["G"]).tolist())

    def test_table_order(self, kaya_tables):
        """Rows come in table order, not request order."""
        result = get_historical(["World", "Alphaland"], tables=kaya_tables)
        assert result["region"].tolist() == [
            "Alphaland",
            "Alphaland",
            "World",
            "World",
        ]


class TestPurchasingPowerParity:
    """Test that PPP queries swap in G_ppp and recompute dependent ratios."""

    def test_gdp_replaced(self, kaya_tables):
        result = get_historical("Betaland", gdp="PPP", tables=kaya_tables)
        assert result["G"].tolist() == [6.0, 7.0]

    def test_ratios_recomputed(self, kaya_tables):
        result = get_historical("Betaland", gdp="PPP", tables=kaya_tables)
        first = result.iloc[0]
        assert first["g"] == pytest.approx(3.0)
        assert first["e"] == pytest.approx(8.0 / 6.0)
        assert first["ef"] == pytest.approx(40.0 / 6.0)

    def test_f_unchanged(self, kaya_tables):
        """f = F/E does not involve GDP and is the same under both conventions."""
        mer = get_historical("Betaland", tables=kaya_tables)
        ppp = get_historical("Betaland", gdp="PPP", tables=kaya_tables)
        pd.testing.assert_series_equal(mer["f"], ppp["f"])

    def test_case_sensitive(self, kaya_tables):
        """Conventions match exactly; lower case is rejected with a suggestion."""
        with pytest.raises(InputValidationError, match="Did you mean: PPP"):
            get_historical("World", gdp="ppp", tables=kaya_tables)

    def test_invalid_convention(self, kaya_tables):
        """An unknown convention is an input error, never a diagnostic."""
        with pytest.raises(InputValidationError, match="Did you mean: PPP"):
            get_historical("World", gdp="PPPP", quiet=True, tables=kaya_tables)


class TestMissingRegions:
    """Test behaviour when nothing matches."""

    def test_unknown_name_warns_once(self, kaya_tables):
        with pytest.warns(NoDataWarning) as record:
            result = get_historical("Atlantis", tables=kaya_tables)
        assert result.empty
        assert list(result.columns) == HISTORICAL_COLUMNS
        no_data = [w for w in record if issubclass(w.category, NoDataWarning)]
        assert len(no_data) == 1
        assert "There is no data for country or region Atlantis" in str(
            no_data[0].message
        )

    def test_quiet_is_silent(self, kaya_tables):
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter("always")
            result = get_historical("Atlantis", quiet=True, tables=kaya_tables)
        assert result.empty
        assert not [w for w in record if issubclass(w.category, NoDataWarning)]

    def test_partial_match(self, kaya_tables):
        """Known regions are returned and no diagnostic is reported."""
        sink = DiagnosticSink()
        result = get_historical(
            ["Atlantis", "World"], tables=kaya_tables, diagnostics=sink
        )
        assert set(result["region"]) == {"World"}
        assert len(sink) == 0

    def test_no_region_given(self, kaya_tables):
        """Omitting both names and codes is an error, not an empty result."""
        with pytest.raises(InputValidationError, match="No country or region given"):
            get_historical(tables=kaya_tables)


class TestByCode:
    """Test historical queries by region code."""

    def test_code_matches_name(self, kaya_tables):
        by_name = get_historical("Alphaland", tables=kaya_tables)
        by_code = get_historical(region_code="AAA", tables=kaya_tables)
        pd.testing.assert_frame_equal(by_name, by_code)

    def test_unknown_code(self, kaya_tables):
        """An unresolved code reports itself, then the missing data by code."""
        sink = DiagnosticSink()
        result = get_historical(
            region_code="ZZZ", tables=kaya_tables, diagnostics=sink
        )
        assert result.empty
        assert sink.messages == [
            "There is no country or region with code ZZZ.",
            "There is no data for country or region ZZZ",
        ]


class TestImmutability:
    """Queries must not modify the tables they read."""

    def test_ppp_query_leaves_table(self, kaya_tables):
        before = kaya_tables.kaya_data.copy()
        result = get_historical("World", gdp="PPP", tables=kaya_tables)
        result["G"] = 0.0
        pd.testing.assert_frame_equal(kaya_tables.kaya_data, before)
