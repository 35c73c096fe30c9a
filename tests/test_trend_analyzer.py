"""Tests for trend analysis over score histories."""
import pytest

from pulse.models import TrendDirection
from pulse.scoring.trend_analyzer import TREND_WINDOW, analyze_trend


class TestAnalyzeTrend:
    """Tests for analyze_trend."""

    def test_empty_series(self):
        stats = analyze_trend([])
        assert stats.average == 0.0
        assert stats.trend == TrendDirection.STABLE
        assert stats.change_from_previous == 0.0

    def test_single_point_is_stable(self):
        stats = analyze_trend([3.0])
        assert stats.average == 3.0
        assert stats.trend == TrendDirection.STABLE
        assert stats.change_from_previous == 0.0

    def test_no_previous_window_is_stable(self):
        stats = analyze_trend([1.0] * (TREND_WINDOW - 1) + [5.0])
        assert stats.trend == TrendDirection.STABLE
        assert stats.change_from_previous == 0.0
        assert stats.average == pytest.approx(11.0 / 7)

    def test_upward_trend(self):
        stats = analyze_trend([2.0] * 7 + [3.0] * 7)
        assert stats.trend == TrendDirection.UP
        assert stats.change_from_previous == pytest.approx(1.0)
        assert stats.average == pytest.approx(2.5)

    def test_downward_trend(self):
        stats = analyze_trend([3.0] * 7 + [2.0] * 7)
        assert stats.trend == TrendDirection.DOWN
        assert stats.change_from_previous == pytest.approx(-1.0)

    def test_change_inside_band_is_stable(self):
        stats = analyze_trend([3.0] * 7 + [3.1] * 7)
        assert stats.trend == TrendDirection.STABLE
        assert stats.change_from_previous == pytest.approx(0.1)

    def test_eight_points_uses_one_previous_entry(self):
        stats = analyze_trend([1.0] + [2.0] * 7)
        assert stats.trend == TrendDirection.UP
        assert stats.change_from_previous == pytest.approx(1.0)

    def test_only_trailing_fourteen_entries_compared(self):
        stats = analyze_trend([5.0] * 6 + [2.0] * 14)
        assert stats.trend == TrendDirection.STABLE
        assert stats.change_from_previous == pytest.approx(0.0)
        # the average still covers the whole series
        assert stats.average == pytest.approx((30.0 + 28.0) / 20)
