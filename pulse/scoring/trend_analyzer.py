"""Trend analysis over a user's time-ordered score history.

  average            = mean(all scores)           (0 when empty)
  recent             = last 7 entries
  previous           = the 7 entries before recent
  changeFromPrevious = mean(recent) − mean(previous)
  trend              = up   if change >  0.2
                       down if change < −0.2
                       stable otherwise

Fewer than 2 scores, or no ``previous`` window (history shorter than 8
entries), reports stable / 0. The 0.2 band is fixed so historical
reports stay reproducible. Window means use float arithmetic to match
the figures already published by the dashboard.
"""
from typing import Sequence

from pulse.models.enums import TrendDirection
from pulse.models.score import ScoreStats
from pulse.scoring.utils import mean

TREND_WINDOW: int = 7
TREND_THRESHOLD: float = 0.2


def analyze_trend(scores: Sequence[float]) -> ScoreStats:
    """Compute average, trend and change for an ascending score series.

    The caller supplies scores already filtered to one user and ordered
    oldest first.
    """
    values = [float(s) for s in scores]
    average = mean(values)

    if len(values) < 2:
        return ScoreStats(average=average, trend=TrendDirection.STABLE, change_from_previous=0.0)

    recent = values[-TREND_WINDOW:]
    previous = values[-2 * TREND_WINDOW:-TREND_WINDOW]
    if not previous:
        return ScoreStats(average=average, trend=TrendDirection.STABLE, change_from_previous=0.0)

    change = mean(recent) - mean(previous)

    trend = TrendDirection.STABLE
    if change > TREND_THRESHOLD:
        trend = TrendDirection.UP
    elif change < -TREND_THRESHOLD:
        trend = TrendDirection.DOWN

    return ScoreStats(average=average, trend=trend, change_from_previous=change)
