"""Risk classification: wellbeing score → risk tier.

  score ≥ 4.0        → low
  2.5 ≤ score < 4.0  → medium
  score < 2.5        → high

The thresholds are fixed; callers needing different boundaries wrap
this function instead of changing module state.
"""
from decimal import Decimal
from typing import Union

from pulse.models.enums import LOW_RISK_THRESHOLD, MEDIUM_RISK_THRESHOLD, RiskLevel

_LOW = Decimal(str(LOW_RISK_THRESHOLD))
_MEDIUM = Decimal(str(MEDIUM_RISK_THRESHOLD))


def classify_risk(score: Union[int, float, Decimal]) -> RiskLevel:
    """Map a score to its risk tier."""
    value = score if isinstance(score, Decimal) else Decimal(str(score))
    if value >= _LOW:
        return RiskLevel.LOW
    if value >= _MEDIUM:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH
