"""Team roll-ups for managers and HR."""
from pulse.team.aggregator import SCOPE_RESOLUTION, TeamAggregator

__all__ = ["SCOPE_RESOLUTION", "TeamAggregator"]
