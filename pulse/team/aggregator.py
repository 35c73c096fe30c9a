"""Team Aggregator.

Builds one roll-up row per member of the caller's scope from that
member's most recent ScoreRecord:

  manager      → direct reports
  hr, admin    → all active users
  employee     → Forbidden

Members without scoring history default to medium / 0 / today.
"""
from collections import defaultdict
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

import structlog

from pulse.errors import Forbidden, Unauthorized
from pulse.models import (
    DepartmentBreakdown,
    Identity,
    RiskDistribution,
    RiskLevel,
    TEAM_VIEW_ROLES,
    TeamDistribution,
    TeamMemberScore,
    TeamStats,
    UserRole,
)
from pulse.scoring.utils import to_decimal
from pulse.services.stores import IdentityProvider, ScopeResolver, ScoreStore

logger = structlog.get_logger(__name__)

DEFAULT_RISK_LEVEL: RiskLevel = RiskLevel.MEDIUM
DEFAULT_SCORE: float = 0.0

ScopeFn = Callable[[ScopeResolver, Identity], List[str]]

# One arm per role in TEAM_VIEW_ROLES
SCOPE_RESOLUTION: Dict[UserRole, ScopeFn] = {
    UserRole.MANAGER: lambda resolver, caller: resolver.get_direct_reports(caller.id),
    UserRole.HR: lambda resolver, caller: resolver.get_active_users(),
    UserRole.ADMIN: lambda resolver, caller: resolver.get_active_users(),
}


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class TeamAggregator:
    """Roll up the latest score of every member in the caller's scope."""

    def __init__(
        self,
        scores: ScoreStore,
        users: IdentityProvider,
        scopes: ScopeResolver,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        self.scores = scores
        self.users = users
        self.scopes = scopes
        self.today = today

    def resolve_scope(self, caller: Optional[Identity]) -> List[str]:
        """Member ids visible to the caller.

        Raises:
            Unauthorized: No caller identity.
            Forbidden: The caller's role may not view team data.
        """
        if caller is None or not caller.id:
            raise Unauthorized("Authentication required")
        if caller.role not in TEAM_VIEW_ROLES:
            raise Forbidden(f"Role '{caller.role.value}' may not view team data")
        return SCOPE_RESOLUTION[caller.role](self.scopes, caller)

    def member_scores(self, member_ids: List[str]) -> List[TeamMemberScore]:
        """Latest score per member; ids unknown to the directory are skipped."""
        return [row for row, _ in self._collect(member_ids)]

    def _collect(self, member_ids: List[str]) -> List[Tuple[TeamMemberScore, bool]]:
        today = self.today()
        rows: List[Tuple[TeamMemberScore, bool]] = []
        for member_id in member_ids:
            user = self.users.get_user(member_id)
            if user is None:
                logger.warning("team_member_unknown", member_id=member_id)
                continue
            history = self.scores.get_scores_for_user(member_id)
            latest = max(history, key=lambda s: s.score_date) if history else None
            rows.append((TeamMemberScore(
                id=user.id,
                name=user.name,
                department=user.department,
                risk_level=latest.risk_level if latest else DEFAULT_RISK_LEVEL,
                score=latest.total_score if latest else DEFAULT_SCORE,
                last_update_date=latest.score_date if latest else today,
            ), latest is not None))
        return rows

    def build_distribution(
        self,
        caller: Optional[Identity],
        department: Optional[str] = None,
        risk_level: Optional[RiskLevel] = None,
    ) -> TeamDistribution:
        """Risk distribution and member list of the caller's scope.

        Optional filters narrow the member list; counts follow the filter.
        """
        member_ids = self.resolve_scope(caller)
        members = self.member_scores(member_ids)
        if department:
            members = [m for m in members if m.department == department]
        if risk_level:
            members = [m for m in members if m.risk_level == risk_level]

        distribution = TeamDistribution.from_members(members)
        logger.info(
            "team_distribution_built",
            caller_id=caller.id,
            role=caller.role.value,
            total_members=distribution.total_members,
            high_risk=distribution.high_risk,
        )
        return distribution

    def build_stats(self, caller: Optional[Identity]) -> TeamStats:
        """Distribution counts plus a per-department breakdown.

        ``average_score`` only averages members that have a score history.
        """
        collected = self._collect(self.resolve_scope(caller))
        members = [row for row, _ in collected]
        scored_ids = {row.id for row, has_history in collected if has_history}
        distribution = TeamDistribution.from_members(members)

        by_department: Dict[str, List[TeamMemberScore]] = defaultdict(list)
        for member in members:
            by_department[member.department].append(member)

        breakdown = []
        for name in sorted(by_department):
            rows = by_department[name]
            scored = [m.score for m in rows if m.id in scored_ids]
            average = (
                to_decimal(sum(Decimal(str(s)) for s in scored) / len(scored), 2)
                if scored else Decimal(0)
            )
            breakdown.append(DepartmentBreakdown(
                department=name,
                member_count=len(rows),
                average_score=float(average),
                risk_distribution=RiskDistribution(
                    high=sum(1 for m in rows if m.risk_level == RiskLevel.HIGH),
                    medium=sum(1 for m in rows if m.risk_level == RiskLevel.MEDIUM),
                    low=sum(1 for m in rows if m.risk_level == RiskLevel.LOW),
                ),
            ))

        return TeamStats(
            total_members=distribution.total_members,
            high_risk=distribution.high_risk,
            medium_risk=distribution.medium_risk,
            low_risk=distribution.low_risk,
            department_breakdown=breakdown,
        )
