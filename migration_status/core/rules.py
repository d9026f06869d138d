"""
Resolution Rule Table
=====================

Ordered (predicate, outcome) pairs. The resolver walks the table top-down
and stops at the first match; when nothing matches it uses the fallback.

ORDER IS BEHAVIOR:
==================
Rules overlap. For example a participant with no pool shares, an open
deadline, a met threshold and closed locks satisfies both
`pool_shares_locked` and `deadline_or_threshold_met`; the earlier rule wins.
Do not reorder.

LOCK OFFER:
===========
A rule with `offers_lock` yields LOCK_SHARES only while locks are open
(phase past NOT_STARTED, deadline not passed, canAddShares true);
otherwise it yields NONE.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..contracts.base import Action, MigrationPhase
from ..contracts.content import ContentKey
from ..contracts.snapshot import FactSnapshot
from .numeric import coerce_decimal

FALLBACK_RULE_NAME = "fallback"


@dataclass(frozen=True)
class ResolutionRule:
    """One row of the table."""
    name: str
    applies: Callable[[FactSnapshot], bool]
    content_key: ContentKey
    offers_lock: bool = False
    show_shares: bool = False
    show_blocks: bool = False

    def action_for(self, snapshot: FactSnapshot) -> Action:
        # pool_shares_locked does not test canAddShares, and the legacy widget
        # offered the lock button there even with locks closed. Never offer
        # LOCK_SHARES unless locks_open holds.
        if self.offers_lock and locks_open(snapshot):
            return Action.LOCK_SHARES
        return Action.NONE


# =============================================================================
# PREDICATES
# =============================================================================

def locks_open(s: FactSnapshot) -> bool:
    return (
        s.phase is not MigrationPhase.NOT_STARTED
        and not s.deadline_passed
        and s.can_add_shares
    )


def _completed(s: FactSnapshot) -> bool:
    return s.phase is MigrationPhase.COMPLETED


def _not_started(s: FactSnapshot) -> bool:
    return s.phase is MigrationPhase.NOT_STARTED


def _started_with_shares(s: FactSnapshot) -> bool:
    return (
        s.phase is not MigrationPhase.NOT_STARTED
        and not s.deadline_passed
        and coerce_decimal(s.pool_shares) > 0
        and s.can_add_shares
    )


def _started_without_shares(s: FactSnapshot) -> bool:
    return (
        s.phase is not MigrationPhase.NOT_STARTED
        and not s.deadline_passed
        and coerce_decimal(s.pool_shares) <= 0
    )


def _deadline_or_threshold_met(s: FactSnapshot) -> bool:
    return (
        s.phase is not MigrationPhase.NOT_STARTED
        and (s.deadline_passed or s.threshold_met)
        and not s.can_add_shares
    )


# =============================================================================
# TABLE
# =============================================================================

RULES: Tuple[ResolutionRule, ...] = (
    ResolutionRule(
        name="migration_complete",
        applies=_completed,
        content_key=ContentKey.MIGRATION_COMPLETE,
    ),
    ResolutionRule(
        name="migration_not_started",
        applies=_not_started,
        content_key=ContentKey.MIGRATION_NOT_STARTED,
    ),
    ResolutionRule(
        name="migration_started",
        applies=_started_with_shares,
        content_key=ContentKey.MIGRATION_STARTED,
        offers_lock=True,
        show_shares=True,
        show_blocks=True,
    ),
    ResolutionRule(
        name="pool_shares_locked",
        applies=_started_without_shares,
        content_key=ContentKey.POOL_SHARES_LOCKED,
        offers_lock=True,
        show_shares=True,
        show_blocks=True,
    ),
    ResolutionRule(
        name="deadline_or_threshold_met",
        applies=_deadline_or_threshold_met,
        content_key=ContentKey.DEADLINE_MET_THRESHOLD_MET,
        show_shares=True,
    ),
)


def first_match(snapshot: FactSnapshot, rules: Tuple[ResolutionRule, ...] = RULES) -> Optional[ResolutionRule]:
    """First rule whose predicate holds, or None for the fallback."""
    for rule in rules:
        if rule.applies(snapshot):
            return rule
    return None
