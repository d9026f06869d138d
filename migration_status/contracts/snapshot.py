"""
Fact Snapshot and Presentation Result

The input and output records of one evaluation.

LIFECYCLE:
==========
A FactSnapshot is rebuilt on every upstream fact change (new block,
new balance). A PresentationResult is recomputed from it every time and
is never cached across snapshots.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .base import Action, MigrationPhase


@dataclass(frozen=True)
class FactSnapshot:
    """
    Immutable on-chain-derived facts for one participant.

    Numeric amounts stay decimal strings so that arbitrary-precision
    on-chain integers survive untouched; the core coerces them on read.
    """
    phase: MigrationPhase
    threshold_met: bool
    deadline_passed: bool
    pool_shares: str
    deadline_block: str
    current_block: int
    can_add_shares: bool
    locked_shares_v3: Optional[str] = None
    participant: Optional[str] = None
    share_owners: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.phase, MigrationPhase):
            raise TypeError(f"phase must be a MigrationPhase, got {self.phase!r}")
        # Accept any sequence of owners, store a tuple
        if not isinstance(self.share_owners, tuple):
            object.__setattr__(self, 'share_owners', tuple(self.share_owners or ()))


@dataclass(frozen=True)
class PresentationResult:
    """Title, message and recommended action for the participant."""
    title: str
    message: str
    action: Action
