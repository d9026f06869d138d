"""
Visibility Gate and Duplicate-Lock Detector

Pure predicates over a FactSnapshot. Both are idempotent and may be
re-run on every fact change.
"""

from __future__ import annotations
from typing import Iterable, Optional

from ..contracts.snapshot import FactSnapshot
from .numeric import coerce_decimal


def should_show(snapshot: FactSnapshot) -> bool:
    """
    Whether the migration feature is shown at all.

    True when the participant still holds pool shares, or has a locked
    amount that is present and not the literal "0".
    """
    if coerce_decimal(snapshot.pool_shares) > 0:
        return True
    locked = snapshot.locked_shares_v3
    return bool(locked) and locked != "0"


def has_already_locked(participant: Optional[str], share_owners: Iterable[str]) -> bool:
    """
    Whether `participant` is among the addresses that already locked shares.

    Exact membership; duplicates in `share_owners` are harmless.
    """
    if participant is None:
        return False
    return any(owner == participant for owner in share_owners)
