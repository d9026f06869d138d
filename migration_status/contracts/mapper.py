"""
Fact Source to Contract Mapper
==============================
Bridges the migration status provider's payload to a FactSnapshot.

Principles:
- Provider field names are accepted as-is (camelCase).
- Numeric strings pass through untouched; coercion belongs to the core.
- An unknown phase is the only rejected input.
"""

from typing import Any, Iterable, Mapping, Optional

from .base import Error, ErrorCode, InvalidFactError, MigrationPhase
from .snapshot import FactSnapshot


def snapshot_from_provider(
    state: Mapping[str, Any],
    participant: Optional[str],
    current_block: int,
) -> FactSnapshot:
    """
    Build a FactSnapshot from provider state.

    Args:
        state: Provider payload with keys status, thresholdMet, deadlinePassed,
            poolShares, poolShareOwners, lockedSharesV3, deadline, canAddShares.
        participant: Connected account address, or None.
        current_block: Latest observed block height.
    """
    try:
        phase = MigrationPhase.parse(state.get('status'))
    except ValueError as e:
        raise InvalidFactError(Error.now(
            ErrorCode.UNKNOWN_PHASE, str(e), status=repr(state.get('status'))
        )) from e

    locked = state.get('lockedSharesV3')

    return FactSnapshot(
        phase=phase,
        threshold_met=bool(state.get('thresholdMet', False)),
        deadline_passed=bool(state.get('deadlinePassed', False)),
        pool_shares=_as_text(state.get('poolShares'), default="0"),
        locked_shares_v3=None if locked is None else _as_text(locked, default="0"),
        deadline_block=_as_text(state.get('deadline'), default="0"),
        current_block=int(current_block or 0),
        can_add_shares=bool(state.get('canAddShares', False)),
        participant=participant or None,
        share_owners=_owners(state.get('poolShareOwners')),
    )


def _as_text(value: Any, default: str) -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _owners(value: Optional[Iterable[str]]) -> tuple:
    if not value:
        return ()
    return tuple(str(owner) for owner in value)
