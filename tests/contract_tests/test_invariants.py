"""
Property Tests for Migration Status Contracts
Verifies resolver, gate and detector properties over generated snapshots.
"""

from dataclasses import replace

import pytest
from hypothesis import given, strategies as st
from hypothesis.strategies import composite

from migration_status.contracts import Action, FactSnapshot, MigrationPhase, RESOLVABLE_ACTIONS
from migration_status.core import has_already_locked, resolve, should_show
from migration_status.core.numeric import coerce_decimal
from tests.fixtures import make_catalog

CATALOG = make_catalog()

# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

addresses = st.sampled_from(["0xA", "0xB", "0xC", "0xD"])

numeric_text = st.one_of(
    st.integers(min_value=-10**30, max_value=10**30).map(str),
    st.decimals(allow_nan=False, allow_infinity=False, places=4).map(str),
    st.sampled_from(["0", "abc", "not-a-number", "", "NaN", "1e3", "Infinity", "1_000"]),
    st.text(max_size=12),
)

MALFORMED = ["not-a-number", "abc", "", "NaN", "1_000", "--1", "0x10"]


@composite
def snapshots(draw, phase=None):
    """Generates FactSnapshots, including malformed numeric fields."""
    return FactSnapshot(
        phase=draw(st.sampled_from(MigrationPhase)) if phase is None else phase,
        threshold_met=draw(st.booleans()),
        deadline_passed=draw(st.booleans()),
        pool_shares=draw(numeric_text),
        locked_shares_v3=draw(st.one_of(st.none(), numeric_text)),
        deadline_block=draw(numeric_text),
        current_block=draw(st.integers(min_value=0, max_value=10**9)),
        can_add_shares=draw(st.booleans()),
        participant=draw(st.one_of(st.none(), addresses)),
        share_owners=tuple(draw(st.lists(addresses, max_size=6))),
    )


# =============================================================================
# PROPERTY TESTS
# =============================================================================

@given(snapshots(phase=MigrationPhase.COMPLETED))
def test_completed_always_reports_completion(snapshot):
    result = resolve(snapshot, CATALOG)
    assert result.action is Action.NONE
    assert result.title == "migrationComplete title"
    assert result.message == "migrationComplete text"


@given(snapshots(phase=MigrationPhase.NOT_STARTED))
def test_not_started_always_reports_not_started(snapshot):
    result = resolve(snapshot, CATALOG)
    assert result.action is Action.NONE
    assert result.title == "migrationNotStarted title"
    assert result.message == "migrationNotStarted text"


@given(snapshots(phase=MigrationPhase.STARTED), st.integers(min_value=1, max_value=10**30))
def test_open_locks_with_shares_offer_lock(snapshot, shares):
    snapshot = replace(
        snapshot, deadline_passed=False, can_add_shares=True, pool_shares=str(shares),
    )
    result = resolve(snapshot, CATALOG)
    assert result.action is Action.LOCK_SHARES
    assert "pool shares" in result.message
    assert "You have locked" in result.message
    assert "blocks left for migration deadline" in result.message


@given(snapshots())
def test_lock_action_requires_open_locks(snapshot):
    if resolve(snapshot, CATALOG).action is Action.LOCK_SHARES:
        assert snapshot.phase is not MigrationPhase.NOT_STARTED
        assert not snapshot.deadline_passed
        assert snapshot.can_add_shares


@given(snapshots())
def test_resolver_only_constructs_current_actions(snapshot):
    assert resolve(snapshot, CATALOG).action in RESOLVABLE_ACTIONS


@given(snapshots())
def test_resolve_is_pure(snapshot):
    assert resolve(snapshot, CATALOG) == resolve(snapshot, CATALOG)


@given(snapshots(), st.sampled_from(MALFORMED))
def test_malformed_pool_shares_match_zero(snapshot, malformed):
    bad = replace(snapshot, pool_shares=malformed)
    zero = replace(snapshot, pool_shares="0")
    assert resolve(bad, CATALOG) == resolve(zero, CATALOG)
    assert should_show(bad) == should_show(zero)


@given(snapshots())
def test_gate_matches_definition(snapshot):
    holds_shares = coerce_decimal(snapshot.pool_shares) > 0
    has_locked = snapshot.locked_shares_v3 not in (None, "", "0")
    assert should_show(snapshot) == (holds_shares or has_locked)


@given(addresses, st.lists(addresses, max_size=10))
def test_detector_is_membership(participant, owners):
    assert has_already_locked(participant, owners) == (participant in owners)


@pytest.mark.parametrize("pool_shares, locked, expected", [
    ("5", None, True),
    ("0", "12", True),
    ("0", None, False),
])
def test_gate_examples(pool_shares, locked, expected):
    snapshot = FactSnapshot(
        phase=MigrationPhase.STARTED,
        threshold_met=False,
        deadline_passed=False,
        pool_shares=pool_shares,
        locked_shares_v3=locked,
        deadline_block="0",
        current_block=0,
        can_add_shares=True,
    )
    assert should_show(snapshot) is expected
