"""
View Contract Tests

TEST CATEGORIES:
================
1. Immutability - view models cannot be mutated
2. Mapping - evaluations map to the panel without reinterpretation
"""

import pytest
from dataclasses import FrozenInstanceError

from migration_frontend import MigrationViewMapper, MigrationStatusViewModel, MIGRATION_HEADER
from migration_status.contracts import MigrationPhase
from migration_status.engine import MigrationEvaluation, MigrationStatusEngine
from migration_status.observability import ObservabilityEngine
from tests.fixtures import PARTICIPANT, fixed_clock, make_catalog, make_snapshot


@pytest.fixture
def engine():
    return MigrationStatusEngine(
        catalog=make_catalog(),
        observability=ObservabilityEngine(clock=fixed_clock),
    )


@pytest.fixture
def mapper():
    return MigrationViewMapper()


class TestImmutability:

    def test_view_model_is_frozen(self, engine, mapper):
        view = mapper.map_evaluation(engine.evaluate(make_snapshot()))
        with pytest.raises(FrozenInstanceError):
            view.title = "modified"

    def test_evaluation_is_frozen(self, engine):
        evaluation = engine.evaluate(make_snapshot())
        with pytest.raises(FrozenInstanceError):
            evaluation.visible = False


class TestMapping:

    def test_lock_control_shown_for_lock_action(self, engine, mapper):
        view = mapper.map_evaluation(engine.evaluate(make_snapshot()))
        assert view.visible
        assert view.header == MIGRATION_HEADER
        assert view.alert_state == "info"
        assert view.title == "migrationStarted title"
        assert view.show_lock_control

    def test_no_lock_control_after_completion(self, engine, mapper):
        view = mapper.map_evaluation(engine.evaluate(make_snapshot(phase=MigrationPhase.COMPLETED)))
        assert view.visible
        assert not view.show_lock_control

    def test_hidden_evaluation(self, mapper):
        assert mapper.map_evaluation(MigrationEvaluation.hidden()) == MigrationStatusViewModel.hidden()

    def test_text_passes_through(self, engine, mapper):
        evaluation = engine.evaluate(make_snapshot())
        assert mapper.map_evaluation(evaluation).text == evaluation.result.message

    def test_shares_locked_passes_through(self, engine, mapper):
        evaluation = engine.evaluate(make_snapshot(share_owners=(PARTICIPANT,)))
        assert mapper.map_evaluation(evaluation).shares_locked
