"""
Evaluation to ViewModel Mapper

Converts a MigrationEvaluation into the panel's ViewModel.

MAPPING RULES:
==============
1. Hidden evaluations map to MigrationStatusViewModel.hidden()
2. The lock control is shown only for LOCK_SHARES
3. Copy passes through verbatim; no markup is added here
"""

from __future__ import annotations

from migration_status.contracts import Action
from migration_status.engine import MigrationEvaluation

from .presentation import MigrationStatusViewModel, MIGRATION_HEADER


class MigrationViewMapper:
    """Single point of conversion from evaluations to view models."""

    def __init__(self, header: str = MIGRATION_HEADER, alert_state: str = "info"):
        self._header = header
        self._alert_state = alert_state

    def map_evaluation(self, evaluation: MigrationEvaluation) -> MigrationStatusViewModel:
        if not evaluation.visible or evaluation.result is None:
            return MigrationStatusViewModel.hidden()

        result = evaluation.result
        return MigrationStatusViewModel(
            visible=True,
            header=self._header,
            title=result.title,
            text=result.message,
            alert_state=self._alert_state,
            show_lock_control=result.action is Action.LOCK_SHARES,
            shares_locked=evaluation.shares_locked,
        )
