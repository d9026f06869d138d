"""
Presentation Contracts

Responsibility:
Define ViewModel contracts for the migration status panel.
Strictly decoupled from the decision logic that fills them.
"""

from __future__ import annotations
from dataclasses import dataclass

MIGRATION_HEADER = "V4 Migration Status"


@dataclass(frozen=True)
class MigrationStatusViewModel:
    """ViewModel for the migration status panel."""
    visible: bool
    header: str
    title: str
    text: str
    alert_state: str          # e.g., "info"
    show_lock_control: bool   # render the "lock shares" control
    shares_locked: bool       # participant already appears among share owners

    @staticmethod
    def hidden() -> "MigrationStatusViewModel":
        """Factory for the panel when nothing should be rendered."""
        return MigrationStatusViewModel(
            visible=False,
            header="",
            title="",
            text="",
            alert_state="info",
            show_lock_control=False,
            shares_locked=False,
        )
