"""
Shared Test Fixtures

Snapshot builders and a deterministic content catalog.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict

from migration_status.contracts import (
    ContentCatalog, ContentKey, FactSnapshot, MigrationPhase,
)


FIXED_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

PARTICIPANT = "0xA11CE"
OTHER = "0xB0B"

CONTENT: Dict[str, Dict[str, str]] = {
    key.value: {"title": f"{key.value} title", "text": f"{key.value} text"}
    for key in ContentKey
}


def fixed_clock() -> datetime:
    return FIXED_TIME


def make_catalog() -> ContentCatalog:
    return ContentCatalog.from_mapping(CONTENT)


def make_content_document(**overrides: Any) -> Dict[str, Any]:
    """A document in the content file format, optionally overriding entries."""
    lp: Dict[str, Any] = {k: dict(v) for k, v in CONTENT.items()}
    lp.update(overrides)
    return {"liquidityProvider": lp}


def make_snapshot(**overrides: Any) -> FactSnapshot:
    """
    A STARTED snapshot with open locks and a positive balance.

    Override any FactSnapshot field by keyword.
    """
    fields: Dict[str, Any] = dict(
        phase=MigrationPhase.STARTED,
        threshold_met=False,
        deadline_passed=False,
        pool_shares="5",
        deadline_block="200",
        current_block=150,
        can_add_shares=True,
        locked_shares_v3=None,
        participant=PARTICIPANT,
        share_owners=(),
    )
    fields.update(overrides)
    return FactSnapshot(**fields)
