"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- Layers may import types but MUST NOT modify this module
- Errors are enumerated; nothing fails silently
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from typing import FrozenSet, Optional, Tuple


# =============================================================================
# MIGRATION LIFECYCLE (Externally owned)
# =============================================================================

class MigrationPhase(Enum):
    """
    Lifecycle of the overall migration program.

    EXTERNALLY OWNED:
    =================
    The fact source reports the phase; the core only reads it.
    """
    NOT_STARTED = "not_started"
    STARTED = "started"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: object) -> MigrationPhase:
        """
        Accept an enum member, a name or a value in any common spelling.

        "NOT_STARTED", "notStarted", "not started" and "not-started" all
        map to NOT_STARTED. Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown migration phase: {value!r}")
        wanted = _squash(value)
        for member in cls:
            if wanted in (_squash(member.name), _squash(member.value)):
                return member
        raise ValueError(f"Unknown migration phase: {value!r}")


def _squash(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


# =============================================================================
# RECOMMENDED ACTIONS (Closed variant)
# =============================================================================

class Action(Enum):
    """
    Action recommended to the participant.

    Only NONE and LOCK_SHARES are produced by the current rule table.
    The remaining members are reserved for future rules.
    """
    NONE = "none"
    LOCK_SHARES = "lockShares"

    # Reserved
    START_MIGRATION = "startMigration"
    COMPLETE_MIGRATION = "completeMigration"
    CANCEL_MIGRATION = "cancelMigration"
    REMOVE_SHARES = "removeShares"
    VIEW_V4_ASSET = "viewV4Asset"


# Actions the resolver is allowed to construct today
RESOLVABLE_ACTIONS: FrozenSet[Action] = frozenset({Action.NONE, Action.LOCK_SHARES})


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    """
    # Content errors
    MISSING_CONTENT_KEY = auto()
    MALFORMED_CONTENT_ENTRY = auto()
    CONTENT_UNREADABLE = auto()

    # Configuration errors
    INVALID_CONFIG_VALUE = auto()

    # Fact source errors
    UNKNOWN_PHASE = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data; exceptions below carry one.
    """
    code: ErrorCode
    message: str
    timestamp: datetime
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @staticmethod
    def now(code: ErrorCode, message: str, **context: str) -> Error:
        return Error(
            code=code,
            message=message,
            timestamp=datetime.now(timezone.utc),
            context=tuple(sorted((k, str(v)) for k, v in context.items())),
        )

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            timestamp=self.timestamp,
            context=self.context + ((key, value),)
        )


class MigrationStatusError(Exception):
    """Base class for every failure surfaced by this package."""

    def __init__(self, error: Error):
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class ContentConfigurationError(MigrationStatusError):
    """
    The content catalog cannot serve the required copy.

    This is a setup fault, never a user-recoverable condition.
    """

    def __init__(self, error: Error, missing_keys: Tuple[str, ...] = ()):
        super().__init__(error)
        self.missing_keys = missing_keys


class ConfigurationError(MigrationStatusError):
    """Invalid configuration override."""


class InvalidFactError(MigrationStatusError):
    """The fact source supplied a value the contracts cannot represent."""


def missing_content(keys: Tuple[str, ...], source: Optional[str] = None) -> ContentConfigurationError:
    """Build the error raised when required content keys are absent."""
    error = Error.now(
        ErrorCode.MISSING_CONTENT_KEY,
        f"Content catalog is missing required keys: {', '.join(keys)}",
        keys=",".join(keys),
    )
    if source:
        error = error.with_context("source", source)
    return ContentConfigurationError(error, missing_keys=keys)
