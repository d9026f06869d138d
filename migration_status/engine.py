"""
Migration Status Engine
=======================

Orchestrates one evaluation per fact change:

    FactSnapshot -> Visibility Gate -> Resolver -> MigrationEvaluation
                 -> Duplicate-Lock Detector ---^

LAYER FLOW:
===========
1. No connected participant: nothing is evaluated, the feature is hidden
2. Visibility Gate false: hidden, no PresentationResult is computed
3. Otherwise: the Resolver produces title/message/action
The Duplicate-Lock Detector runs for every connected participant.

Each evaluation is independent. The engine holds the catalog and the audit
collectors, never a previous result.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import logging
import os

from .contracts.base import ConfigurationError, Error, ErrorCode
from .contracts.content import ContentCatalog
from .contracts.events import AuditEventType
from .contracts.mapper import snapshot_from_provider
from .contracts.snapshot import FactSnapshot, PresentationResult
from .content import load_catalog
from .core import decide, has_already_locked, should_show, ResolverConfig
from .observability import ObservabilityConfig, ObservabilityEngine

logger = logging.getLogger(__name__)

CONTENT_PATH_ENV = "MIGRATION_CONTENT_PATH"
SHARE_DECIMALS_ENV = "MIGRATION_SHARE_DECIMALS"


@dataclass
class MigrationStatusConfig:
    """Unified configuration for the engine."""
    content_path: Optional[str] = None  # None selects the packaged copy
    resolver: ResolverConfig = None
    observability: ObservabilityConfig = None

    def __post_init__(self):
        self.resolver = self.resolver or ResolverConfig()
        self.observability = self.observability or ObservabilityConfig()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> MigrationStatusConfig:
        """Defaults overridden by MIGRATION_CONTENT_PATH / MIGRATION_SHARE_DECIMALS."""
        environ = os.environ if environ is None else environ

        resolver = ResolverConfig()
        raw_decimals = environ.get(SHARE_DECIMALS_ENV)
        if raw_decimals:
            try:
                decimals = int(raw_decimals)
            except ValueError:
                decimals = -1
            if decimals < 0:
                raise ConfigurationError(Error.now(
                    ErrorCode.INVALID_CONFIG_VALUE,
                    f"{SHARE_DECIMALS_ENV} must be a non-negative integer",
                    value=raw_decimals,
                ))
            resolver = ResolverConfig(share_decimals=decimals)

        return cls(
            content_path=environ.get(CONTENT_PATH_ENV) or None,
            resolver=resolver,
        )


@dataclass(frozen=True)
class MigrationEvaluation:
    """
    Everything the renderer needs for one snapshot.

    `result` is None exactly when `visible` is False.
    """
    visible: bool
    shares_locked: bool
    result: Optional[PresentationResult] = None
    rule_name: Optional[str] = None

    @staticmethod
    def hidden(shares_locked: bool = False) -> MigrationEvaluation:
        return MigrationEvaluation(visible=False, shares_locked=shares_locked)


class MigrationStatusEngine:
    """
    Evaluates migration status for a connected liquidity provider.

    Stateless with respect to facts: pass a fresh FactSnapshot on every
    change and render the returned evaluation.
    """

    def __init__(
        self,
        config: Optional[MigrationStatusConfig] = None,
        catalog: Optional[ContentCatalog] = None,
        observability: Optional[ObservabilityEngine] = None,
    ):
        self._config = config or MigrationStatusConfig()
        self._observability = observability or ObservabilityEngine(self._config.observability)

        if catalog is None:
            catalog = load_catalog(self._config.content_path)
            self._observability.log_audit(
                "content_loaded",
                event_type=AuditEventType.CONFIGURATION,
                layer="content",
                metadata={"source": catalog.source or ""},
            )
        self._catalog = catalog

    def evaluate(self, snapshot: FactSnapshot) -> MigrationEvaluation:
        if snapshot.participant is None:
            logger.debug("No connected participant; migration status hidden")
            return MigrationEvaluation.hidden()

        shares_locked = has_already_locked(snapshot.participant, snapshot.share_owners)

        if not should_show(snapshot):
            self._record(snapshot, visible=False, rule_name=None, action=None)
            return MigrationEvaluation.hidden(shares_locked=shares_locked)

        decision = decide(snapshot, self._catalog, self._config.resolver)
        self._record(
            snapshot,
            visible=True,
            rule_name=decision.rule_name,
            action=decision.result.action.value,
        )
        return MigrationEvaluation(
            visible=True,
            shares_locked=shares_locked,
            result=decision.result,
            rule_name=decision.rule_name,
        )

    def evaluate_provider_state(
        self,
        state: Mapping[str, Any],
        participant: Optional[str],
        current_block: int,
    ) -> MigrationEvaluation:
        """Map a raw provider payload and evaluate it."""
        return self.evaluate(snapshot_from_provider(state, participant, current_block))

    def _record(self, snapshot: FactSnapshot, visible: bool, rule_name: Optional[str], action: Optional[str]):
        logger.debug(
            "Migration status for %s: visible=%s rule=%s action=%s",
            snapshot.participant, visible, rule_name, action,
        )
        self._observability.log_audit(
            "evaluate",
            entity_id=snapshot.participant,
            metadata={
                "phase": snapshot.phase.value,
                "visible": str(visible).lower(),
                "rule": rule_name or "",
                "action": action or "",
            },
        )
        if rule_name:
            self._observability.count_evaluation(rule_name)

    @property
    def catalog(self) -> ContentCatalog:
        return self._catalog

    @property
    def config(self) -> MigrationStatusConfig:
        return self._config

    @property
    def observability(self) -> ObservabilityEngine:
        return self._observability
