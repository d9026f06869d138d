"""
Observability & Audit Layer

RESPONSIBILITY: Audit trail and counters for evaluations
ALLOWED INPUTS: Evaluation outcomes reported by the engine
OUTPUTS: AuditLogEntry records, MetricPoint series

WHAT THIS LAYER MUST NOT DO:
============================
- Modify or influence any decision
- Filter or interpret events (only record them)
- Be consulted by the core when resolving
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Deque, Dict, List, Mapping, Optional, Tuple
from collections import deque
import hashlib

from ..contracts.events import AuditEventType, AuditLogEntry, MetricPoint

Clock = Callable[[], datetime]

# Retained entries per collector; the engine runs once per block
DEFAULT_MAX_ENTRIES = 1000


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# LOG COLLECTOR
# =============================================================================

class LogCollector:
    """
    Append-only collector of audit entries for one layer.

    Keeps the most recent `max_entries`; older entries are dropped.
    """

    def __init__(self, layer_name: str, max_entries: int = DEFAULT_MAX_ENTRIES):
        self._layer_name = layer_name
        self._entries: Deque[AuditLogEntry] = deque(maxlen=max_entries)

    def collect(self, entry: AuditLogEntry):
        """Collect an audit entry (append-only)."""
        self._entries.append(entry)

    def get_entries(self, event_type: Optional[AuditEventType] = None) -> List[AuditLogEntry]:
        """Get entries, optionally filtered by type."""
        if event_type is None:
            return list(self._entries)
        return [e for e in self._entries if e.event_type == event_type]

    @property
    def layer_name(self) -> str:
        return self._layer_name

    @property
    def entry_count(self) -> int:
        return len(self._entries)


# =============================================================================
# METRICS COLLECTOR
# =============================================================================

class MetricsCollector:
    """
    Counter series keyed by metric name.

    Each increment appends a point carrying the running total. Only the
    latest `max_points` per metric are kept; totals are never truncated.
    """

    def __init__(self, clock: Clock = utc_now, max_points: int = DEFAULT_MAX_ENTRIES):
        self._clock = clock
        self._max_points = max_points
        self._points: Dict[str, Deque[MetricPoint]] = {}
        self._totals: Dict[Tuple[str, Tuple[Tuple[str, str], ...]], float] = {}

    def increment(self, name: str, labels: Tuple[Tuple[str, str], ...] = (), amount: float = 1.0):
        key = (name, labels)
        total = self._totals.get(key, 0.0) + amount
        self._totals[key] = total
        series = self._points.setdefault(name, deque(maxlen=self._max_points))
        series.append(MetricPoint(
            metric_name=name,
            value=total,
            timestamp=self._clock(),
            labels=labels,
        ))

    def total(self, name: str, labels: Tuple[Tuple[str, str], ...] = ()) -> float:
        return self._totals.get((name, labels), 0.0)

    def get_points(self, name: str) -> List[MetricPoint]:
        return list(self._points.get(name, []))


# =============================================================================
# OBSERVABILITY ENGINE
# =============================================================================

@dataclass
class ObservabilityConfig:
    """Configuration for observability engine."""
    enable_audit: bool = True
    enable_metrics: bool = True
    max_entries: int = DEFAULT_MAX_ENTRIES


EVALUATIONS_METRIC = "migration_evaluations_total"


class ObservabilityEngine:
    """
    Central observability engine.

    BOUNDARY ENFORCEMENT:
    - ONLY observes, never modifies
    - Provides read-only access to collected data
    """

    def __init__(self, config: Optional[ObservabilityConfig] = None, clock: Clock = utc_now):
        self._config = config or ObservabilityConfig()
        self._clock = clock
        self._sequence = 0
        limit = self._config.max_entries
        self._collectors: Dict[str, LogCollector] = {
            'engine': LogCollector('engine', limit),
            'content': LogCollector('content', limit),
        }
        self._metrics = MetricsCollector(clock, limit) if self._config.enable_metrics else None

    def log_audit(
        self,
        action: str,
        event_type: AuditEventType = AuditEventType.EVALUATION,
        entity_id: Optional[str] = None,
        layer: str = "engine",
        metadata: Optional[Mapping[str, str]] = None,
    ) -> Optional[AuditLogEntry]:
        """Record one audit entry. Returns None when auditing is disabled."""
        if not self._config.enable_audit:
            return None

        self._sequence += 1
        timestamp = self._clock()
        digest = hashlib.sha256(
            f"{layer}_{action}|{self._sequence}|{timestamp.timestamp()}".encode()
        ).hexdigest()[:16]

        entry = AuditLogEntry(
            entry_id=f"audit_{digest}",
            event_type=event_type,
            timestamp=timestamp,
            layer=layer,
            action=action,
            entity_id=entity_id,
            metadata=tuple(sorted((k, str(v)) for k, v in (metadata or {}).items())),
        )
        collector = self._collectors.get(layer)
        if collector is None:
            collector = self._collectors[layer] = LogCollector(layer, self._config.max_entries)
        collector.collect(entry)
        return entry

    def count_evaluation(self, rule_name: str):
        if self._metrics is not None:
            self._metrics.increment(EVALUATIONS_METRIC, (("rule", rule_name),))

    def get_audit_log(
        self,
        layer: Optional[str] = None,
        event_type: Optional[AuditEventType] = None,
    ) -> List[AuditLogEntry]:
        """Entries for one layer, or for every layer ordered by timestamp."""
        if layer is not None:
            collector = self._collectors.get(layer)
            return collector.get_entries(event_type) if collector else []
        entries: List[AuditLogEntry] = []
        for collector in self._collectors.values():
            entries.extend(collector.get_entries(event_type))
        return sorted(entries, key=lambda e: e.timestamp)

    @property
    def metrics(self) -> Optional[MetricsCollector]:
        return self._metrics
