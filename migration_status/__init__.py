"""
Liquidity Provider Migration Status

This package tells a liquidity provider, inside a pool migration flow,
where the migration stands and which action (if any) to take next.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Responsibility: Immutable inputs and outputs shared by all layers
   - Outputs: FactSnapshot, PresentationResult, ContentCatalog, errors
   - MUST NOT: Hold behavior beyond validation

2. CORE (core/)
   - Responsibility: Visibility Gate, Duplicate-Lock Detector, Resolver
   - Allowed inputs: FactSnapshot + ContentCatalog
   - Outputs: PresentationResult / booleans
   - MUST NOT: Perform I/O, log, cache results, or hold mutable state

3. CONTENT (content/)
   - Responsibility: Load localized copy into a ContentCatalog
   - MUST NOT: Decide which copy is shown

4. OBSERVABILITY (observability/)
   - Responsibility: Append-only audit of evaluations
   - MUST NOT: Influence any decision

The engine (engine.py) wires these layers together for callers that want
one call per fact change.
"""

from .contracts import (
    MigrationPhase,
    Action,
    FactSnapshot,
    PresentationResult,
    ContentKey,
    ContentEntry,
    ContentCatalog,
    MigrationStatusError,
    ContentConfigurationError,
    ConfigurationError,
    InvalidFactError,
)
from .core import (
    should_show,
    has_already_locked,
    resolve,
    decide,
    Decision,
    locked_shares_suffix,
    remaining_blocks_suffix,
)
from .engine import MigrationStatusEngine, MigrationStatusConfig, MigrationEvaluation

__all__ = [
    'MigrationPhase',
    'Action',
    'FactSnapshot',
    'PresentationResult',
    'ContentKey',
    'ContentEntry',
    'ContentCatalog',
    'MigrationStatusError',
    'ContentConfigurationError',
    'ConfigurationError',
    'InvalidFactError',
    'should_show',
    'has_already_locked',
    'resolve',
    'decide',
    'Decision',
    'locked_shares_suffix',
    'remaining_blocks_suffix',
    'MigrationStatusEngine',
    'MigrationStatusConfig',
    'MigrationEvaluation',
]
