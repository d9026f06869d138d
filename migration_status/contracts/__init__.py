"""
Contracts Module

This module defines the explicit data types that form the contracts
between the fact source, the core, the content store and the renderer.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses)
2. All failures are enumerated error codes carried by typed exceptions
3. Numeric on-chain amounts stay strings until the core reads them
"""

from .base import (
    MigrationPhase,
    Action,
    RESOLVABLE_ACTIONS,
    ErrorCode,
    Error,
    MigrationStatusError,
    ContentConfigurationError,
    ConfigurationError,
    InvalidFactError,
)
from .snapshot import FactSnapshot, PresentationResult
from .content import ContentKey, ContentEntry, ContentCatalog, REQUIRED_CONTENT_KEYS
from .events import AuditEventType, AuditLogEntry, MetricPoint
from .mapper import snapshot_from_provider

__all__ = [
    'MigrationPhase',
    'Action',
    'RESOLVABLE_ACTIONS',
    'ErrorCode',
    'Error',
    'MigrationStatusError',
    'ContentConfigurationError',
    'ConfigurationError',
    'InvalidFactError',
    'FactSnapshot',
    'PresentationResult',
    'ContentKey',
    'ContentEntry',
    'ContentCatalog',
    'REQUIRED_CONTENT_KEYS',
    'AuditEventType',
    'AuditLogEntry',
    'MetricPoint',
    'snapshot_from_provider',
]
