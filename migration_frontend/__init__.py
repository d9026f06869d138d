"""
Migration Frontend Package

Read-only view models for rendering the migration status panel.
The renderer receives ONLY these types, never engine internals.
"""

from .mapper import MigrationViewMapper
from .presentation import MigrationStatusViewModel, MIGRATION_HEADER

__all__ = ['MigrationViewMapper', 'MigrationStatusViewModel', 'MIGRATION_HEADER']
