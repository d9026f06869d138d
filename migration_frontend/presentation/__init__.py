from .viewmodels import MigrationStatusViewModel, MIGRATION_HEADER

__all__ = ['MigrationStatusViewModel', 'MIGRATION_HEADER']
