"""
Content Catalog Contracts

Localized title/text pairs keyed by migration sub-case.

The catalog is an external, read-only input. All five keys are
required; a missing key is a configuration fault and raises
ContentConfigurationError. Keys beyond the five are ignored.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .base import ContentConfigurationError, Error, ErrorCode, missing_content


class ContentKey(Enum):
    """Sub-cases that carry their own copy."""
    MIGRATION_NOT_STARTED = "migrationNotStarted"
    MIGRATION_STARTED = "migrationStarted"
    POOL_SHARES_LOCKED = "poolSharesLocked"
    DEADLINE_MET_THRESHOLD_MET = "deadlineMetThresholdMet"
    MIGRATION_COMPLETE = "migrationComplete"


REQUIRED_CONTENT_KEYS: Tuple[ContentKey, ...] = tuple(ContentKey)


@dataclass(frozen=True)
class ContentEntry:
    """One localized {title, text} pair."""
    title: str
    text: str

    def __post_init__(self):
        if not isinstance(self.title, str) or not isinstance(self.text, str):
            raise ContentConfigurationError(Error.now(
                ErrorCode.MALFORMED_CONTENT_ENTRY,
                "Content entries need string 'title' and 'text'",
                title=type(self.title).__name__,
                text=type(self.text).__name__,
            ))


@dataclass(frozen=True)
class ContentCatalog:
    """
    Read-only mapping of ContentKey to ContentEntry.

    Construction fails fast when any required key is absent.
    """
    entries: Tuple[Tuple[ContentKey, ContentEntry], ...]
    source: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        present = {key for key, _ in self.entries}
        missing = tuple(k.value for k in REQUIRED_CONTENT_KEYS if k not in present)
        if missing:
            raise missing_content(missing, self.source)

    def entry(self, key: ContentKey) -> ContentEntry:
        for candidate, entry in self.entries:
            if candidate is key:
                return entry
        raise missing_content((key.value,), self.source)

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any], source: Optional[str] = None) -> ContentCatalog:
        """
        Build a catalog from {"migrationStarted": {"title": ..., "text": ...}, ...}.

        Values may already be ContentEntry instances. Unknown keys are dropped.
        """
        if not isinstance(mapping, Mapping):
            raise ContentConfigurationError(Error.now(
                ErrorCode.MALFORMED_CONTENT_ENTRY,
                "Content catalog must be a mapping",
                got=type(mapping).__name__,
            ))

        entries = []
        for key in REQUIRED_CONTENT_KEYS:
            raw = mapping.get(key.value)
            if raw is None:
                continue
            entries.append((key, _to_entry(key, raw)))

        return ContentCatalog(entries=tuple(entries), source=source)


def _to_entry(key: ContentKey, raw: Any) -> ContentEntry:
    if isinstance(raw, ContentEntry):
        return raw
    if isinstance(raw, Mapping) and 'title' in raw and 'text' in raw:
        return ContentEntry(title=raw['title'], text=raw['text'])
    raise ContentConfigurationError(Error.now(
        ErrorCode.MALFORMED_CONTENT_ENTRY,
        f"Content entry '{key.value}' must be a {{title, text}} pair",
        key=key.value,
    ))
