"""
Content Loader

Reads localized migration copy from a JSON document shaped like:

    {"liquidityProvider": {"migrationStarted": {"title": "...", "text": "..."}, ...}}

and validates it with pydantic before building a ContentCatalog.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ..contracts.base import ContentConfigurationError, Error, ErrorCode, missing_content
from ..contracts.content import ContentCatalog, ContentEntry, ContentKey, REQUIRED_CONTENT_KEYS

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_PATH = Path(__file__).with_name("migration.json")


# =============================================================================
# SCHEMA
# =============================================================================

class ContentPairModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    text: StrictStr


class LiquidityProviderContentModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    migration_not_started: ContentPairModel = Field(alias="migrationNotStarted")
    migration_started: ContentPairModel = Field(alias="migrationStarted")
    pool_shares_locked: ContentPairModel = Field(alias="poolSharesLocked")
    deadline_met_threshold_met: ContentPairModel = Field(alias="deadlineMetThresholdMet")
    migration_complete: ContentPairModel = Field(alias="migrationComplete")


class MigrationContentModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    liquidity_provider: LiquidityProviderContentModel = Field(alias="liquidityProvider")


# =============================================================================
# LOADING
# =============================================================================

def parse_catalog(document: Mapping[str, Any], source: Optional[str] = None) -> ContentCatalog:
    """Validate a decoded content document and build the catalog."""
    try:
        model = MigrationContentModel.model_validate(document)
    except ValidationError as e:
        raise _content_error(e, source) from e

    lp = model.liquidity_provider.model_dump(by_alias=True)
    entries = tuple(
        (key, ContentEntry(title=lp[key.value]['title'], text=lp[key.value]['text']))
        for key in REQUIRED_CONTENT_KEYS
    )
    return ContentCatalog(entries=entries, source=source)


def load_catalog(path: Optional[Union[str, Path]] = None) -> ContentCatalog:
    """
    Load the catalog from `path`, or from the packaged default copy.

    Raises ContentConfigurationError if the file is unreadable, is not UTF-8
    JSON, or lacks any required entry.
    """
    path = Path(path) if path else DEFAULT_CONTENT_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ContentConfigurationError(Error.now(
            ErrorCode.CONTENT_UNREADABLE,
            f"Cannot read migration content from {path}: {e}",
            path=str(path),
        )) from e

    catalog = parse_catalog(document, source=str(path))
    logger.debug("Loaded migration content from %s", path)
    return catalog


def _content_error(e: ValidationError, source: Optional[str]) -> ContentConfigurationError:
    known = {key.value for key in ContentKey}
    missing = []
    for detail in e.errors():
        loc = detail.get('loc', ())
        if detail.get('type') != 'missing':
            continue
        if tuple(loc) == ('liquidityProvider',):
            missing.extend(key.value for key in REQUIRED_CONTENT_KEYS)
        elif loc and loc[-1] in known:
            missing.append(loc[-1])

    if missing:
        return missing_content(tuple(missing), source)

    error = Error.now(
        ErrorCode.MALFORMED_CONTENT_ENTRY,
        f"Invalid migration content: {e.error_count()} validation error(s)",
    )
    if source:
        error = error.with_context("source", source)
    return ContentConfigurationError(error)
