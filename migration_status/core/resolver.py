"""
Migration Status Resolver
=========================

Pure function: FactSnapshot x ContentCatalog -> PresentationResult.

INVARIANT: resolve(snapshot, catalog) is a PURE FUNCTION
Same snapshot and catalog -> identical result. Nothing is cached;
callers re-run it on every fact change.

FAILURE SEMANTICS:
==================
- Malformed numeric strings never raise (they read as zero)
- A catalog missing any required key raises ContentConfigurationError
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..contracts.base import Action
from ..contracts.content import ContentCatalog
from ..contracts.snapshot import FactSnapshot, PresentationResult
from .messages import compose, locked_shares_suffix, remaining_blocks_suffix
from .numeric import SHARE_DECIMALS
from .rules import FALLBACK_RULE_NAME, RULES, first_match

CatalogLike = Union[ContentCatalog, Mapping[str, Any]]


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for the resolver."""
    share_decimals: int = SHARE_DECIMALS
    fallback_title: str = "No migration information available"


@dataclass(frozen=True)
class Decision:
    """The matched rule name alongside the result it produced."""
    rule_name: str
    result: PresentationResult
    is_fallback: bool = field(default=False)


def decide(
    snapshot: FactSnapshot,
    catalog: CatalogLike,
    config: Optional[ResolverConfig] = None,
) -> Decision:
    """Walk the rule table and build the result for the first match."""
    config = config or ResolverConfig()
    catalog = _as_catalog(catalog)

    rule = first_match(snapshot, RULES)
    if rule is None:
        return Decision(
            rule_name=FALLBACK_RULE_NAME,
            result=PresentationResult(
                title=config.fallback_title,
                message="",
                action=Action.NONE,
            ),
            is_fallback=True,
        )

    entry = catalog.entry(rule.content_key)

    paragraphs = []
    if rule.show_shares:
        paragraphs.append(locked_shares_suffix(snapshot, config.share_decimals))
    if rule.show_blocks:
        paragraphs.append(remaining_blocks_suffix(snapshot))

    return Decision(
        rule_name=rule.name,
        result=PresentationResult(
            title=entry.title,
            message=compose(entry.text, *paragraphs),
            action=rule.action_for(snapshot),
        ),
    )


def resolve(
    snapshot: FactSnapshot,
    catalog: CatalogLike,
    config: Optional[ResolverConfig] = None,
) -> PresentationResult:
    """Title, message and recommended action for `snapshot`."""
    return decide(snapshot, catalog, config).result


def _as_catalog(catalog: CatalogLike) -> ContentCatalog:
    if isinstance(catalog, ContentCatalog):
        return catalog
    return ContentCatalog.from_mapping(catalog)
