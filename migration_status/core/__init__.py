"""
Core Decision Layer

RESPONSIBILITY: Visibility Gate, Duplicate-Lock Detector, Resolver
ALLOWED INPUTS: FactSnapshot, ContentCatalog
OUTPUTS: bool, PresentationResult

WHAT THIS LAYER MUST NOT DO:
============================
- Perform network or file I/O
- Log, cache, or hold mutable state
- Decide how shares are locked (only whether the action is offered)
"""

from .gate import should_show, has_already_locked
from .messages import locked_shares_suffix, remaining_blocks_suffix
from .resolver import resolve, decide, Decision, ResolverConfig
from .rules import RULES, ResolutionRule, FALLBACK_RULE_NAME, first_match

__all__ = [
    'should_show',
    'has_already_locked',
    'locked_shares_suffix',
    'remaining_blocks_suffix',
    'resolve',
    'decide',
    'Decision',
    'ResolverConfig',
    'RULES',
    'ResolutionRule',
    'FALLBACK_RULE_NAME',
    'first_match',
]
