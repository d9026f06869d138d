"""
Message Formatters

Plain-text paragraphs appended to catalog copy. No markup.
"""

from __future__ import annotations

from ..contracts.snapshot import FactSnapshot
from .numeric import SHARE_DECIMALS, coerce_block, coerce_decimal, format_plain, from_smallest_unit

PARAGRAPH_BREAK = "\n\n"


def locked_shares_suffix(snapshot: FactSnapshot, share_decimals: int = SHARE_DECIMALS) -> str:
    """
    "You have N pool shares" / "You have locked M shares".

    N is the coerced pool-share balance as reported; M is the locked
    amount scaled down from smallest units.
    """
    pool_shares = format_plain(coerce_decimal(snapshot.pool_shares))
    locked = from_smallest_unit(snapshot.locked_shares_v3 or "0", share_decimals)
    return (
        f"You have {pool_shares} pool shares"
        f"{PARAGRAPH_BREAK}"
        f"You have locked {locked} shares"
    )


def remaining_blocks_suffix(snapshot: FactSnapshot) -> str:
    """Blocks until the deadline. Negative once it has passed; never clamped."""
    remaining = coerce_block(snapshot.deadline_block) - snapshot.current_block
    return f"{remaining} blocks left for migration deadline"


def compose(text: str, *paragraphs: str) -> str:
    """Join catalog text and suffix paragraphs."""
    return PARAGRAPH_BREAK.join((text,) + paragraphs)
