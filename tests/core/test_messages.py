"""
Message Formatter Tests
"""

from migration_status.core import locked_shares_suffix, remaining_blocks_suffix
from migration_status.core.messages import compose
from tests.fixtures import make_snapshot


class TestRemainingBlocks:

    def test_counts_down_to_deadline(self):
        snapshot = make_snapshot(deadline_block="200", current_block=150)
        assert remaining_blocks_suffix(snapshot) == "50 blocks left for migration deadline"

    def test_negative_after_deadline_is_not_clamped(self):
        snapshot = make_snapshot(deadline_block="100", current_block=150)
        assert remaining_blocks_suffix(snapshot) == "-50 blocks left for migration deadline"

    def test_malformed_deadline_reads_as_zero(self):
        snapshot = make_snapshot(deadline_block="soon", current_block=10)
        assert remaining_blocks_suffix(snapshot) == "-10 blocks left for migration deadline"


class TestLockedShares:

    def test_pool_shares_raw_and_locked_scaled(self):
        snapshot = make_snapshot(pool_shares="5", locked_shares_v3="2000000000000000000")
        assert locked_shares_suffix(snapshot) == (
            "You have 5 pool shares\n\nYou have locked 2 shares"
        )

    def test_absent_locked_amount_is_zero(self):
        snapshot = make_snapshot(pool_shares="5", locked_shares_v3=None)
        assert locked_shares_suffix(snapshot).endswith("You have locked 0 shares")

    def test_malformed_pool_shares_render_zero(self):
        snapshot = make_snapshot(pool_shares="abc")
        assert locked_shares_suffix(snapshot).startswith("You have 0 pool shares")

    def test_custom_decimals(self):
        snapshot = make_snapshot(locked_shares_v3="1500000")
        assert locked_shares_suffix(snapshot, share_decimals=6).endswith("You have locked 1.5 shares")


def test_compose_joins_paragraphs():
    assert compose("text", "a", "b") == "text\n\na\n\nb"
    assert compose("text") == "text"
