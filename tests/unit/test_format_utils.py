"""Unit tests for KRW display formatting"""

from pb_challenge.utils.format_utils import format_won, format_won_diff


def test_format_won_floors_to_eok():
    assert format_won(100_000_000_000) == "1,000억"
    assert format_won(123_456_789_012) == "1,234억"
    assert format_won(99_999_999) == "0억"


def test_format_won_diff_sign():
    assert format_won_diff(5_000_000_000) == "+50억"
    assert format_won_diff(-5_000_000_000) == "-50억"
    assert format_won_diff(50_000_000) == "0억"  # under 1억 floors to zero, no sign
    assert format_won_diff(-50_000_000) == "-1억"  # floor, not truncation
