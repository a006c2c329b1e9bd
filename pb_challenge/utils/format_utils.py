"""Display formatting for KRW amounts"""

EOK = 100_000_000  # 1억 won


def format_won(value: int) -> str:
    """Whole 억 units, floored: 123_456_789_012 → '1,234억'"""
    eok = value // EOK
    return f"{eok:,}억"


def format_won_diff(value: int) -> str:
    """Signed 억 delta for result screens: 5_000_000_000 → '+50억'"""
    eok = value // EOK
    sign = "+" if eok > 0 else ""
    return f"{sign}{eok:,}억"
