"""Display helpers for monetary amounts."""


def format_amount(value: float) -> str:
    """Format an amount with two decimals and comma thousands separators."""
    return '{:,.2f}'.format(value)


def format_money(value: float, currency_symbol: str) -> str:
    """Format an amount followed by its currency suffix, e.g. '1,500.00 ₽'."""
    return f"{format_amount(value)} {currency_symbol}"
