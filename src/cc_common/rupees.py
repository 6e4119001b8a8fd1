"""Rupee display helpers.

Prices are kept as the plain numbers the fixture carries (whole rupees per
hour in practice). Integral floats are shown without a decimal part.
"""


def rupees_to_display(amount: float) -> str:
    """Format an amount for notices: 1500 -> '₹1500', 799.5 -> '₹799.5'."""
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f"₹{amount}"


def hourly_rate_display(amount: float) -> str:
    """1500 -> '₹1500/hour'."""
    return f"{rupees_to_display(amount)}/hour"
