"""
Number formatting helpers.
"""


def format_thousands(value: int) -> str:
    """Format an integer with comma thousands separators, e.g. 18755 -> '18,755'."""
    return f"{value:,}"
