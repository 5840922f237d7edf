"""Display formatting shared with the presentation layer."""

from pathways.simulation.ivf import cycles_needed_range


def format_percent(value: float, decimals: int = 1) -> str:
    """0.6271 -> '62.7%'"""
    return f"{value * 100:.{decimals}f}%"


def format_number(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}"


def format_cycles_needed(cycles: float | None) -> str:
    """Cycles needed for one euploid embryo; a fractional estimate becomes a range."""
    bounds = cycles_needed_range(cycles)
    if bounds is None:
        return "N/A"
    low, high = bounds
    if low == high:
        return str(low)
    return f"{low}–{high}"
