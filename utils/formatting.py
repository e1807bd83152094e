"""Display helpers for chart axes"""


def format_axis_tick(value: float) -> str:
    """Compact value-axis tick label: 1.5M, 2.0K, 3.0, 0.25, 0"""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    if value >= 1:
        return f"{value:.1f}"
    if value > 0:
        return f"{value:.2f}"
    return "0"
