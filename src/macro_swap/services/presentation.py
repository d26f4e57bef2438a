"""Text formatting for comparison rows."""

from macro_swap.domain.substitution import ComparisonRow


def format_value(value: float, decimals: int, unit: str) -> str:
    """Format a value at the given precision followed by its unit."""
    return f"{value:.{decimals}f}{unit}"


def format_delta(row: ComparisonRow) -> str | None:
    """Return the signed change for a row, or None when it is not shown.

    The preserved macro and unchanged rows carry no delta.
    """
    if row.is_dominant_for_source or row.to_value == row.from_value:
        return None
    delta = row.delta
    sign = "+" if delta > 0 else ""
    return f"{sign}{delta:.{row.decimals}f}"


def format_row(row: ComparisonRow) -> str:
    """Format a comparison row as a single line."""
    line = (
        f"{row.label}: "
        f"{format_value(row.from_value, row.decimals, row.unit)} -> "
        f"{format_value(row.to_value, row.decimals, row.unit)}"
    )
    delta = format_delta(row)
    if delta is not None:
        line = f"{line} ({delta})"
    return line


def format_comparison(rows: list[ComparisonRow]) -> str:
    """Format all rows, one per line."""
    return "\n".join(format_row(row) for row in rows)
