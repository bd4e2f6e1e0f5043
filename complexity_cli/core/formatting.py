import datetime
from typing import Optional, Union

from complexity_cli.core.constants import CLOCK_ICON, SPACE_ICON, TIME_ICON


def format_relative_time(iso_str: str) -> str:
    """
    Format an ISO timestamp as relative time.
    Args:
        iso_str: ISO format timestamp string
    Returns:
        Relative time string (e.g., "5m ago")
    """
    try:
        dt = datetime.datetime.fromisoformat(iso_str)
        now = datetime.datetime.now(dt.tzinfo)
        delta = now - dt
        seconds = int(delta.total_seconds())

        if seconds < 60:
            return f"{seconds}s ago"
        elif seconds < 3600:
            return f"{seconds // 60}m ago"
        elif seconds < 86400:
            return f"{seconds // 3600}h ago"
        else:
            return f"{seconds // 86400}d ago"
    except (TypeError, ValueError):
        return "?"


def format_timestamp(
    value: Union[str, datetime.datetime], fmt: str = "%H:%M:%S"
) -> str:
    """
    Render a capture timestamp in local time.
    Args:
        value: Aware datetime or ISO format string
        fmt: strftime format
    Returns:
        Formatted timestamp, or "?" when the value cannot be parsed
    """
    if isinstance(value, str):
        try:
            value = datetime.datetime.fromisoformat(value)
        except ValueError:
            return "?"
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(fmt)


def format_lens(time_label: str, space_label: str, stamp: Optional[str] = None) -> str:
    """
    Format the inline result decoration shown next to a function.
    Args:
        time_label: Time complexity label
        space_label: Space complexity label
        stamp: Optional already formatted capture time
    Returns:
        Decoration string such as "⏱️ O(n) | 💾 O(1) | 🕒 10:42:07"
    """
    parts = [f"{TIME_ICON} {time_label}", f"{SPACE_ICON} {space_label}"]
    if stamp:
        parts.append(f"{CLOCK_ICON} {stamp}")
    return " | ".join(parts)


def format_line_range(start_line: int, end_line: int) -> str:
    """Format a zero-based, end-exclusive line range for display."""
    return f"{start_line}-{end_line}"
