"""Formatting utilities for ringgit amounts and note labels."""

from __future__ import annotations

from typing import Union

from .config import CURRENCY_PREFIX


def format_ringgit(amount: Union[float, int], include_prefix: bool = True) -> str:
    """Format a ringgit amount with thousands separators and two decimals.

    Args:
        amount: The amount to format
        include_prefix: Whether to include the ``RM`` prefix

    Returns:
        Formatted currency string (e.g., "RM 1,234.56" or "1,234.56")

    Example:
        >>> format_ringgit(1234.5)
        'RM 1,234.50'
        >>> format_ringgit(1234.5, include_prefix=False)
        '1,234.50'
    """
    formatted = f"{amount:,.2f}"
    return f"{CURRENCY_PREFIX} {formatted}" if include_prefix else formatted


def denomination_label(value: int) -> str:
    """Display label of a note, e.g. ``RM100``."""
    return f"{CURRENCY_PREFIX}{value}"


def escape_for_markdown(text: str) -> str:
    """Escape characters markdown renderers would treat as emphasis or math.

    Example:
        >>> escape_for_markdown('RM 5 *each*')
        'RM 5 \\\\*each\\\\*'
    """
    for char in ("\\", "$", "*", "_"):
        text = text.replace(char, "\\" + char)
    return text
