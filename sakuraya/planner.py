"""Recipient list and budget calculations.

The recipients page lists who receives duit raya and how much; these helpers
compute the totals it displays, the note breakdown for the whole list and how
the list compares against the user's total budget.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import pandas as pd

from .cash_breakdown import CashDenomination, allocate_many, round_amount
from .config import (
    DEFAULT_RECIPIENT_CATEGORY,
    FALLBACK_RECIPIENT_CATEGORY,
    RECIPIENT_CATEGORIES,
)

logger = logging.getLogger(__name__)

RECIPIENT_COLUMNS = ['Name', 'Category', 'Amount']


def normalize_category(value: Any) -> str:
    """Map free-form category input onto one of ``RECIPIENT_CATEGORIES``."""
    if isinstance(value, str):
        text = value.strip().title()
        if text in RECIPIENT_CATEGORIES:
            return text
    logger.debug("Unknown recipient category %r, using %s", value, FALLBACK_RECIPIENT_CATEGORY)
    return FALLBACK_RECIPIENT_CATEGORY


@dataclass
class Recipient:
    name: str
    amount: float
    category: str = DEFAULT_RECIPIENT_CATEGORY

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Recipient name cannot be blank")
        self.name = self.name.strip()
        # Same validation the note breakdown applies later on.
        round_amount(self.amount)
        self.amount = float(self.amount)
        self.category = normalize_category(self.category)


def recipients_frame(recipients: Sequence[Recipient]) -> pd.DataFrame:
    """Tabulate recipients with ``Name``, ``Category`` and ``Amount`` columns."""
    rows = [
        {'Name': r.name, 'Category': r.category, 'Amount': r.amount}
        for r in recipients
    ]
    return pd.DataFrame(rows, columns=RECIPIENT_COLUMNS)


def recipient_summary(recipients: Sequence[Recipient]) -> Dict[str, Any]:
    """Totals shown on the recipients page.

    Returns:
        Dictionary with ``total_amount``, ``count`` and ``by_category`` (a
        mapping of every category to the amount allotted to it, zero when the
        category is unused)

    Example:
        >>> summary = recipient_summary([Recipient('Aisyah', 50, 'Family')])
        >>> summary['total_amount'], summary['count']
        (50.0, 1)
    """
    frame = recipients_frame(recipients)
    by_category = {category: 0.0 for category in RECIPIENT_CATEGORIES}
    if not frame.empty:
        grouped = frame.groupby('Category')['Amount'].sum()
        for category, amount in grouped.items():
            by_category[category] = float(amount)

    return {
        'total_amount': float(frame['Amount'].sum()) if not frame.empty else 0.0,
        'count': len(frame),
        'by_category': by_category,
    }


def recipients_breakdown(recipients: Sequence[Recipient]) -> List[CashDenomination]:
    """Notes to withdraw so every recipient gets their own envelope."""
    return allocate_many(r.amount for r in recipients)


def budget_status(total_budget: float, recipients: Sequence[Recipient]) -> Dict[str, Any]:
    """Compare the amount allotted to recipients against the total budget.

    ``unallocated`` goes negative when the list exceeds the budget, in which
    case ``over_budget`` is set.  ``percent_allocated`` is 0 for a zero budget.
    """
    round_amount(total_budget)
    allocated = recipient_summary(recipients)['total_amount']
    budget = float(total_budget)
    unallocated = budget - allocated
    percent = (allocated / budget * 100.0) if budget > 0 else 0.0
    return {
        'total_budget': budget,
        'allocated': allocated,
        'unallocated': unallocated,
        'over_budget': unallocated < 0,
        'percent_allocated': percent,
    }
