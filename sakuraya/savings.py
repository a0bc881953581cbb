"""Savings tracker calculations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence

import pandas as pd

from .cash_breakdown import round_amount
from .config import MONTHS
from .formatting import format_ringgit

SAVINGS_COLUMNS = ['Month', 'Amount']


@dataclass
class SavingsEntry:
    month: str
    amount: float

    def __post_init__(self) -> None:
        month = self.month.strip().title() if isinstance(self.month, str) else None
        if month not in MONTHS:
            raise ValueError(f"Unknown month: {self.month!r}")
        self.month = month
        round_amount(self.amount)
        self.amount = float(self.amount)


def savings_progress(entries: Sequence[SavingsEntry], total_budget: float) -> Dict[str, Any]:
    """Progress of logged savings towards the total budget.

    Returns:
        Dictionary with ``total_saved``, ``progress`` (percent of the budget,
        may exceed 100), ``progress_capped`` (for progress bars),
        ``remaining`` and ``goal_reached``
    """
    round_amount(total_budget)
    budget = float(total_budget)
    total_saved = float(sum(entry.amount for entry in entries))
    progress = (total_saved / budget * 100.0) if budget > 0 else 0.0
    remaining = budget - total_saved
    return {
        'total_saved': total_saved,
        'progress': progress,
        'progress_capped': min(progress, 100.0),
        'remaining': remaining,
        'goal_reached': remaining <= 0,
    }


def monthly_savings(entries: Sequence[SavingsEntry]) -> pd.DataFrame:
    """Sum savings per month, in calendar order, skipping months with no entries."""
    if not entries:
        return pd.DataFrame(columns=SAVINGS_COLUMNS)

    df = pd.DataFrame([{'Month': e.month, 'Amount': e.amount} for e in entries])
    df['Month'] = pd.Categorical(df['Month'], categories=list(MONTHS), ordered=True)
    grouped = df.groupby('Month', observed=True)['Amount'].sum().reset_index()
    grouped['Month'] = grouped['Month'].astype(str)
    return grouped[SAVINGS_COLUMNS].reset_index(drop=True)


def progress_message(progress: Dict[str, Any]) -> str:
    """Status line shown under the savings progress bar."""
    if progress['remaining'] > 0:
        return f"You need {format_ringgit(progress['remaining'])} more to reach your goal."
    return "Goal reached! 🎉"
