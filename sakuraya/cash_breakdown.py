"""Cash note breakdown for duit raya envelopes.

Given the amounts owed to recipients, work out how many physical notes of
each denomination need to be withdrawn.  Amounts are broken down greedily
over the fixed note series (100, 50, 20, 10, 5, 1).  The series is canonical,
so the greedy pass always yields the minimum number of notes.

Each recipient's amount is broken down on its own and the note counts are
then summed.  This is deliberately NOT the breakdown of the grand total:
notes go into individual envelopes, so RM176 and RM24 need two RM20 notes
(one per envelope) even though RM200 on its own would only need two RM100
notes.

Amounts are rounded to the nearest whole ringgit before the breakdown,
half away from zero (``49.5`` becomes ``50``), because notes cannot represent
sen.  Negative, NaN, infinite and non-numeric amounts raise
:class:`InvalidAmount`.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any, Iterable, List, Sequence

import pandas as pd

from .config import DENOMINATIONS, ROUNDING
from .formatting import denomination_label

logger = logging.getLogger(__name__)

if DENOMINATIONS[-1] != 1 or list(DENOMINATIONS) != sorted(DENOMINATIONS, reverse=True):
    raise RuntimeError("DENOMINATIONS must be descending and end with 1")

BREAKDOWN_COLUMNS = ['Denomination', 'Label', 'Count', 'Subtotal']


class InvalidAmount(ValueError):
    """Raised when an amount cannot be broken down into notes."""

    def __init__(self, amount: Any, reason: str):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


@dataclass(frozen=True)
class CashDenomination:
    denomination: int
    count: int
    label: str

    @property
    def subtotal(self) -> int:
        return self.denomination * self.count


def round_amount(amount: Any) -> int:
    """Validate ``amount`` and round it to the nearest whole unit.

    Halves round away from zero, so ``round_amount(2.5) == 3`` (Python's
    built-in ``round`` would give 2).  The rounding goes through
    :class:`~decimal.Decimal` so the float's exact value decides the side,
    e.g. ``0.49999999999999994`` rounds to 0.

    Raises:
        InvalidAmount: for booleans, non-numbers, NaN, infinities and
            negative amounts.
    """
    if isinstance(amount, bool):
        raise InvalidAmount(amount, "booleans are not amounts")
    if isinstance(amount, numbers.Integral):
        if amount < 0:
            raise InvalidAmount(amount, "amount cannot be negative")
        return int(amount)
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, numbers.Real):
        if not math.isfinite(amount):
            raise InvalidAmount(amount, "amount must be finite")
        value = Decimal(float(amount))
    else:
        raise InvalidAmount(amount, "amount must be a real number")

    if not value.is_finite():
        raise InvalidAmount(amount, "amount must be finite")
    if value < 0:
        raise InvalidAmount(amount, "amount cannot be negative")

    # Enough precision to hold every integer digit of the result.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        return int(value.quantize(Decimal(1), rounding=ROUNDING))


def allocate(amount: Any) -> List[CashDenomination]:
    """Break a single amount down into notes.

    Args:
        amount: Non-negative amount owed to one recipient

    Returns:
        One :class:`CashDenomination` per note in ``DENOMINATIONS`` order,
        including zero counts

    Example:
        >>> [(n.label, n.count) for n in allocate(176) if n.count]
        [('RM100', 1), ('RM50', 1), ('RM20', 1), ('RM5', 1), ('RM1', 1)]
    """
    remaining = round_amount(amount)
    breakdown: List[CashDenomination] = []

    for value in DENOMINATIONS:
        count, remaining = divmod(remaining, value)
        breakdown.append(CashDenomination(value, count, denomination_label(value)))

    assert remaining == 0, f"unallocated remainder {remaining} for {amount!r}"
    return breakdown


def allocate_many(amounts: Iterable[Any]) -> List[CashDenomination]:
    """Break down each recipient's amount separately and sum the note counts.

    The result is the per-envelope total, not ``allocate(sum(amounts))``.
    Every amount is validated before anything is returned, and an empty
    input still produces the full six-row table of zero counts.

    Example:
        >>> [(n.label, n.count) for n in allocate_many([176, 24]) if n.count]
        [('RM100', 1), ('RM50', 1), ('RM20', 2), ('RM5', 1), ('RM1', 5)]
    """
    totals = {value: 0 for value in DENOMINATIONS}
    processed = 0

    for amount in amounts:
        for note in allocate(amount):
            totals[note.denomination] += note.count
        processed += 1

    logger.debug("Allocated notes for %d amount(s): %s", processed, totals)
    return [CashDenomination(value, totals[value], denomination_label(value)) for value in DENOMINATIONS]


def breakdown_total(breakdown: Sequence[CashDenomination]) -> int:
    """Total value of a breakdown in whole ringgit."""
    return sum(note.subtotal for note in breakdown)


def note_count(breakdown: Sequence[CashDenomination]) -> int:
    """Number of physical notes in a breakdown."""
    return sum(note.count for note in breakdown)


def breakdown_frame(breakdown: Sequence[CashDenomination]) -> pd.DataFrame:
    """Tabulate a breakdown for display or export.

    Rows keep the breakdown's denomination order; columns are
    ``Denomination``, ``Label``, ``Count`` and ``Subtotal``.
    """
    rows = [
        {
            'Denomination': note.denomination,
            'Label': note.label,
            'Count': note.count,
            'Subtotal': note.subtotal,
        }
        for note in breakdown
    ]
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
