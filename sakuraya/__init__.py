"""Top-level package for the SakuRaya duit raya planner.

The modules are:

* ``cash_breakdown`` – per-recipient cash note breakdown
* ``planner`` – recipient totals and budget status
* ``savings`` – savings progress towards the budget
* ``formatting`` – ringgit display helpers

Authentication, storage and page rendering live outside this package; the
presentation layer fetches the data and calls into these helpers.  For a quick
look at a breakdown from the command line run:

```bash
python scripts/show_breakdown.py 176 24
```
"""

from .cash_breakdown import (
    CashDenomination,
    InvalidAmount,
    allocate,
    allocate_many,
    breakdown_frame,
    breakdown_total,
    note_count,
    round_amount,
)
from .config import DENOMINATIONS

__all__ = [
    'DENOMINATIONS',
    'CashDenomination',
    'InvalidAmount',
    'allocate',
    'allocate_many',
    'breakdown_frame',
    'breakdown_total',
    'note_count',
    'round_amount',
]
