#!/usr/bin/env python3
"""Print the cash note breakdown for a list of recipient amounts."""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sakuraya import config
from sakuraya.cash_breakdown import (
    InvalidAmount,
    allocate,
    allocate_many,
    breakdown_frame,
    breakdown_total,
    note_count,
)


def _parse_amount(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('amounts', nargs='*', type=_parse_amount, help='amount owed to each recipient')
    parser.add_argument('--per-amount', action='store_true', help='also show each amount on its own')
    parser.add_argument('--log-level', default=None, help='logging level (default: SAKURAYA_LOG_LEVEL)')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config.configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    amounts: List[Decimal] = args.amounts

    try:
        if args.per_amount:
            for amount in amounts:
                notes = [n for n in allocate(amount) if n.count]
                print(f"\n{config.CURRENCY_PREFIX}{format(amount, 'f')}:")
                if notes:
                    print(breakdown_frame(notes).to_string(index=False))
                else:
                    print("no notes")
        total = allocate_many(amounts)
    except InvalidAmount as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"\nNotes for {len(amounts)} recipient(s):")
    print(breakdown_frame(total).to_string(index=False))
    print(f"\nTotal: {config.CURRENCY_PREFIX}{breakdown_total(total)} in {note_count(total)} note(s)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
