"""Unit tests for sakuraya.cash_breakdown."""

from __future__ import annotations

import doctest
from decimal import Decimal
from fractions import Fraction

import pytest

from sakuraya import cash_breakdown
from sakuraya.cash_breakdown import (
    CashDenomination,
    DENOMINATIONS,
    InvalidAmount,
    allocate,
    allocate_many,
    breakdown_frame,
    breakdown_total,
    note_count,
    round_amount,
)


def _counts(breakdown):
    return {note.denomination: note.count for note in breakdown}


def test_allocate_176() -> None:
    breakdown = allocate(176)
    assert _counts(breakdown) == {100: 1, 50: 1, 20: 1, 10: 0, 5: 1, 1: 1}
    assert breakdown_total(breakdown) == 176


def test_allocate_keeps_fixed_order_and_labels() -> None:
    breakdown = allocate(388)
    assert [n.denomination for n in breakdown] == [100, 50, 20, 10, 5, 1]
    assert [n.label for n in breakdown] == ['RM100', 'RM50', 'RM20', 'RM10', 'RM5', 'RM1']


def test_allocate_zero_has_all_rows() -> None:
    breakdown = allocate(0)
    assert len(breakdown) == len(DENOMINATIONS)
    assert all(note.count == 0 for note in breakdown)


@pytest.mark.parametrize('amount', [1, 4, 9, 19, 99, 101, 186, 999, 12345])
def test_allocate_sums_back_to_amount(amount: int) -> None:
    breakdown = allocate(amount)
    assert len(breakdown) == 6
    assert sum(n.denomination * n.count for n in breakdown) == amount


def test_allocate_uses_fewest_notes() -> None:
    # 99 = 50 + 20 + 20 + 5 + 1 + 1 + 1 + 1
    assert note_count(allocate(99)) == 8
    assert _counts(allocate(99)) == {100: 0, 50: 1, 20: 2, 10: 0, 5: 1, 1: 4}


def test_allocate_rounds_before_breaking_down() -> None:
    assert breakdown_total(allocate(49.6)) == 50
    assert _counts(allocate(49.6))[50] == 1
    assert breakdown_total(allocate(49.4)) == 49


@pytest.mark.parametrize(
    ('amount', 'expected'),
    [(0.5, 1), (2.5, 3), (3.5, 4), (49.5, 50), (Decimal('10.5'), 11), (0.49999999999999994, 0)],
)
def test_halves_round_away_from_zero(amount, expected) -> None:
    assert round_amount(amount) == expected
    assert breakdown_total(allocate(amount)) == expected


def test_round_amount_accepts_other_real_types() -> None:
    assert round_amount(Fraction(7, 2)) == 4
    assert round_amount(Decimal('176')) == 176


def test_allocate_is_idempotent() -> None:
    assert allocate(176.4) == allocate(176.4)


@pytest.mark.parametrize(
    'amount',
    [-1, -0.6, float('nan'), float('inf'), float('-inf'), Decimal('NaN'), Decimal('-3'), True, '10', None],
)
def test_allocate_rejects_invalid_amounts(amount) -> None:
    with pytest.raises(InvalidAmount) as excinfo:
        allocate(amount)
    assert excinfo.value.amount is amount


def test_invalid_amount_is_a_value_error() -> None:
    with pytest.raises(ValueError, match='negative'):
        allocate(-5)


def test_allocate_many_is_per_recipient() -> None:
    breakdown = allocate_many([176, 24])
    assert _counts(breakdown) == {100: 1, 50: 1, 20: 2, 10: 0, 5: 1, 1: 5}
    assert breakdown_total(breakdown) == 200
    # One RM200 lump sum would only need two RM100 notes.
    assert _counts(allocate(200)) == {100: 2, 50: 0, 20: 0, 10: 0, 5: 0, 1: 0}
    assert note_count(breakdown) > note_count(allocate(200))


def test_allocate_many_matches_sum_of_allocations() -> None:
    amounts = [10, 35.5, 88, 3, 0, 250]
    expected = {value: 0 for value in DENOMINATIONS}
    for amount in amounts:
        for note in allocate(amount):
            expected[note.denomination] += note.count
    assert _counts(allocate_many(amounts)) == expected


def test_allocate_many_empty_returns_zero_table() -> None:
    breakdown = allocate_many([])
    assert [n.denomination for n in breakdown] == list(DENOMINATIONS)
    assert all(n.count == 0 for n in breakdown)
    assert [n.label for n in breakdown][0] == 'RM100'


def test_allocate_many_accepts_generators() -> None:
    breakdown = allocate_many(amount for amount in (3, 3))
    assert _counts(breakdown)[1] == 6


def test_allocate_many_rejects_any_invalid_amount() -> None:
    with pytest.raises(InvalidAmount):
        allocate_many([50, -10, 20])


def test_subtotal_and_frame() -> None:
    note = CashDenomination(20, 3, 'RM20')
    assert note.subtotal == 60

    frame = breakdown_frame(allocate_many([176, 24]))
    assert list(frame.columns) == ['Denomination', 'Label', 'Count', 'Subtotal']
    assert frame['Denomination'].tolist() == [100, 50, 20, 10, 5, 1]
    assert frame['Subtotal'].sum() == 200
    assert frame.loc[frame['Label'] == 'RM20', 'Count'].item() == 2


def test_frame_of_empty_breakdown_keeps_columns() -> None:
    frame = breakdown_frame([])
    assert frame.empty
    assert list(frame.columns) == ['Denomination', 'Label', 'Count', 'Subtotal']


@pytest.mark.parametrize('amount', [10**30, 1e30, Decimal('1e30'), Decimal('123456789012345678901234567890.5')])
def test_allocate_handles_very_large_amounts(amount) -> None:
    expected = round_amount(amount)
    breakdown = allocate(amount)
    assert len(breakdown) == 6
    assert breakdown_total(breakdown) == expected


def test_very_large_amounts_round_exactly() -> None:
    assert round_amount(10**30) == 10**30
    assert round_amount(1e30) == int(1e30)
    assert round_amount(Decimal('123456789012345678901234567890.5')) == 123456789012345678901234567891


def test_docstring_examples() -> None:
    results = doctest.testmod(cash_breakdown)
    assert results.attempted > 0
    assert results.failed == 0
