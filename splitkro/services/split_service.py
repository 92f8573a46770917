from decimal import Decimal
from typing import List
from splitkro.core.config import settings
from splitkro.core.exceptions import InvalidSplitError
from splitkro.core.utils import CENTS, ZERO, qfloor, qround, to_decimal
from splitkro.schemas.expense import ExpenseShare, SplitInput

HUNDRED = Decimal("100")


def _equal_shares(amount: Decimal, splits: List[SplitInput]) -> List[ExpenseShare]:
    count = len(splits)
    base = qfloor(amount / count)
    # leftover cents go one each to the first members
    leftover = int((amount - base * count) / CENTS)

    return [
        ExpenseShare(
            member_id=s.member_id,
            owed_amount=base + CENTS if i < leftover else base,
        )
        for i, s in enumerate(splits)
    ]


def _exact_shares(amount: Decimal, splits: List[SplitInput]) -> List[ExpenseShare]:
    shares = [
        ExpenseShare(member_id=s.member_id, owed_amount=qround(to_decimal(s.value or 0)))
        for s in splits
    ]

    total = sum((s.owed_amount for s in shares), ZERO)
    if abs(total - amount) >= CENTS:
        raise InvalidSplitError(
            f"Exact amounts must sum to {amount}. Current: {total}"
        )

    return shares


def _percentage_shares(amount: Decimal, splits: List[SplitInput]) -> List[ExpenseShare]:
    percentages = [to_decimal(s.value or 0) for s in splits]

    pct_total = sum(percentages, ZERO)
    if abs(pct_total - HUNDRED) > settings.PERCENTAGE_TOLERANCE:
        raise InvalidSplitError(
            f"Percentages must sum to 100%. Current: {pct_total}%"
        )

    # largest remainder: floor every share, then hand the leftover cents
    # to the biggest discarded fractions, earlier members first on ties
    exact = [amount * pct / pct_total for pct in percentages]
    owed = [qfloor(e) for e in exact]
    leftover = int((amount - sum(owed, ZERO)) / CENTS)

    order = sorted(range(len(exact)), key=lambda i: (-(exact[i] - owed[i]), i))
    for i in order[:leftover]:
        owed[i] += CENTS

    return [
        ExpenseShare(member_id=s.member_id, owed_amount=o)
        for s, o in zip(splits, owed)
    ]


_STRATEGIES = {
    "equal": _equal_shares,
    "exact": _exact_shares,
    "percentage": _percentage_shares,
}


def compute_shares(amount, strategy: str, splits: List[SplitInput]) -> List[ExpenseShare]:
    """
    Divide an expense amount between the members listed in `splits`.

    The returned owed amounts always add up to `amount`, so every
    expense keeps the group's balances zero-sum.
    """
    amount = qround(to_decimal(amount))

    if amount <= 0:
        raise InvalidSplitError("Expense amount must be positive")

    if strategy not in _STRATEGIES:
        raise InvalidSplitError(f"Unknown split strategy: {strategy}")

    if not splits:
        raise InvalidSplitError("At least one member must share the expense")

    member_ids = [s.member_id for s in splits]
    if len(member_ids) != len(set(member_ids)):
        raise InvalidSplitError("Duplicate members found in splits")

    if any(s.value is not None and to_decimal(s.value) < 0 for s in splits):
        raise InvalidSplitError("Split values cannot be negative")

    return _STRATEGIES[strategy](amount, splits)
