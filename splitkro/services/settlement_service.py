import logging
from decimal import Decimal
from typing import Iterable, List, Optional
from splitkro.core.config import settings
from splitkro.core.utils import qround, to_decimal
from splitkro.schemas.settlements import MemberId, Transaction

logger = logging.getLogger(__name__)


class _Participant:
    """Working copy of one member's balance while settling."""
    def __init__(self, member_id: MemberId, display_name: str, balance: Decimal):
        self.member_id = member_id
        self.display_name = display_name
        self.balance = balance


def _settle_order(p: _Participant):
    # highest balance first, member id breaks ties
    return (-p.balance, str(p.member_id))


def simplify_debts(balances: Iterable, tolerance: Optional[Decimal] = None) -> List[Transaction]:
    """
    Greedy algorithm to minimize the number of transactions.

    Every round pairs the largest creditor with the largest debtor and
    moves min(credit, debt) between them. Balances within `tolerance`
    of zero count as settled. Amounts are tracked unrounded; only the
    emitted transaction is rounded to cents.

    `balances` is any iterable of objects with member_id, display_name
    and net_balance (BalanceEntry or MemberBalance). The inputs are not
    modified.
    """
    eps = settings.SETTLEMENT_TOLERANCE if tolerance is None else to_decimal(tolerance)

    participants = [
        _Participant(b.member_id, b.display_name, to_decimal(b.net_balance))
        for b in balances
    ]
    participants = [p for p in participants if abs(p.balance) > eps]

    transactions: List[Transaction] = []

    while len(participants) >= 2:
        participants.sort(key=_settle_order)

        creditor = participants[0]
        debtor = participants[-1]

        if creditor.balance <= eps or debtor.balance >= -eps:
            break

        amount = min(creditor.balance, -debtor.balance)

        transactions.append(Transaction(
            from_member_id=debtor.member_id,
            from_display_name=debtor.display_name,
            to_member_id=creditor.member_id,
            to_display_name=creditor.display_name,
            amount=qround(amount),
        ))
        logger.debug(
            "%s pays %s %s", debtor.display_name, creditor.display_name, qround(amount)
        )

        creditor.balance -= amount
        debtor.balance += amount

        participants = [p for p in participants if abs(p.balance) > eps]

    if participants:
        logger.warning(
            "Unmatched balances left after settling: %s",
            {str(p.member_id): str(qround(p.balance)) for p in participants},
        )

    return transactions


def select_settlement(transactions: List[Transaction], member_id: MemberId) -> Optional[Transaction]:
    """Default settle-up suggestion: the member's own payment if any, else the first one."""
    for t in transactions:
        if t.from_member_id == member_id:
            return t
    return transactions[0] if transactions else None
