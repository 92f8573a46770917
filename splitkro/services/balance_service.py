from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from splitkro.core.config import settings
from splitkro.core.utils import ZERO, to_decimal
from splitkro.schemas.balances import MemberBalance
from splitkro.schemas.expense import ExpenseOut
from splitkro.schemas.group import GroupMemberOut
from splitkro.schemas.settlements import MemberId


def aggregate_balances(
    members: Iterable[GroupMemberOut],
    expenses: Iterable[ExpenseOut],
) -> List[MemberBalance]:
    """
    Returns one MemberBalance per member, in member order.

    net_balance = total_paid - total_owed

    Payments and shares of people outside `members` are ignored.
    """
    paid: Dict[MemberId, Decimal] = {}
    owed: Dict[MemberId, Decimal] = {}

    for exp in expenses:
        paid[exp.paid_by] = paid.get(exp.paid_by, ZERO) + to_decimal(exp.amount)

        for share in exp.shares:
            owed[share.member_id] = owed.get(share.member_id, ZERO) + to_decimal(share.owed_amount)

    result = []
    for m in members:
        total_paid = paid.get(m.id, ZERO)
        total_owed = owed.get(m.id, ZERO)
        result.append(MemberBalance(
            member_id=m.id,
            display_name=m.display_name,
            email=m.email,
            total_paid=total_paid,
            total_owed=total_owed,
            net_balance=total_paid - total_owed,
        ))

    return result


def net_balance_map(balances: Iterable[MemberBalance]) -> Dict[MemberId, Decimal]:
    return {b.member_id: to_decimal(b.net_balance) for b in balances}


def is_group_settled(balances: Iterable, tolerance: Optional[Decimal] = None) -> bool:
    """
    A group is settled if:
        abs(net_balance) <= tolerance
        for every member
    """
    tolerance = settings.SETTLED_TOLERANCE if tolerance is None else to_decimal(tolerance)

    for b in balances:
        if abs(to_decimal(b.net_balance)) > tolerance:
            return False

    return True
