from decimal import Decimal
from splitkro.schemas.balances import BalanceEntry


def entries(*rows):
    """Build BalanceEntry objects from (member_id, net_balance) pairs."""
    return [
        BalanceEntry(member_id=mid, display_name=f"User {mid}", net_balance=Decimal(str(bal)))
        for mid, bal in rows
    ]


def apply_transactions(balances, transactions):
    """Net position of every member after the transactions are paid."""
    after = {b.member_id: Decimal(str(b.net_balance)) for b in balances}
    for t in transactions:
        after[t.from_member_id] += t.amount
        after[t.to_member_id] -= t.amount
    return after
