from decimal import Decimal
from pydantic import BaseModel
from splitkro.schemas.settlements import MemberId, Transaction

class BalanceEntry(BaseModel):
    member_id: MemberId
    display_name: str
    net_balance: Decimal  # > 0 others owe this member, < 0 this member owes

class MemberBalance(BalanceEntry):
    email: str | None = None
    total_paid: Decimal = Decimal("0")
    total_owed: Decimal = Decimal("0")

class GroupBalances(BaseModel):
    group_id: str
    balances: list[MemberBalance]
    settlements: list[Transaction]
    is_settled: bool
