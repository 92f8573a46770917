import logging
from typing import Dict, List
from splitkro.core.config import settings
from splitkro.core.exceptions import (
    DuplicateMemberError,
    ExpenseNotFoundError,
    InvalidSettlementError,
    MemberNotFoundError,
    SettlementNotFoundError,
)
from splitkro.core.utils import new_id, qround, to_decimal, utcnow
from splitkro.schemas.balances import GroupBalances, MemberBalance
from splitkro.schemas.expense import ExpenseCreate, ExpenseOut, ExpenseShare
from splitkro.schemas.group import GroupCreate, GroupMemberCreate, GroupMemberOut, GroupOut
from splitkro.schemas.settlements import MemberId, SettlementCreate, SettlementOut, Transaction
from splitkro.services.balance_service import aggregate_balances, is_group_settled
from splitkro.services.settlement_service import simplify_debts
from splitkro.services.split_service import compute_shares

logger = logging.getLogger(__name__)


class GroupLedger:
    """
    In-memory ledger for one group: members, expenses and settlements.

    Balances are always derived from the expense list. A recorded
    settlement is stored twice: as a history entry and as an offsetting
    expense, so later balance computations already account for it.
    Not thread-safe; callers serialise access to one ledger.
    """

    def __init__(self, group: GroupOut):
        self.group = group
        self._members: Dict[str, GroupMemberOut] = {}
        self._expenses: Dict[str, ExpenseOut] = {}
        self._settlements: Dict[str, SettlementOut] = {}

    @classmethod
    def create(cls, data: GroupCreate, creator: GroupMemberCreate) -> "GroupLedger":
        group_id = new_id()
        creator_member_id = new_id()

        group = GroupOut(
            id=group_id,
            name=data.name,
            type=data.type,
            created_by=creator_member_id,
            created_at=utcnow(),
        )

        ledger = cls(group)
        ledger._add_member(creator, creator_member_id)

        logger.info("Group %s created by %s", group.name, creator.display_name)
        return ledger

    @property
    def id(self) -> str:
        return self.group.id

    # -----------------------------------
    # Members
    # -----------------------------------
    def _add_member(self, data: GroupMemberCreate, member_id: str) -> GroupMemberOut:
        if data.email and any(m.email == data.email for m in self._members.values()):
            raise DuplicateMemberError("This person is already in the group")

        member = GroupMemberOut(
            id=member_id,
            group_id=self.group.id,
            user_id=data.user_id,
            display_name=data.display_name,
            email=data.email,
            joined_at=utcnow(),
        )
        self._members[member.id] = member
        return member

    def add_member(self, data: GroupMemberCreate) -> GroupMemberOut:
        return self._add_member(data, new_id())

    def get_members(self) -> List[GroupMemberOut]:
        return list(self._members.values())

    def get_member(self, member_id: MemberId) -> GroupMemberOut:
        member = self._members.get(member_id)
        if not member:
            raise MemberNotFoundError(f"Member {member_id} is not in this group")
        return member

    def has_member(self, user_id: str | None = None, email: str | None = None) -> bool:
        email = email.lower() if email else None
        for m in self._members.values():
            if user_id and m.user_id == user_id:
                return True
            if email and m.email == email:
                return True
        return False

    # -----------------------------------
    # Expenses
    # -----------------------------------
    def _store_expense(
        self,
        data: ExpenseCreate,
        shares: List[ExpenseShare],
        is_settlement: bool = False,
    ) -> ExpenseOut:
        expense = ExpenseOut(
            id=new_id(),
            group_id=self.group.id,
            paid_by=data.paid_by,
            amount=qround(to_decimal(data.amount)),
            description=data.description,
            strategy=data.strategy,
            created_at=utcnow(),
            shares=shares,
            is_settlement=is_settlement,
        )
        self._expenses[expense.id] = expense
        return expense

    def add_expense(self, data: ExpenseCreate) -> ExpenseOut:
        payer = self.get_member(data.paid_by)

        for s in data.splits:
            self.get_member(s.member_id)

        shares = compute_shares(data.amount, data.strategy, data.splits)
        expense = self._store_expense(data, shares)

        logger.info(
            "Expense %s of %s added to group %s, paid by %s",
            expense.description, expense.amount, self.group.name, payer.display_name,
        )
        return expense

    def delete_expense(self, expense_id: str) -> None:
        expense = self._expenses.pop(expense_id, None)
        if expense is None:
            raise ExpenseNotFoundError("Expense not found")

        if expense.is_settlement:
            # drop the history entry that points at this expense
            self._settlements = {
                sid: s for sid, s in self._settlements.items()
                if s.expense_id != expense_id
            }

        logger.info("Expense %s deleted from group %s", expense_id, self.group.name)

    def get_expense(self, expense_id: str) -> ExpenseOut:
        expense = self._expenses.get(expense_id)
        if not expense:
            raise ExpenseNotFoundError("Expense not found")
        return expense

    def get_expenses(self) -> List[ExpenseOut]:
        # newest first; insertion order breaks equal timestamps
        return list(reversed(self._expenses.values()))

    # -----------------------------------
    # Balances
    # -----------------------------------
    def get_balances(self) -> List[MemberBalance]:
        return aggregate_balances(self._members.values(), self._expenses.values())

    def get_settlements(self) -> List[Transaction]:
        return simplify_debts(self.get_balances())

    def is_settled(self) -> bool:
        return is_group_settled(self.get_balances())

    def summary(self) -> GroupBalances:
        balances = self.get_balances()
        return GroupBalances(
            group_id=self.group.id,
            balances=balances,
            settlements=simplify_debts(balances),
            is_settled=is_group_settled(balances),
        )

    # -----------------------------------
    # Settlements
    # -----------------------------------
    def record_settlement(self, data: SettlementCreate) -> SettlementOut:
        payer = self.get_member(data.from_member_id)
        receiver = self.get_member(data.to_member_id)

        if payer.id == receiver.id:
            raise InvalidSettlementError("A member cannot settle with themselves")

        amount = qround(to_decimal(data.amount))
        if amount <= 0:
            raise InvalidSettlementError("Settlement amount must be positive")

        # payer "paid" the amount, receiver owes all of it
        expense = self._store_expense(
            ExpenseCreate(
                description=settings.SETTLEMENT_DESCRIPTION,
                amount=amount,
                paid_by=payer.id,
                strategy="exact",
                splits=[],
            ),
            [ExpenseShare(member_id=receiver.id, owed_amount=amount)],
            is_settlement=True,
        )

        settlement = SettlementOut(
            id=new_id(),
            group_id=self.group.id,
            from_member_id=payer.id,
            to_member_id=receiver.id,
            amount=amount,
            expense_id=expense.id,
            settled_at=expense.created_at,
        )
        self._settlements[settlement.id] = settlement

        logger.info(
            "Settlement of %s recorded: %s -> %s",
            amount, payer.display_name, receiver.display_name,
        )
        return settlement

    def get_settlement_history(self) -> List[SettlementOut]:
        return list(reversed(self._settlements.values()))

    def undo_settlement(self, settlement_id: str) -> None:
        settlement = self._settlements.pop(settlement_id, None)
        if settlement is None:
            raise SettlementNotFoundError("Settlement entry not found")

        self._expenses.pop(settlement.expense_id, None)

        logger.info("Settlement %s undone in group %s", settlement_id, self.group.name)
