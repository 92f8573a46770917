import logging
from typing import Iterable, List
from splitkro.core.exceptions import GroupNotFoundError
from splitkro.schemas.group import GroupCreate, GroupMemberCreate
from splitkro.services.ledger import GroupLedger

logger = logging.getLogger(__name__)


def create_group(name: str, type: str, creator: GroupMemberCreate) -> GroupLedger:
    return GroupLedger.create(GroupCreate(name=name, type=type), creator)


def add_member(ledger: GroupLedger, display_name: str, email: str | None = None, user_id: str | None = None):
    return ledger.add_member(
        GroupMemberCreate(display_name=display_name, email=email, user_id=user_id)
    )


def list_groups_for_member(
    ledgers: Iterable[GroupLedger],
    user_id: str | None = None,
    email: str | None = None,
) -> List[GroupLedger]:
    """Groups where the user is a member, matched by user id or email. Newest first."""
    groups = [g for g in ledgers if g.has_member(user_id=user_id, email=email)]
    groups.sort(key=lambda g: g.group.created_at, reverse=True)
    return groups


def delete_group(ledgers: List[GroupLedger], group_id: str) -> GroupLedger:
    """Remove a group, with its expenses and settlements, from `ledgers` in place."""
    for i, g in enumerate(ledgers):
        if g.id == group_id:
            removed = ledgers.pop(i)
            logger.info("Group %s deleted", removed.group.name)
            return removed

    raise GroupNotFoundError("Group not found")
