import pytest
from splitkro.schemas.group import GroupMemberCreate
from splitkro.services.group_services import add_member, create_group


@pytest.fixture
def ledger():
    """Trip group with Alice (creator), Bob and Charlie."""
    group = create_group(
        "Goa Trip",
        "trip",
        GroupMemberCreate(display_name="Alice", email="alice@example.com", user_id="u-alice"),
    )
    add_member(group, "Bob", "Bob@Example.com")
    add_member(group, "Charlie")
    return group


@pytest.fixture
def members(ledger):
    alice, bob, charlie = ledger.get_members()
    return alice, bob, charlie
