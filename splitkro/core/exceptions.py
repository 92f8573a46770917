"""
Errors raised by the ledger and split calculations.

The debt simplifier itself never raises. Everything else signals
bad input with a subclass of SplitKroError carrying a readable message.
"""


class SplitKroError(Exception):
    """Base error for the splitkro package."""
    pass


class InvalidSplitError(SplitKroError):
    """Expense shares cannot be computed from the given splits."""
    pass


class MemberNotFoundError(SplitKroError):
    """Referenced member does not belong to the group."""
    pass


class DuplicateMemberError(SplitKroError):
    """A member with the same email is already in the group."""
    pass


class ExpenseNotFoundError(SplitKroError):
    pass


class InvalidSettlementError(SplitKroError):
    pass


class SettlementNotFoundError(SplitKroError):
    pass


class GroupNotFoundError(SplitKroError):
    pass
