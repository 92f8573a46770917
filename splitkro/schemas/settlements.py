from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Union

MemberId = Union[int, str]

class Transaction(BaseModel):
    from_member_id: MemberId
    from_display_name: str
    to_member_id: MemberId
    to_display_name: str
    amount: Decimal

class SettlementCreate(BaseModel):
    from_member_id: MemberId
    to_member_id: MemberId
    amount: Decimal = Field(gt=0)

class SettlementOut(BaseModel):
    id: str
    group_id: str
    from_member_id: MemberId
    to_member_id: MemberId
    amount: Decimal
    expense_id: str
    settled_at: datetime

    class Config:
        from_attributes = True
