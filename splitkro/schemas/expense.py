from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import List, Literal
from splitkro.schemas.settlements import MemberId

SplitStrategy = Literal["equal", "exact", "percentage"]

class SplitInput(BaseModel):
    member_id: MemberId
    value: Decimal | None = None  # exact amount or percentage, unused for equal

class ExpenseCreate(BaseModel):
    description: str
    amount: Decimal = Field(gt=0)
    paid_by: MemberId
    strategy: SplitStrategy = "equal"
    splits: List[SplitInput]

class ExpenseShare(BaseModel):
    member_id: MemberId
    owed_amount: Decimal

class ExpenseOut(BaseModel):
    id: str
    group_id: str
    paid_by: MemberId
    amount: Decimal
    description: str
    strategy: SplitStrategy
    created_at: datetime
    shares: List[ExpenseShare]
    is_settlement: bool = False

    class Config:
        from_attributes = True
