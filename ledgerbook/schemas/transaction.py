from __future__ import annotations

import datetime as dt
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

TransactionType = Literal["income", "expense", "asset", "liability"]


class TransactionBase(BaseModel):
    model_config = {"str_strip_whitespace": True}

    date: dt.date
    account: str = Field(..., min_length=1, description="Free-text account label (e.g. Sales, Rent)")
    description: Optional[str] = None
    amount: int = Field(..., ge=0, description="Amount in the smallest currency unit")
    type: TransactionType


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    date: Optional[dt.date] = None
    account: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    amount: Optional[int] = Field(None, ge=0)
    type: Optional[TransactionType] = None


class TransactionRead(TransactionBase):
    id: UUID
    company_id: UUID
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}
