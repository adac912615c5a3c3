from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CompanyBase(BaseModel):
    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1)
    business_type: str | None = None
    established_date: date | None = None
    representative: str | None = None
    address: str | None = None
    phone: str | None = None


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    name: str | None = Field(None, min_length=1)
    business_type: str | None = None
    established_date: date | None = None
    representative: str | None = None
    address: str | None = None
    phone: str | None = None


class CompanyRead(CompanyBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
