# vanfleet/schemas/breakdown.py
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional


class BreakdownCreate(BaseModel):
    van_id: int = Field(gt=0)
    cause: str = Field(min_length=1, max_length=1000)
    breakdown_date: date
    workshop: Optional[str] = Field(None, max_length=100)
    workshop_entry_date: Optional[date] = None
    estimated_exit_date: Optional[date] = None
    workshop_exit_date: Optional[date] = None
    observations: Optional[str] = None


class BreakdownUpdate(BaseModel):
    """Partial patch. The owning van cannot be changed."""
    cause: Optional[str] = Field(None, min_length=1, max_length=1000)
    breakdown_date: Optional[date] = None
    workshop: Optional[str] = Field(None, max_length=100)
    workshop_entry_date: Optional[date] = None
    estimated_exit_date: Optional[date] = None
    workshop_exit_date: Optional[date] = None
    observations: Optional[str] = None

    @field_validator("cause", "breakdown_date")
    @classmethod
    def _reject_explicit_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class BreakdownOut(BaseModel):
    id: int
    van_id: int
    cause: str
    breakdown_date: date
    workshop: Optional[str]
    workshop_entry_date: Optional[date]
    estimated_exit_date: Optional[date]
    workshop_exit_date: Optional[date]
    observations: Optional[str]
    in_workshop: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
