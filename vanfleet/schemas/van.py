# vanfleet/schemas/van.py
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional

# Columns declared NOT NULL on TABLA_VANS. A patch may omit them but never null them
NON_NULLABLE_VAN_FIELDS = (
    "vin", "matricula", "model", "van_type", "company", "state",
    "active", "itv_valid", "has_breakdown",
)


def _normalize_key(value):
    if isinstance(value, str):
        return value.strip().upper()
    return value


class VanCreate(BaseModel):
    active: bool = True
    vin: str = Field(min_length=17, max_length=17)
    model: str = Field(min_length=1, max_length=100)
    matricula: str = Field(min_length=1, max_length=20)
    policy_number: Optional[str] = Field(None, max_length=50)
    van_type: str = Field(min_length=1, max_length=50)
    company: str = Field(min_length=1, max_length=100)
    key_number: Optional[int] = None
    state: str = Field(min_length=1, max_length=50)
    itv_valid: bool = True
    itv_date: Optional[date] = None
    has_breakdown: bool = False
    activation_date: Optional[date] = None
    defleet_date: Optional[date] = None
    contract_end_date: Optional[date] = None
    observations: Optional[str] = None

    @field_validator("vin", "matricula", mode="before")
    @classmethod
    def _uppercase_natural_keys(cls, value):
        return _normalize_key(value)


class VanUpdate(BaseModel):
    """Partial patch. Only the fields present in the request are written."""
    active: Optional[bool] = None
    vin: Optional[str] = Field(None, min_length=17, max_length=17)
    model: Optional[str] = Field(None, min_length=1, max_length=100)
    matricula: Optional[str] = Field(None, min_length=1, max_length=20)
    policy_number: Optional[str] = Field(None, max_length=50)
    van_type: Optional[str] = Field(None, min_length=1, max_length=50)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    key_number: Optional[int] = None
    state: Optional[str] = Field(None, min_length=1, max_length=50)
    itv_valid: Optional[bool] = None
    itv_date: Optional[date] = None
    has_breakdown: Optional[bool] = None
    activation_date: Optional[date] = None
    defleet_date: Optional[date] = None
    contract_end_date: Optional[date] = None
    observations: Optional[str] = None

    @field_validator("vin", "matricula", mode="before")
    @classmethod
    def _uppercase_natural_keys(cls, value):
        return _normalize_key(value)

    @field_validator(*NON_NULLABLE_VAN_FIELDS)
    @classmethod
    def _reject_explicit_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class VanFilter(BaseModel):
    """Equality predicates, ANDed. Omitted predicates do not constrain."""
    company: Optional[str] = None
    state: Optional[str] = None
    active: Optional[bool] = None
    has_breakdown: Optional[bool] = None
    itv_valid: Optional[bool] = None

    @field_validator("company", "state", mode="before")
    @classmethod
    def _blank_means_any(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class VanSearch(BaseModel):
    query: str = Field(min_length=1, max_length=100)


class VanOut(BaseModel):
    id: int
    active: bool
    vin: str
    model: str
    matricula: str
    policy_number: Optional[str]
    van_type: str
    company: str
    key_number: Optional[int]
    state: str
    itv_valid: bool
    itv_date: Optional[date]
    has_breakdown: bool
    activation_date: Optional[date]
    defleet_date: Optional[date]
    contract_end_date: Optional[date]
    observations: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
