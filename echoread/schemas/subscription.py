from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from echoread.config import DEFAULT_CURRENCY
from echoread.database import as_utc

SubscriptionType = Literal["free_trial", "monthly", "yearly"]
SubscriptionStatus = Literal["active", "cancelled", "expired"]


class SubscriptionCreate(BaseModel):
    user_id: str
    type: SubscriptionType
    status: SubscriptionStatus
    start_date: datetime
    end_date: datetime
    amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    currency: str = Field(DEFAULT_CURRENCY, min_length=3, max_length=3)
    payment_id: str | None = Field(None, max_length=200)

    @field_validator("start_date", "end_date")
    @classmethod
    def to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def validate_period(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class SubscriptionStatusUpdate(BaseModel):
    status: SubscriptionStatus


class SubscriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: str
    status: str
    start_date: datetime
    end_date: datetime
    amount: Decimal | None
    currency: str
    payment_id: str | None
    created_at: datetime

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal | None) -> str | None:
        return None if amount is None else f"{amount:.2f}"
