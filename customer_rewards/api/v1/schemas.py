"""Pydantic schemas for API request/response validation"""

import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

# Request models only check types. Business rules (blank name, empty list,
# non-positive amount, missing date) belong to customer_rewards.domain.validation.


# Largest value a BIGINT primary key can hold
MAX_ID = 2**63 - 1


class TransactionCreate(BaseModel):
    """Single purchase in POST /v1/customers"""

    amount: Optional[Decimal] = Field(None, description="Purchase amount", examples=[120.0])
    date: Optional[datetime.date] = Field(None, description="Purchase date (YYYY-MM-DD)")

    @field_validator("amount", mode="before")
    @classmethod
    def float_amount_as_text(cls, value):
        """Parse JSON numbers from their shortest repr, so 100.01 stays 100.01"""
        if isinstance(value, float):
            return str(value)
        return value


class CustomerCreateRequest(BaseModel):
    """Request body for POST /v1/customers"""

    customer_name: Optional[str] = Field(None, description="Customer name")
    transactions: Optional[List[TransactionCreate]] = Field(None, description="Purchase history")


class TransactionSchema(BaseModel):
    """Stored purchase transaction"""

    transaction_id: int
    amount: float
    date: datetime.date


class CustomerResponse(BaseModel):
    """Response for POST /v1/customers and GET /v1/customers/{customer_id}"""

    customer_id: int
    customer_name: str
    transactions: List[TransactionSchema]


class CustomerDetails(BaseModel):
    """Customer snapshot included in a rewards response"""

    customer_id: int
    customer_name: str


class MonthlyRewardSchema(BaseModel):
    """Points earned in one month"""

    month: str
    points: int


class RewardsResponse(BaseModel):
    """Response for GET /v1/customers/{customer_id}/rewards"""

    customer: CustomerDetails
    start_date: datetime.date
    end_date: datetime.date
    rewards_breakdown: List[MonthlyRewardSchema]
    total_rewards: int
