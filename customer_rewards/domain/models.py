"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass
class Transaction:
    """Single purchase made by a customer"""

    amount: Optional[Decimal]
    date: Optional[date]
    transaction_id: Optional[int] = None
    customer_id: Optional[int] = None


@dataclass
class Customer:
    """Customer owning a list of purchase transactions"""

    customer_name: Optional[str]
    transactions: Optional[List[Transaction]] = field(default_factory=list)
    customer_id: Optional[int] = None


@dataclass
class MonthlyReward:
    """Points earned within one calendar month"""

    month: str  # upper-case month name, e.g. "APRIL"
    points: int


@dataclass
class RewardSummary:
    """Per-month breakdown and grand total of reward points"""

    monthly_rewards: List[MonthlyReward]
    total_points: int


@dataclass
class RewardResult:
    """Output of a reward query"""

    customer_id: int
    customer_name: str
    monthly_rewards: List[MonthlyReward]
    total_points: int
