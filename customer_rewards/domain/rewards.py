"""Reward aggregation - monthly breakdown and totals for a reward window"""

import calendar
from typing import Dict, List
from customer_rewards.domain.models import Transaction, MonthlyReward, RewardSummary, RewardResult
from customer_rewards.domain.points import calculate_points


def month_label(transaction: Transaction) -> str:
    """Upper-case English month name of the transaction date, e.g. "APRIL" """
    return calendar.month_name[transaction.date.month].upper()


def aggregate_rewards(transactions: List[Transaction]) -> RewardSummary:
    """
    Group transactions by month and sum their reward points.

    Months appear in the order they are first encountered in the input, not
    in calendar order.

    NOTE: the grouping key is the month name only. Transactions from the same
    month of different years (e.g. January 2023 and January 2024) are merged
    into a single entry. Likely a defect; pinned by tests until the key
    becomes (year, month).

    Callers must not pass an empty list; an empty window is a not-found
    condition handled before aggregation.
    """
    points_by_month: Dict[str, int] = {}
    for txn in transactions:
        label = month_label(txn)
        points_by_month[label] = points_by_month.get(label, 0) + calculate_points(txn.amount)

    monthly_rewards = [MonthlyReward(month=month, points=points) for month, points in points_by_month.items()]
    total_points = sum(reward.points for reward in monthly_rewards)

    return RewardSummary(monthly_rewards=monthly_rewards, total_points=total_points)


def calculate_rewards(customer_id: int, customer_name: str, transactions: List[Transaction]) -> RewardResult:
    """
    Main entry point: aggregate a customer's in-window transactions.

    Returns complete RewardResult with customer details, breakdown and total.
    """
    summary = aggregate_rewards(transactions)

    return RewardResult(
        customer_id=customer_id,
        customer_name=customer_name,
        monthly_rewards=summary.monthly_rewards,
        total_points=summary.total_points,
    )
