"""Tiered loyalty points rule"""

from decimal import Decimal
from typing import Union

UPPER_TIER_THRESHOLD = 100
LOWER_TIER_THRESHOLD = 50
UPPER_TIER_RATE = 2


def calculate_points(amount: Union[Decimal, float]) -> int:
    """
    Calculate reward points earned by a single purchase.

    Rules:
    - 2 points for every dollar spent over $100
    - 1 point for every dollar spent over $50 up to $100

    Each tier is truncated to a whole number before the tiers are added, so
    $100.01 earns 50 points (the upper tier contributes int(0.02) == 0).

    Example:
        $120 → 2 * 20 + 50 = 90 points
    """
    points = 0
    if amount > UPPER_TIER_THRESHOLD:
        points += int((amount - UPPER_TIER_THRESHOLD) * UPPER_TIER_RATE)
    if amount > LOWER_TIER_THRESHOLD:
        points += int(min(amount, UPPER_TIER_THRESHOLD)) - LOWER_TIER_THRESHOLD
    return points
