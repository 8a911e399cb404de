"""Input validation for customers, transactions and reward queries.

Every check is fail-fast: the first violated rule raises ValidationError and
the remaining rules are not evaluated. Callers (and API clients) match on the
message text, so the order of checks below is part of the contract.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from customer_rewards.domain.exceptions import ValidationError
from customer_rewards.domain.models import Customer, Transaction

logger = logging.getLogger(__name__)

# Amounts are stored as Numeric(12, 2); finer amounts would be rounded on save
AMOUNT_QUANTUM = Decimal("0.01")


def validate_customer(customer: Optional[Customer]) -> None:
    """Validate customer name, transaction list and every transaction in order"""
    if customer is None:
        raise ValidationError("Customer cannot be null.")

    if customer.customer_name is None or not customer.customer_name.strip():
        raise ValidationError("Customer name cannot be null or blank.")

    if not customer.transactions:
        raise ValidationError("Transaction list cannot be null or empty.")

    for transaction in customer.transactions:
        validate_transaction(transaction)


def validate_transaction(transaction: Transaction) -> None:
    """Date must be present, then amount must be positive with at most two decimals"""
    if transaction.date is None:
        logger.warning("Transaction date is null")
        raise ValidationError("Transaction date cannot be null.")

    if transaction.amount is None or transaction.amount <= 0:
        logger.warning("Invalid transaction amount: %s", transaction.amount)
        raise ValidationError("Transaction amount must be greater than zero.")

    if has_sub_cent_digits(transaction.amount):
        logger.warning("Transaction amount has more than two decimal places: %s", transaction.amount)
        raise ValidationError("Transaction amount cannot have more than two decimal places.")


def has_sub_cent_digits(amount: Union[Decimal, float]) -> bool:
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value != value.quantize(AMOUNT_QUANTUM)


def validate_reward_query(
    customer_id: Optional[int],
    start_date: Optional[date],
    end_date: Optional[date],
) -> None:
    """Check customer id, then presence of both dates, then their ordering"""
    if customer_id is None or customer_id <= 0:
        raise ValidationError("Customer ID must be a positive number.")

    if start_date is None or end_date is None:
        raise ValidationError("Start date and end date cannot be null.")

    if start_date > end_date:
        raise ValidationError("Start date cannot be after end date.")
