"""Unit tests for customer and reward query validation"""

import pytest
from datetime import date
from decimal import Decimal
from customer_rewards.domain.models import Customer, Transaction
from customer_rewards.domain.validation import validate_customer, validate_transaction, validate_reward_query
from customer_rewards.domain.exceptions import ValidationError


def test_validate_customer_success(sample_customer: Customer):
    """Test valid customer passes"""
    validate_customer(sample_customer)


def test_validate_customer_none():
    """Test missing customer"""
    with pytest.raises(ValidationError, match="Customer cannot be null."):
        validate_customer(None)


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
def test_validate_customer_blank_name(sample_customer: Customer, name):
    """Test null, empty and whitespace-only names"""
    sample_customer.customer_name = name
    with pytest.raises(ValidationError, match="Customer name cannot be null or blank."):
        validate_customer(sample_customer)


@pytest.mark.parametrize("transactions", [None, []])
def test_validate_customer_no_transactions(transactions):
    """Test null and empty transaction lists"""
    customer = Customer(customer_name="Sam", transactions=transactions)
    with pytest.raises(ValidationError, match="Transaction list cannot be null or empty."):
        validate_customer(customer)


def test_validate_customer_blank_name_reported_before_empty_transactions():
    """Test name check runs before transaction list check"""
    customer = Customer(customer_name="  ", transactions=[])
    with pytest.raises(ValidationError) as exc_info:
        validate_customer(customer)

    assert str(exc_info.value) == "Customer name cannot be null or blank."


def test_validate_customer_first_bad_transaction_wins():
    """Test transactions are checked in list order"""
    customer = Customer(
        customer_name="Sam",
        transactions=[
            Transaction(amount=Decimal("10"), date=date(2024, 1, 1)),
            Transaction(amount=Decimal("-5"), date=date(2024, 1, 2)),
            Transaction(amount=Decimal("10"), date=None),
        ],
    )
    with pytest.raises(ValidationError, match="Transaction amount must be greater than zero."):
        validate_customer(customer)


def test_validate_transaction_missing_date():
    """Test missing date"""
    with pytest.raises(ValidationError, match="Transaction date cannot be null."):
        validate_transaction(Transaction(amount=Decimal("10"), date=None))


def test_validate_transaction_date_checked_before_amount():
    """Test date check precedes amount check"""
    with pytest.raises(ValidationError) as exc_info:
        validate_transaction(Transaction(amount=Decimal("0"), date=None))

    assert str(exc_info.value) == "Transaction date cannot be null."


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-0.01"), Decimal("-100"), None])
def test_validate_transaction_non_positive_amount(amount):
    """Test zero, negative and missing amounts"""
    with pytest.raises(ValidationError, match="Transaction amount must be greater than zero."):
        validate_transaction(Transaction(amount=amount, date=date(2024, 1, 1)))


def test_validate_reward_query_success():
    """Test valid query passes, including a single-day window"""
    validate_reward_query(1, date(2024, 1, 1), date(2024, 12, 31))
    validate_reward_query(1, date(2024, 6, 1), date(2024, 6, 1))


@pytest.mark.parametrize("customer_id", [None, 0, -1])
def test_validate_reward_query_non_positive_id(customer_id):
    """Test id check runs first, regardless of dates"""
    with pytest.raises(ValidationError, match="Customer ID must be a positive number"):
        validate_reward_query(customer_id, date(2024, 12, 31), date(2024, 1, 1))

    with pytest.raises(ValidationError, match="Customer ID must be a positive number"):
        validate_reward_query(customer_id, None, None)


@pytest.mark.parametrize(
    "start_date, end_date",
    [(None, None), (date(2024, 1, 1), None), (None, date(2024, 1, 1))],
)
def test_validate_reward_query_missing_dates(start_date, end_date):
    """Test either date missing"""
    with pytest.raises(ValidationError, match="Start date and end date cannot be null."):
        validate_reward_query(1, start_date, end_date)


def test_validate_reward_query_inverted_range():
    """Test start date after end date"""
    with pytest.raises(ValidationError, match="Start date cannot be after end date."):
        validate_reward_query(1, date(2024, 12, 31), date(2024, 1, 1))


@pytest.mark.parametrize("amount", [Decimal("100.999"), Decimal("0.001"), Decimal("49.995"), 0.001])
def test_validate_transaction_sub_cent_amount(amount):
    """Test amounts finer than a cent are rejected before they can be rounded on save"""
    with pytest.raises(ValidationError, match="Transaction amount cannot have more than two decimal places."):
        validate_transaction(Transaction(amount=amount, date=date(2024, 1, 1)))


@pytest.mark.parametrize("amount", [Decimal("100.01"), Decimal("120.000"), Decimal("7"), 100.01, 99.99])
def test_validate_transaction_cent_amount_accepted(amount):
    """Test whole-cent amounts pass, including trailing zeros and floats"""
    validate_transaction(Transaction(amount=amount, date=date(2024, 1, 1)))
