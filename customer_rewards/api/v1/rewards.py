"""GET /v1/customers/{customer_id}/rewards - reward points over a date window"""

import time
import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request

from customer_rewards.api.v1.schemas import RewardsResponse, CustomerDetails, MonthlyRewardSchema, MAX_ID
from customer_rewards.api.dependencies import get_customer_repository, get_transaction_repository, get_request_id
from customer_rewards.infrastructure.database.repositories import CustomerRepository, TransactionRepository
from customer_rewards.domain.validation import validate_reward_query
from customer_rewards.domain.rewards import calculate_rewards
from customer_rewards.domain.exceptions import ValidationError, NotFoundError
from customer_rewards.infrastructure.observability.metrics import record_reward_query
from customer_rewards.infrastructure.observability.logging import log_rewards_calculated

router = APIRouter()


@router.get("/customers/{customer_id}/rewards", response_model=RewardsResponse)
def get_rewards(
    request: Request,
    customer_id: int = Path(..., ge=-MAX_ID - 1, le=MAX_ID),
    start_date: Optional[date] = Query(None, description="Start of reward window (YYYY-MM-DD)", examples=["2024-01-01"]),
    end_date: Optional[date] = Query(None, description="End of reward window (YYYY-MM-DD)", examples=["2024-03-31"]),
    customer_repo: CustomerRepository = Depends(get_customer_repository),
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
):
    """
    Calculate reward points earned by a customer within a date window.

    Flow:
    1. Validate customer ID and date window
    2. Fetch transactions dated within the window (inclusive)
    3. Group by month and sum points
    4. Attach customer details

    Returns:
        Monthly breakdown in first-seen month order plus total points
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        validate_reward_query(customer_id, start_date, end_date)

        transactions = transaction_repo.find_transactions(customer_id, start_date, end_date)
        if not transactions:
            raise NotFoundError(f"No transactions found for customer ID: {customer_id}")

        customer = customer_repo.find_customer_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer not found for ID: {customer_id}")

        result = calculate_rewards(customer.customer_id, customer.customer_name, transactions)

    except ValidationError as e:
        record_reward_query("invalid")
        logging.warning(f"Invalid reward query: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except NotFoundError as e:
        record_reward_query("not_found")
        logging.warning(f"Rewards not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        record_reward_query("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_reward_query("ok", result.total_points)
    log_rewards_calculated(request_id, customer_id, len(result.monthly_rewards), result.total_points, duration_ms)

    return RewardsResponse(
        customer=CustomerDetails(customer_id=result.customer_id, customer_name=result.customer_name),
        start_date=start_date,
        end_date=end_date,
        rewards_breakdown=[
            MonthlyRewardSchema(month=reward.month, points=reward.points)
            for reward in result.monthly_rewards
        ],
        total_rewards=result.total_points,
    )
