"""POST /v1/customers and GET /v1/customers/{customer_id} - customer onboarding"""

import time
import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request, status
from sqlalchemy.orm import Session

from customer_rewards.api.v1.schemas import CustomerCreateRequest, CustomerResponse, TransactionSchema, MAX_ID
from customer_rewards.api.dependencies import get_customer_repository, get_transaction_repository, get_request_id
from customer_rewards.infrastructure.database.session import get_db
from customer_rewards.infrastructure.database.models import Customer as DBCustomer
from customer_rewards.infrastructure.database.repositories import CustomerRepository, TransactionRepository
from customer_rewards.domain.models import Customer, Transaction
from customer_rewards.domain.validation import validate_customer
from customer_rewards.domain.exceptions import ValidationError
from customer_rewards.infrastructure.observability.metrics import record_customer_created
from customer_rewards.infrastructure.observability.logging import log_customer_created

router = APIRouter()


def to_customer_response(db_customer: DBCustomer, transactions: Optional[List[Transaction]] = None) -> CustomerResponse:
    """Build response from the customer row and, if given, a separately loaded transaction list"""
    if transactions is None:
        transactions = db_customer.transactions

    return CustomerResponse(
        customer_id=db_customer.customer_id,
        customer_name=db_customer.customer_name,
        transactions=[
            TransactionSchema(
                transaction_id=txn.transaction_id,
                amount=float(txn.amount),
                date=txn.date,
            )
            for txn in transactions
        ],
    )


@router.post("/customers", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    request: Request,
    request_body: CustomerCreateRequest = Body(...),
    db: Session = Depends(get_db),
    customer_repo: CustomerRepository = Depends(get_customer_repository),
):
    """
    Create a customer together with its purchase history.

    Flow:
    1. Map request body to domain customer
    2. Validate customer and every transaction (fail-fast, nothing persisted on error)
    3. Persist customer + transactions in a single database transaction
    4. Return stored customer with assigned IDs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    customer = Customer(
        customer_name=request_body.customer_name,
        transactions=(
            [Transaction(amount=txn.amount, date=txn.date) for txn in request_body.transactions]
            if request_body.transactions is not None
            else None
        ),
    )

    try:
        validate_customer(customer)

        logging.debug(f"Adding customer: {customer.customer_name}", extra={"request_id": request_id})
        db_customer = customer_repo.create_customer_with_transactions(
            customer_name=customer.customer_name,
            transactions=customer.transactions,
        )
        db.commit()
        response = to_customer_response(db_customer)

    except ValidationError as e:
        db.rollback()
        logging.warning(f"Invalid customer: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_customer_created(len(response.transactions))
    log_customer_created(request_id, response.customer_id, len(response.transactions), duration_ms)

    return response


@router.get("/customers/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int = Path(..., ge=-MAX_ID - 1, le=MAX_ID),
    customer_repo: CustomerRepository = Depends(get_customer_repository),
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
):
    """
    Retrieve a customer with its full purchase history.

    Returns:
        Customer details and stored transactions
    """
    db_customer = customer_repo.find_customer_by_id(customer_id)

    if not db_customer:
        raise HTTPException(status_code=404, detail=f"Customer not found for ID: {customer_id}")

    return to_customer_response(db_customer, transaction_repo.find_by_customer(customer_id))
