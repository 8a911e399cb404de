"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from customer_rewards.infrastructure.database.session import get_db
from customer_rewards.infrastructure.database.repositories import CustomerRepository, TransactionRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    """Provide customer repository bound to the request session"""
    return CustomerRepository(db)


def get_transaction_repository(db: Session = Depends(get_db)) -> TransactionRepository:
    """Provide transaction repository bound to the request session"""
    return TransactionRepository(db)
