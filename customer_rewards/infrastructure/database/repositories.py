"""Data access layer for customers and transactions"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from customer_rewards.infrastructure.database.models import Customer, Transaction
from customer_rewards.domain import models as domain


def to_domain_transaction(db_transaction: Transaction) -> domain.Transaction:
    """Map ORM row to domain transaction (customer referenced by id only)"""
    return domain.Transaction(
        transaction_id=db_transaction.transaction_id,
        amount=db_transaction.amount,
        date=db_transaction.date,
        customer_id=db_transaction.customer_id,
    )


class CustomerRepository:
    """Repository for customers"""

    def __init__(self, db: Session):
        self.db = db

    def create_customer_with_transactions(
        self,
        customer_name: str,
        transactions: List[domain.Transaction],
    ) -> Customer:
        """Persist customer and its transactions to database"""
        db_customer = Customer(
            customer_name=customer_name,
            transactions=[Transaction(amount=txn.amount, date=txn.date) for txn in transactions],
        )
        self.db.add(db_customer)
        self.db.flush()  # Get IDs without committing
        return db_customer

    def find_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        """Fetch customer with transactions"""
        return (
            self.db.query(Customer)
            .filter(Customer.customer_id == customer_id)
            .first()
        )


class TransactionRepository:
    """Repository for purchase transactions"""

    def __init__(self, db: Session):
        self.db = db

    def find_transactions(self, customer_id: int, start_date: date, end_date: date) -> List[domain.Transaction]:
        """Fetch a customer's transactions dated within [start_date, end_date]"""
        rows = (
            self.db.query(Transaction)
            .filter(Transaction.customer_id == customer_id)
            .filter(Transaction.date.between(start_date, end_date))
            .order_by(Transaction.transaction_id)
            .all()
        )
        return [to_domain_transaction(row) for row in rows]

    def find_by_customer(self, customer_id: int) -> List[domain.Transaction]:
        """Fetch all transactions of a customer"""
        rows = (
            self.db.query(Transaction)
            .filter(Transaction.customer_id == customer_id)
            .order_by(Transaction.transaction_id)
            .all()
        )
        return [to_domain_transaction(row) for row in rows]
