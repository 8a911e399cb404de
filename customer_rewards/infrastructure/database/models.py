"""SQLAlchemy ORM models for customers and their purchase transactions"""

from sqlalchemy import Column, BigInteger, Integer, Date, DateTime, ForeignKey, Numeric, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

# SQLite only autoincrements INTEGER primary keys
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Customer(Base):
    """Customer record"""

    __tablename__ = "customer"

    customer_id = Column(IdType, primary_key=True, autoincrement=True)
    customer_name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    transactions = relationship(
        "Transaction",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="Transaction.transaction_id",
    )

    def __repr__(self) -> str:
        return f"Customer(id={self.customer_id}, name={self.customer_name})"


class Transaction(Base):
    """Purchase transaction owned by a customer"""

    __tablename__ = "customer_transaction"

    transaction_id = Column(IdType, primary_key=True, autoincrement=True)
    customer_id = Column(IdType, ForeignKey("customer.customer_id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    customer = relationship("Customer", back_populates="transactions")

    def __repr__(self) -> str:
        return f"Transaction(id={self.transaction_id}, amount={self.amount}, date={self.date})"
