"""SQLAlchemy models for the erpledger database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class FinanceAccount(Base):
    """Finance account model (cashbox, bank, counterparty, employee, owner)."""

    __tablename__ = "finance_accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    account_class = Column(String(16), nullable=False)
    balance = Column(Numeric(14, 2), default=Decimal("0"), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class FinanceCategory(Base):
    """Finance category model."""

    __tablename__ = "finance_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    category_type = Column(String(16), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    description = Column(String, nullable=True)

    # Relationships
    subcategories = relationship(
        "FinanceSubcategory",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="FinanceSubcategory.name",
    )


class FinanceSubcategory(Base):
    """Subcategory refining a finance category."""

    __tablename__ = "finance_subcategories"

    id = Column(Integer, primary_key=True)
    category_id = Column(Integer, ForeignKey("finance_categories.id"), nullable=False)
    name = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    category = relationship("FinanceCategory", back_populates="subcategories")


class FinanceTransaction(Base):
    """Posted finance transaction model."""

    __tablename__ = "finance_transactions"

    id = Column(Integer, primary_key=True)
    operation_kind = Column(String(32), nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    occurred_at = Column(DateTime, nullable=False)
    source_account_id = Column(Integer, ForeignKey("finance_accounts.id"), nullable=True)
    destination_account_id = Column(Integer, ForeignKey("finance_accounts.id"), nullable=True)
    category_id = Column(Integer, ForeignKey("finance_categories.id"), nullable=True)
    subcategory_id = Column(Integer, ForeignKey("finance_subcategories.id"), nullable=True)
    description = Column(String, nullable=True)
    status = Column(String(16), nullable=False)
    cancellation_reason = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    source_account = relationship("FinanceAccount", foreign_keys=[source_account_id])
    destination_account = relationship("FinanceAccount", foreign_keys=[destination_account_id])
    category = relationship("FinanceCategory")
    subcategory = relationship("FinanceSubcategory")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
