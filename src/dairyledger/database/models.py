"""SQLAlchemy models for dairyledger database.

All timestamps are naive local wall-clock time.
"""

from datetime import datetime
from sqlalchemy import (
    JSON,
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Customer or supplier account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    kind = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    milk_rate = Column(Numeric(10, 2), nullable=False, default=0)
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    # Relationships
    entries = relationship("Entry", back_populates="account")


class Entry(Base):
    """Ledger entry model.

    ``created_at`` is local wall-clock time; reporting buckets on its day of
    month.
    """

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    kind = Column(String, nullable=False)
    quantity = Column(Numeric(10, 2), nullable=False, default=0)
    rate = Column(Numeric(10, 2), nullable=False, default=0)
    amount = Column(Numeric(12, 2), nullable=False)
    note = Column(String, nullable=True)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False, index=True)

    # Relationships
    account = relationship("Account", back_populates="entries")


class DeletedRecord(Base):
    """Append-only audit copy of a deleted row."""

    __tablename__ = "deleted_records"

    id = Column(Integer, primary_key=True)
    table_name = Column(String, nullable=False)
    record_id = Column(Integer, nullable=False)
    record_data = Column(JSON, nullable=False)
    deletion_reason = Column(String, nullable=False)
    deleted_by = Column(String, nullable=True)
    deleted_at = Column(DateTime, default=datetime.now, nullable=False)


class Setting(Base):
    """Key/value application setting."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(String, nullable=False)
    description = Column(String, nullable=True)
    updated_by = Column(String, nullable=True)
    updated_at = Column(
        DateTime,
        default=datetime.now,
        onupdate=datetime.now,
        nullable=False,
    )


class SmsTemplate(Base):
    """Saved SMS message template."""

    __tablename__ = "sms_templates"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    message = Column(String, nullable=False)
    template_type = Column(String, nullable=False, default="general")
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
