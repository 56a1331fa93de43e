"""SQLAlchemy ORM models."""
from sqlalchemy import BigInteger, Column, DateTime, String, UniqueConstraint
from sqlalchemy.sql import func

from starledger.infrastructure.database.base import Base


class HandleBinding(Base):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("handle", name="uq_users_handle"),)

    external_id = Column(String, primary_key=True)
    handle = Column(String(8), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class StarBalance(Base):
    # keyed by handle alone, no foreign key to users
    __tablename__ = "user_stars"

    handle = Column(String(8), primary_key=True)
    stars = Column(BigInteger, nullable=False, default=0, server_default="0")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
