"""SQLAlchemy ORM models for payments and refunds."""

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text

from core.domain.value_objects import utc_now

from .base import Base, new_id


class PaymentModel(Base):
    """SQLAlchemy ORM model for payments table (one row per order)."""

    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id"), unique=True, nullable=False)

    # Gateway references
    gateway_order_id = Column(String(100), unique=True, nullable=False, index=True)
    gateway_payment_id = Column(String(100), nullable=True, index=True)
    gateway_signature = Column(String(255), nullable=True)
    method = Column(String(50), nullable=True)

    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    status = Column(String(20), nullable=False, default="PENDING")

    # Payer snapshot
    email = Column(String(255), nullable=True)
    contact = Column(String(32), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self):
        return f"<PaymentModel(id={self.id}, gateway_order_id={self.gateway_order_id}, status={self.status})>"


class RefundModel(Base):
    """SQLAlchemy ORM model for refunds table (one row per order)."""

    __tablename__ = "refunds"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id"), unique=True, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    reason = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="PENDING")
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    processed_at = Column(DateTime(timezone=True), nullable=True)
    processed_by = Column(String(36), nullable=True)
    notes = Column(Text, nullable=True)
