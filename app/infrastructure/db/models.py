import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Numeric, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.infrastructure.db.base import Base

class Client(Base):
    __tablename__ = "clients"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(125), nullable=False)
    currency = Column(String(3))
    created = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
    invoices = relationship("Invoice", back_populates="client")
    quotes = relationship("Quote", back_populates="client")
    payments = relationship("Payment", back_populates="client")

class Invoice(Base):
    __tablename__ = "invoices"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False, index=True)
    status = Column(String(25), default="draft")
    total = Column(Numeric(12, 2), nullable=False, default=0)
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    due = Column(DateTime(timezone=True))
    created = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
    client = relationship("Client", back_populates="invoices")
    payments = relationship("Payment", back_populates="invoice")

class Quote(Base):
    __tablename__ = "quotes"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False, index=True)
    status = Column(String(25), default="draft")
    total = Column(Numeric(12, 2), nullable=False, default=0)
    terms = Column(Text)
    notes = Column(Text)
    created = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
    client = relationship("Client", back_populates="quotes")

class PaymentMethod(Base):
    __tablename__ = "payment_methods"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(125), nullable=False)
    payment_method = Column(String(125), unique=True, nullable=False)

class PaymentStatus(Base):
    __tablename__ = "payment_statuses"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(125), unique=True, nullable=False)
    label = Column(String(125))

class Payment(Base):
    __tablename__ = "payments"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    invoice_id = Column(UUID(as_uuid=True), ForeignKey("invoices.id"), nullable=False, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False, index=True)
    method_id = Column(UUID(as_uuid=True), ForeignKey("payment_methods.id"), nullable=False)
    status_id = Column(UUID(as_uuid=True), ForeignKey("payment_statuses.id"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False, default=0)
    currency = Column(String(3))
    message = Column(Text)
    completed = Column(DateTime(timezone=True))
    created = Column(DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP"), index=True)
    invoice = relationship("Invoice", back_populates="payments")
    client = relationship("Client", back_populates="payments")
    method = relationship("PaymentMethod")
    status = relationship("PaymentStatus")
