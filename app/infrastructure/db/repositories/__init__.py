from .payment_repository import InvalidPaymentQuery, PaymentRepository

__all__ = [
    "PaymentRepository",
    "InvalidPaymentQuery",
]
