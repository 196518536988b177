"""
Open/Closed Principle examples.

Software entities should be open for extension, closed for modification.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..errors import UnknownPaymentTypeError
from ..interfaces import Logger
from ..logging import log_info


# Bad example - violates OCP


class PaymentProcessor:
    """Branches on a type string; every new type means editing this class"""

    def process_payment(self, payment_type: str) -> str:
        if payment_type == "CREDIT":
            return "Processed credit payment"
        elif payment_type == "DEBIT":
            return "Processed debit payment"
        raise UnknownPaymentTypeError(f"Unsupported payment type: {payment_type}")


# Good example - follows OCP


class PaymentMethod(ABC):

    @abstractmethod
    def process_payment(self, amount: float) -> str:
        pass


class CreditPayment(PaymentMethod):
    def process_payment(self, amount: float) -> str:
        return f"Charged {amount:.2f} to credit card"


class DebitPayment(PaymentMethod):
    def process_payment(self, amount: float) -> str:
        return f"Debited {amount:.2f} from bank account"


# New payment types can be added without modifying existing code
class CryptoPayment(PaymentMethod):
    def __init__(self, currency: str = "BTC"):
        self.currency = currency

    def process_payment(self, amount: float) -> str:
        return f"Transferred {amount:.2f} worth of {self.currency}"


class PaymentService:
    """Accepts any PaymentMethod without knowing its concrete type"""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self.receipts: List[str] = []

    def checkout(self, method: PaymentMethod, amount: float) -> str:
        if amount <= 0:
            raise ValueError("Amount must be positive")
        receipt = method.process_payment(amount)
        self.receipts.append(receipt)
        log_info(self.logger, f"{type(method).__name__}: {receipt}")
        return receipt
