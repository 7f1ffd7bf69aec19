"""
Operation Records Module

Immutable records of completed deposits and withdrawals. Each record
keeps the balance the account had right after it was applied; that
value is a snapshot and is never recomputed.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum

from .currency import exact_context


class OperationType(Enum):
    """Kinds of account operations"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    
    @property
    def label(self) -> str:
        """Human-readable name"""
        return self.value.capitalize()
    
    @property
    def sign(self) -> int:
        """Direction of the balance change"""
        return 1 if self == OperationType.DEPOSIT else -1


@dataclass(frozen=True)
class Operation:
    """
    One completed account operation
    
    amount is always the positive magnitude; the direction comes from
    kind. resulting_balance is the account balance immediately after
    this operation.
    """
    kind: OperationType
    timestamp: datetime
    amount: Decimal
    resulting_balance: Decimal
    
    @property
    def is_deposit(self) -> bool:
        """Check if this operation added funds"""
        return self.kind == OperationType.DEPOSIT
    
    @property
    def is_withdrawal(self) -> bool:
        """Check if this operation removed funds"""
        return self.kind == OperationType.WITHDRAWAL
    
    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign of its effect on the balance"""
        with exact_context():
            return self.amount * self.kind.sign
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            'kind': self.kind.value,
            'timestamp': self.timestamp.isoformat(),
            'amount': str(self.amount),
            'resulting_balance': str(self.resulting_balance),
        }
