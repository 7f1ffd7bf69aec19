"""
Account Module

Single-account ledger: a running Decimal balance and an append-only
history of operations. Deposits and withdrawals are validated in full
before anything changes, so a rejected call leaves balance and history
exactly as they were.

Accounts hold plain in-memory state with no locking. Share one across
threads only behind an external lock.
"""

from decimal import Decimal
from typing import Any, List, Optional, Tuple

from .clock import Clock, SystemClock
from .config import get_config
from .currency import exact_context, to_decimal
from .logging_config import get_logger, log_action
from .operations import Operation, OperationType


logger = get_logger(__name__)


class InvalidAmountError(ValueError):
    """Amount missing, non-numeric, zero or negative"""


class InsufficientFundsError(ValueError):
    """Withdrawal larger than the current balance"""
    
    def __init__(self, requested: Decimal, available: Decimal):
        super().__init__("Insufficient funds")
        self.requested = requested
        self.available = available


class Account:
    """
    In-memory account with balance and operation history
    
    Invariants, holding after every call whether it succeeds or not:
    balance >= 0, balance equals the resulting_balance of the last
    history entry (zero when empty), and history only ever grows by
    one entry per successful deposit or withdrawal.
    """
    
    def __init__(self, clock: Optional[Clock] = None):
        """
        Args:
            clock: Time source for operation timestamps. Defaults to
                SystemClock; inject a MutableClock for deterministic tests.
        """
        self._clock = clock if clock is not None else SystemClock()
        self._balance = Decimal('0')
        self._history: List[Operation] = []
    
    @property
    def balance(self) -> Decimal:
        """Current balance"""
        return self._balance
    
    @property
    def history(self) -> Tuple[Operation, ...]:
        """Snapshot of all operations, oldest first"""
        return tuple(self._history)
    
    @property
    def clock(self) -> Clock:
        """Time source used to stamp operations"""
        return self._clock
    
    def deposit(self, amount: Any) -> Operation:
        """
        Add funds to the account
        
        Args:
            amount: Strictly positive amount (Decimal, int, str or float)
            
        Returns:
            The recorded Operation
            
        Raises:
            InvalidAmountError: If amount is missing or not positive
        """
        value = self._validate_amount(amount, "Deposit amount must be positive")
        with exact_context():
            new_balance = self._balance + value
        return self._apply(OperationType.DEPOSIT, value, new_balance)
    
    def withdraw(self, amount: Any) -> Operation:
        """
        Take funds out of the account
        
        Args:
            amount: Strictly positive amount, at most the current balance
            
        Returns:
            The recorded Operation
            
        Raises:
            InvalidAmountError: If amount is missing or not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        value = self._validate_amount(amount, "Withdrawal amount must be positive")
        if self._balance < value:
            raise InsufficientFundsError(requested=value, available=self._balance)
        with exact_context():
            new_balance = self._balance - value
        return self._apply(OperationType.WITHDRAWAL, value, new_balance)
    
    def _validate_amount(self, amount: Any, message: str) -> Decimal:
        try:
            value = to_decimal(amount)
        except ValueError as exc:
            raise InvalidAmountError(message) from exc
        
        # Zero is rejected as well as negatives
        if value <= Decimal('0'):
            raise InvalidAmountError(message)
        return value
    
    def _apply(self, kind: OperationType, amount: Decimal, new_balance: Decimal) -> Operation:
        # Read the clock before touching state; a failing clock must not
        # leave a balance change without its history entry.
        timestamp = self._clock.now()
        
        operation = Operation(
            kind=kind,
            timestamp=timestamp,
            amount=amount,
            resulting_balance=new_balance
        )
        self._balance = new_balance
        self._history.append(operation)
        
        if get_config().log_operations:
            log_action(
                logger, "debug",
                f"{kind.label} of {amount} recorded",
                action=kind.value,
                resource="account",
                extra={
                    "amount": str(amount),
                    "resulting_balance": str(new_balance),
                    "timestamp": timestamp,
                    "operation_count": len(self._history)
                }
            )
        
        return operation
    
    def __len__(self) -> int:
        return len(self._history)
    
    def __repr__(self) -> str:
        return f"Account(balance={self._balance}, operations={len(self._history)})"
