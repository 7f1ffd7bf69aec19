"""
Statement Module

Read-only views over an account history: totals and a printable
statement. Works on any sequence of Operation, so it never needs
access to the account itself.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .config import get_config
from .currency import exact_context, format_amount
from .operations import Operation


STATEMENT_HEADER = ("DATE", "OPERATION", "AMOUNT", "BALANCE")


@dataclass(frozen=True)
class StatementSummary:
    """Totals over a history"""
    opening_balance: Decimal
    total_deposits: Decimal
    total_withdrawals: Decimal
    closing_balance: Decimal
    operation_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'opening_balance': str(self.opening_balance),
            'total_deposits': str(self.total_deposits),
            'total_withdrawals': str(self.total_withdrawals),
            'closing_balance': str(self.closing_balance),
            'operation_count': self.operation_count,
        }


def summarize(history: Sequence[Operation]) -> StatementSummary:
    """
    Compute totals for a history

    Accounts always open at zero, so the closing balance is the last
    recorded resulting_balance (zero for an empty history).
    """
    with exact_context():
        total_deposits = sum((op.amount for op in history if op.is_deposit), Decimal('0'))
        total_withdrawals = sum((op.amount for op in history if op.is_withdrawal), Decimal('0'))
    closing_balance = history[-1].resulting_balance if history else Decimal('0')

    return StatementSummary(
        opening_balance=Decimal('0'),
        total_deposits=total_deposits,
        total_withdrawals=total_withdrawals,
        closing_balance=closing_balance,
        operation_count=len(history)
    )


def statement_rows(history: Sequence[Operation], date_format: Optional[str] = None,
                   newest_first: Optional[bool] = None) -> List[List[str]]:
    """
    Format each operation as a row of display strings

    Args:
        history: Operations, oldest first
        date_format: strftime pattern (defaults to config)
        newest_first: Reverse the order (defaults to config)

    Returns:
        One [date, operation, amount, balance] row per operation
    """
    cfg = get_config()
    if date_format is None:
        date_format = cfg.statement_date_format
    if newest_first is None:
        newest_first = cfg.statement_newest_first
    places = cfg.amount_display_places

    ordered = list(reversed(history)) if newest_first else list(history)
    return [
        [
            op.timestamp.strftime(date_format),
            op.kind.label,
            format_amount(op.signed_amount, places),
            format_amount(op.resulting_balance, places),
        ]
        for op in ordered
    ]


def render_statement(history: Sequence[Operation], date_format: Optional[str] = None,
                     newest_first: Optional[bool] = None) -> str:
    """Render a history as a pipe-separated statement, header first"""
    lines = [" | ".join(STATEMENT_HEADER)]
    for row in statement_rows(history, date_format=date_format, newest_first=newest_first):
        lines.append(" | ".join(row))
    return "\n".join(lines)
