"""
Simple Ledger

A minimal in-memory ledger for a single account: running balance,
append-only operation history, exact Decimal arithmetic and an
injectable clock for deterministic timestamps.
"""

__version__ = "1.0.0"
