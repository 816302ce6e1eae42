"""Synthetic payment event stream generator (deposits, withdrawals, disputes)."""

__version__ = "0.1.0"

HEADER = "type,client,tx,amount"
DEFAULT_TRANSACTIONS = 1_000_000
