# -*- coding: utf-8 -*-
"""
Domain Failure Classes for the Account Model.

Purpose:
- Name every way an account operation can be refused.
- Validation raises these before any state is touched; the public account and
  registry operations turn them into `Failure` results (see result.py), so the
  console shell only ever inspects a result.

Each class carries a stable `kind` code the shell can switch on.
"""


class BankError(Exception):
    """Base class for all recoverable account-model failures."""

    kind = "bank_error"

    def __init__(self, detail: str = "Operation failed"):
        self.detail = detail
        super().__init__(detail)


class InvalidInput(BankError):
    """
    Raised when an input cannot be accepted:
    - Zero, negative or non-numeric amount.
    - Negative initial balance, rate or overdraft limit.
    - Unrecognized account kind or blank identifier.
    """
    kind = "invalid_input"


class DuplicateIdentifier(BankError):
    """Raised when an account number is already registered."""
    kind = "duplicate_identifier"

    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account number {account_number} already exists")


class NotFound(BankError):
    """Raised when an account index or number selects nothing."""
    kind = "not_found"


class WithdrawalRefused(BankError):
    """
    Common parent of the per-variant withdrawal policy failures.

    Attributes:
        requested: The amount the caller tried to withdraw.
        available: The most that could have been withdrawn at that moment.
    """
    kind = "withdrawal_refused"

    def __init__(self, detail: str, requested, available):
        self.requested = requested
        self.available = available
        super().__init__(detail)


class InsufficientFunds(WithdrawalRefused):
    """Base policy: the withdrawal exceeds the current balance."""
    kind = "insufficient_funds"


class BelowMinimumBalance(WithdrawalRefused):
    """Savings policy: the withdrawal would cross the minimum balance floor."""
    kind = "below_minimum_balance"

    def __init__(self, detail: str, requested, available, minimum_balance):
        self.minimum_balance = minimum_balance
        super().__init__(detail, requested, available)


class ExceedsOverdraft(WithdrawalRefused):
    """Checking policy: the withdrawal exceeds balance plus overdraft limit."""
    kind = "exceeds_overdraft"
