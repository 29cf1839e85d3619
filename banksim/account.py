# -*- coding: utf-8 -*-
"""
Bank Account - tagged variants over one shared record.

- Every account shares the same record: number, holder, balance and an
  append-only transaction log.
- The variant is a closed set of terms (SavingsTerms | CheckingTerms, or none
  for a basic account); withdraw() looks the withdrawal policy up by tag.
- An RLock guards balance and log so each operation sees both atomically.
- Validation happens before mutation; failures come back as Failure results.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from threading import RLock
from typing import Callable, ClassVar, Dict, List, Optional, Tuple, Union
import logging

import banksim.config as cfg
from .errors import BelowMinimumBalance, ExceedsOverdraft, InsufficientFunds
from .money import fmt_money, validate_non_negative, validate_positive
from .result import Result, Success, reports_failures
from .transaction import Transaction, TransactionKind

logger = logging.getLogger(__name__)


class AccountKind(str, Enum):
    BASIC = "basic"
    SAVINGS = "savings"
    CHECKING = "checking"


@dataclass(frozen=True)
class SavingsTerms:
    interest_rate: Decimal  # percent per accrual
    minimum_balance: Decimal = Decimal(cfg.SAVINGS_MINIMUM_BALANCE)

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS


@dataclass(frozen=True)
class CheckingTerms:
    overdraft_limit: Decimal

    kind: ClassVar[AccountKind] = AccountKind.CHECKING


Terms = Union[SavingsTerms, CheckingTerms]


# ---------- withdrawal policies ----------
# Each policy raises a WithdrawalRefused subclass or returns None.

def _base_policy(balance: Decimal, terms: Optional[Terms], amount: Decimal) -> None:
    if amount > balance:
        raise InsufficientFunds(
            f"Insufficient funds! Current balance: {fmt_money(balance)}",
            requested=amount, available=balance)


def _savings_policy(balance: Decimal, terms: SavingsTerms, amount: Decimal) -> None:
    floor = terms.minimum_balance
    if balance - amount < floor:
        raise BelowMinimumBalance(
            f"Cannot withdraw! Minimum balance of {fmt_money(floor)} must be maintained.",
            requested=amount, available=max(balance - floor, Decimal("0")),
            minimum_balance=floor)
    _base_policy(balance, terms, amount)


def _checking_policy(balance: Decimal, terms: CheckingTerms, amount: Decimal) -> None:
    # Ceiling is taken at call time, also when balance is already negative.
    available = balance + terms.overdraft_limit
    if amount > available:
        raise ExceedsOverdraft(
            f"Withdrawal denied! Maximum available: {fmt_money(available)} (including overdraft)",
            requested=amount, available=available)


WITHDRAWAL_POLICIES: Dict[AccountKind, Callable[[Decimal, Optional[Terms], Decimal], None]] = {
    AccountKind.BASIC: _base_policy,
    AccountKind.SAVINGS: _savings_policy,
    AccountKind.CHECKING: _checking_policy,
}


class Account:
    def __init__(self,
                 account_number: str,
                 holder_name: str,
                 initial_balance=Decimal("0"),
                 terms: Optional[Terms] = None):
        self.account_number = account_number
        self.holder_name = holder_name
        self.terms = terms
        self._balance = validate_non_negative(initial_balance, "initial balance")
        self._history: List[Transaction] = []
        self._lock = RLock()
        if self._balance > 0:
            self._record(TransactionKind.INITIAL_DEPOSIT, self._balance)

    def __repr__(self) -> str:
        return f"Account({self.account_number}, {self.kind.value}, balance={self._balance})"

    @property
    def kind(self) -> AccountKind:
        return self.terms.kind if self.terms is not None else AccountKind.BASIC

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def overdrawn_by(self) -> Decimal:
        with self._lock:
            return -self._balance if self._balance < 0 else Decimal("0")

    def _record(self, kind: TransactionKind, amount: Decimal) -> Transaction:
        tx = Transaction(kind, amount, self._balance)
        self._history.append(tx)
        logger.debug("%s %s %s -> %s", self.account_number, kind.value, amount, self._balance)
        return tx

    # ---------- mutations ----------
    @reports_failures
    def deposit(self, amount) -> Result:
        amt = validate_positive(amount, "deposit amount")
        with self._lock:
            self._balance += amt
            self._record(TransactionKind.DEPOSIT, amt)
            return Success(balance=self._balance, amount=amt)

    @reports_failures
    def withdraw(self, amount) -> Result:
        amt = validate_positive(amount, "withdrawal amount")
        with self._lock:
            WITHDRAWAL_POLICIES[self.kind](self._balance, self.terms, amt)
            self._balance -= amt
            self._record(TransactionKind.WITHDRAWAL, amt)
            overdrawn = self._balance < 0
            if overdrawn:
                logger.warning("Account %s overdrawn by %s", self.account_number, -self._balance)
            return Success(balance=self._balance, amount=amt, overdrawn=overdrawn)

    def add_interest(self) -> Result:
        """
        Credit balance * rate / 100 to a savings account.

        Raises TypeError for any other kind of account: only savings accounts
        accrue interest. A zero interest amount (zero balance or zero rate)
        succeeds without adding a log entry, since logged amounts are positive.
        """
        if not isinstance(self.terms, SavingsTerms):
            raise TypeError(f"{self.kind.value} account {self.account_number} does not accrue interest")
        with self._lock:
            interest = self._balance * (self.terms.interest_rate / 100)
            if interest > 0:
                self._balance += interest
                self._record(TransactionKind.INTEREST, interest)
            return Success(balance=self._balance, amount=interest)

    # ---------- read-only views ----------
    def describe(self) -> Dict[str, object]:
        with self._lock:
            info: Dict[str, object] = {
                "account_number": self.account_number,
                "holder_name": self.holder_name,
                "kind": self.kind.value,
                "balance": self._balance,
            }
        if isinstance(self.terms, SavingsTerms):
            info["interest_rate"] = self.terms.interest_rate
            info["minimum_balance"] = self.terms.minimum_balance
        elif isinstance(self.terms, CheckingTerms):
            info["overdraft_limit"] = self.terms.overdraft_limit
        return info

    def history(self) -> Tuple[Transaction, ...]:
        with self._lock:
            return tuple(self._history)

    def ledger_balance(self) -> Decimal:
        """Balance recomputed from the log; always equal to `balance`."""
        with self._lock:
            return sum((tx.signed_amount for tx in self._history), Decimal("0"))
