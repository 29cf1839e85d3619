# -*- coding: utf-8 -*-
"""
Operation surface called by the console shell.

Every function takes the registry or account it works on explicitly and
returns a Success/Failure result (see result.py) which the shell renders.
"""
from __future__ import annotations

from decimal import Decimal
from typing import List, Tuple
import logging

from .account import Account, AccountKind, CheckingTerms, SavingsTerms
from .errors import DuplicateIdentifier, InvalidInput
from .money import validate_non_negative
from .registry import AccountRegistry
from .result import Result, reports_failures
from .transaction import Transaction

logger = logging.getLogger(__name__)


def _parse_kind(kind) -> AccountKind:
    if isinstance(kind, AccountKind):
        return kind
    try:
        return AccountKind(str(kind).strip().lower())
    except ValueError:
        raise InvalidInput("Invalid account type!")


@reports_failures
def create_account(registry: AccountRegistry,
                   account_number: str,
                   holder_name: str,
                   initial_balance,
                   kind,
                   *,
                   interest_rate=Decimal("0"),
                   overdraft_limit=Decimal("0")) -> Result:
    """
    Build a savings or checking account and register it.

    `kind` is an AccountKind or its value ("savings" / "checking").
    Savings accounts use `interest_rate` (percent), checking accounts use
    `overdraft_limit`; the parameter of the other variant is ignored.
    """
    account_number = (account_number or "").strip()
    holder_name = (holder_name or "").strip()
    if not account_number:
        raise InvalidInput("Account number cannot be empty")
    if not holder_name:
        raise InvalidInput("Account holder name cannot be empty")
    if account_number in registry:
        # register() re-checks under its lock; this reports it before any parsing.
        raise DuplicateIdentifier(account_number)

    account_kind = _parse_kind(kind)
    if account_kind is AccountKind.SAVINGS:
        terms = SavingsTerms(interest_rate=validate_non_negative(interest_rate, "interest rate"))
    elif account_kind is AccountKind.CHECKING:
        terms = CheckingTerms(overdraft_limit=validate_non_negative(overdraft_limit, "overdraft limit"))
    else:
        raise InvalidInput("Invalid account type!")

    account = Account(account_number, holder_name, initial_balance, terms)
    result = registry.register(account)
    if result.ok:
        logger.info("Created %s account %s for %s", account_kind.value, account_number, holder_name)
    return result


def deposit(account: Account, amount) -> Result:
    return account.deposit(amount)


def withdraw(account: Account, amount) -> Result:
    return account.withdraw(amount)


def add_interest(account: Account) -> Result:
    return account.add_interest()


def add_interest_to_savings(registry: AccountRegistry) -> List[Tuple[Account, Result]]:
    """Accrue interest on every savings account, in registry order."""
    return [(acc, acc.add_interest()) for acc in registry.all_of_kind(AccountKind.SAVINGS)]


def list_accounts(registry: AccountRegistry) -> List[Tuple[int, str, str]]:
    return [(i, acc.account_number, acc.holder_name)
            for i, acc in enumerate(registry.accounts(), start=1)]


def select_account(registry: AccountRegistry, index: int) -> Result:
    return registry.find_by_index(index)


def get_history(account: Account) -> Tuple[Transaction, ...]:
    return account.history()


def describe(account: Account) -> dict:
    return account.describe()

