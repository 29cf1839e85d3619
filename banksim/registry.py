# -*- coding: utf-8 -*-
"""
Account Registry.

- Insertion-ordered, append-only collection of accounts for one process run.
- Account numbers are unique; the uniqueness check and the insert happen
  under one lock.
- The console shell owns one instance and passes it around; there is no
  module-level registry.
"""
from __future__ import annotations

from threading import Lock
from typing import Dict, Iterator, List, Tuple
import logging

from .account import Account, AccountKind
from .errors import DuplicateIdentifier, NotFound
from .result import Result, Success, reports_failures

logger = logging.getLogger(__name__)


class AccountRegistry:
    def __init__(self):
        self._accounts: List[Account] = []
        self._by_number: Dict[str, Account] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts())

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._by_number

    @reports_failures
    def register(self, account: Account) -> Result:
        with self._lock:
            if account.account_number in self._by_number:
                raise DuplicateIdentifier(account.account_number)
            self._accounts.append(account)
            self._by_number[account.account_number] = account
        logger.debug("Registered %r", account)
        return Success(value=account, balance=account.balance)

    def accounts(self) -> Tuple[Account, ...]:
        with self._lock:
            return tuple(self._accounts)

    @reports_failures
    def find_by_index(self, index: int) -> Result:
        """Select by 1-based position, as the shell lists accounts."""
        with self._lock:
            if not self._accounts:
                raise NotFound("No accounts available! Please create an account first.")
            if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= len(self._accounts):
                raise NotFound("Invalid account selection!")
            return Success(value=self._accounts[index - 1])

    @reports_failures
    def find_by_number(self, account_number: str) -> Result:
        account = self._by_number.get(account_number)
        if account is None:
            raise NotFound(f"Account {account_number} not found")
        return Success(value=account)

    def all_of_kind(self, kind: AccountKind) -> Tuple[Account, ...]:
        return tuple(a for a in self.accounts() if a.kind is kind)
