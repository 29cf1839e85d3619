# -*- coding: utf-8 -*-
"""Transaction record: one immutable balance-affecting event."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

import banksim.config as cfg
from .money import fmt_money


class TransactionKind(str, Enum):
    INITIAL_DEPOSIT = "INITIAL_DEPOSIT"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    INTEREST = "INTEREST"


@dataclass(frozen=True)
class Transaction:
    kind: TransactionKind
    # Magnitude of the change; direction comes from `kind`.
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def signed_amount(self) -> Decimal:
        if self.kind is TransactionKind.WITHDRAWAL:
            return -self.amount
        return self.amount

    def __str__(self) -> str:
        return (f"[{self.timestamp.strftime(cfg.TIMESTAMP_FORMAT)}] {self.kind.value}: "
                f"{fmt_money(self.amount)} | Balance: {fmt_money(self.balance_after)}")
