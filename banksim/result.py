# -*- coding: utf-8 -*-
"""
Discriminated operation results.

Every public operation of the account model returns either a `Success`
carrying its payload or a `Failure` carrying the one BankError that refused
it. Nothing is mutated when a Failure is returned.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import wraps
from typing import Any, ClassVar, Optional, Union
import logging

from .errors import BankError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    """
    Payload of a successful operation.

    - value: the object produced (an Account for creation or lookup).
    - balance: the account balance after the operation.
    - amount: the amount moved (interest credited for add_interest).
    - overdrawn: advisory set when a checking withdrawal leaves balance < 0.
    """
    ok: ClassVar[bool] = True

    value: Any = None
    balance: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    overdrawn: bool = False


@dataclass(frozen=True)
class Failure:
    ok: ClassVar[bool] = False

    error: BankError

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.detail


Result = Union[Success, Failure]


def reports_failures(func):
    """Turn a BankError raised by `func` into a Failure result."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Result:
        try:
            return func(*args, **kwargs)
        except BankError as e:
            logger.info("%s refused: %s", func.__qualname__, e.detail)
            return Failure(e)
    return wrapper
