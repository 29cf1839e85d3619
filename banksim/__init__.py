# -*- coding: utf-8 -*-
"""
Core domain model of the bank account simulation.

Balances, amounts and interest are all `Decimal`. This __init__ file sets the
global `Decimal` context once so every module computes with the same precision
and rounding.
"""
from decimal import getcontext, ROUND_HALF_EVEN

getcontext().prec = 28
getcontext().rounding = ROUND_HALF_EVEN
