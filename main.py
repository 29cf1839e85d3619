# -*- coding: utf-8 -*-
"""
Interactive Bank Account Simulation

Purpose:
- Menu-driven console front end over the banksim account model.
- Create savings/checking accounts, deposit and withdraw, view account info
  and transaction history, and accrue interest on all savings accounts.

Notes:
- All state lives in one AccountRegistry owned by main(); nothing persists
  after exit.
- Invalid input re-prompts at the menu; Ctrl+C / EOF exit cleanly.
"""


from __future__ import annotations

from typing import Optional
import logging

from banksim import operations as ops
from banksim.account import Account
from banksim.money import currency_symbol, fmt_money, to_decimal
from banksim.errors import InvalidInput
from banksim.registry import AccountRegistry
from banksim.result import Result
import banksim.config as cfg

# ---------- Formatting & I/O ----------

def ask(prompt: str) -> str:
    return input(prompt).strip()

def ask_amount(prompt: str):
    """Read a number; returns None (after telling the user) if unparseable."""
    raw = ask(prompt)
    try:
        return to_decimal(raw)
    except InvalidInput:
        print("Invalid amount!")
        return None

def ask_int(prompt: str) -> int:
    try:
        return int(ask(prompt))
    except ValueError:
        return -1

def print_failure(result: Result) -> None:
    print(result.message)

def print_account_info(account: Account) -> None:
    info = ops.describe(account)
    print("\n=== Account Information ===")
    print(f"Account Number: {info['account_number']}")
    print(f"Account Holder: {info['holder_name']}")
    print(f"Current Balance: {fmt_money(info['balance'])}")
    if "interest_rate" in info:
        print(f"Interest Rate: {info['interest_rate']:.2f}%")
        print(f"Minimum Balance: {fmt_money(info['minimum_balance'])}")
    if "overdraft_limit" in info:
        print(f"Overdraft Limit: {fmt_money(info['overdraft_limit'])}")

def print_history(account: Account) -> None:
    print("\n=== Transaction History ===")
    history = ops.get_history(account)
    if not history:
        print("No transactions found.")
        return
    for tx in history:
        print(tx)

# ---------- Menu actions ----------

def select_account(registry: AccountRegistry) -> Optional[Account]:
    if len(registry):
        print("\nAvailable accounts:")
        for index, number, holder in ops.list_accounts(registry):
            print(f"{index}. {number} ({holder})")
        choice = ask_int("Select account number: ")
    else:
        choice = 0
    result = ops.select_account(registry, choice)
    if not result.ok:
        print_failure(result)
        return None
    return result.value

def create_account(registry: AccountRegistry) -> None:
    name = ask("Enter account holder name: ")
    number = ask("Enter account number: ")
    if number in registry:
        print("Account number already exists!")
        return
    initial = ask_amount(f"Enter initial balance: {currency_symbol()}")
    if initial is None:
        return
    if initial < 0:
        print("Initial balance cannot be negative!")
        return

    print("Select account type:")
    print("1. Savings Account")
    print("2. Checking Account")
    kind = ask_int("Enter choice: ")
    if kind == 1:
        rate = ask_amount("Enter interest rate (%): ")
        if rate is None:
            return
        result = ops.create_account(registry, number, name, initial, "savings", interest_rate=rate)
    elif kind == 2:
        limit = ask_amount(f"Enter overdraft limit: {currency_symbol()}")
        if limit is None:
            return
        result = ops.create_account(registry, number, name, initial, "checking", overdraft_limit=limit)
    else:
        print("Invalid account type!")
        return

    if result.ok:
        print("Account created successfully!")
    else:
        print_failure(result)

def perform_transaction(registry: AccountRegistry) -> None:
    account = select_account(registry)
    if account is None:
        return

    print("\nSelect transaction type:")
    print("1. Deposit")
    print("2. Withdraw")
    choice = ask_int("Enter choice: ")
    if choice not in (1, 2):
        print("Invalid transaction type!")
        return
    amount = ask_amount(f"Enter amount: {currency_symbol()}")
    if amount is None:
        return

    if choice == 1:
        result = ops.deposit(account, amount)
        if result.ok:
            print(f"Deposited {fmt_money(result.amount)}. New balance: {fmt_money(result.balance)}")
    else:
        result = ops.withdraw(account, amount)
        if result.ok:
            print(f"Withdrawn {fmt_money(result.amount)}. New balance: {fmt_money(result.balance)}")
            if result.overdrawn:
                print(f"Warning: Account overdrawn by {fmt_money(account.overdrawn_by)}")
    if not result.ok:
        print_failure(result)

def view_account_info(registry: AccountRegistry) -> None:
    account = select_account(registry)
    if account is not None:
        print_account_info(account)

def view_transaction_history(registry: AccountRegistry) -> None:
    account = select_account(registry)
    if account is not None:
        print_history(account)

def add_interest_to_savings(registry: AccountRegistry) -> None:
    applied = ops.add_interest_to_savings(registry)
    if not applied:
        print("No savings accounts found!")
        return
    for account, result in applied:
        print(f"\nAdding interest to account: {account.account_number}")
        print(f"Interest added: {fmt_money(result.amount)}. New balance: {fmt_money(result.balance)}")

MENU_ACTIONS = {
    "1": create_account,
    "2": perform_transaction,
    "3": view_account_info,
    "4": view_transaction_history,
    "5": add_interest_to_savings,
}

def main(registry: Optional[AccountRegistry] = None) -> None:
    logging.basicConfig(level=cfg.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    registry = registry if registry is not None else AccountRegistry()
    print("Welcome to Bank Account Simulation!")

    while True:
        try:
            print("\n=== Bank Account Simulation ===")
            print("1. Create Account")
            print("2. Perform Transaction")
            print("3. View Account Information")
            print("4. View Transaction History")
            print("5. Add Interest to Savings Accounts")
            print("6. Exit")
            sel = ask("Enter your choice: ")

            if sel == "6":
                print("Thank you for using Bank Account Simulation!")
                break
            action = MENU_ACTIONS.get(sel)
            if action is None:
                print("Invalid choice! Please try again.")
            else:
                action(registry)
        except (KeyboardInterrupt, EOFError):
            print("\nThank you for using Bank Account Simulation!")
            break

if __name__ == "__main__":
    main()
