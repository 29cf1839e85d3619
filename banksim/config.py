"""
Central Configuration File (SSOT).
"""
import os

# --- Display ---
CURRENCY = os.environ.get("BANKSIM_CURRENCY", "USD").upper()
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
}
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Business Rules ---
SAVINGS_MINIMUM_BALANCE = "100.00"

# --- Logging ---
# WARNING keeps the console menu readable; DEBUG traces every mutation.
LOG_LEVEL: str = os.environ.get("BANKSIM_LOG_LEVEL", "WARNING").upper()
