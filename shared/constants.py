"""
Application-wide constants and configuration values.

This module centralizes the pricing factors, labels and defaults used
throughout the application to provide a single source of truth.
"""

from decimal import Decimal
from typing import Dict


# =================== PRICING CONSTANTS ===================

# Monthly price multiplier per intensity tier
INTENSITY_FACTORS: Dict[str, Decimal] = {
    "LIGHT": Decimal("0.90"),
    "MEDIUM": Decimal("1.00"),
    "HARD": Decimal("1.20"),
}

# Duration discount steps (months threshold -> multiplier), highest first
LONG_TERM_MONTHS = 12
LONG_TERM_FACTOR = Decimal("0.85")
MID_TERM_MONTHS = 6
MID_TERM_FACTOR = Decimal("0.92")

PREMIUM_FACTOR = Decimal("1.30")

# Prices are kept in cents
PRICE_QUANTUM = Decimal("0.01")

# Input limits for subscriptions, prices, salaries and rates
MAX_MONTHS = 1200
MAX_AMOUNT = Decimal("1000000000")


# =================== REPORT AND DISPLAY LABELS ===================

UNASSIGNED_GROUP = "Unassigned"
NO_CLASS_LABEL = "N/A"
UNASSIGNED_LABEL = "unassigned"

PLAN_PREMIUM = "Premium"
PLAN_STANDARD = "Standard"

TRAINER_TYPE_PERMANENT = "Permanent"
TRAINER_TYPE_EXTERNAL = "External"


# =================== LOGGING CONSTANTS ===================

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

