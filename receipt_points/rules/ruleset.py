# receipt_points/rules/ruleset.py
from __future__ import annotations
import re
from datetime import date, datetime, time
from decimal import (
    Context, Decimal, InvalidOperation, MAX_EMAX, MIN_EMIN, ROUND_CEILING, ROUND_HALF_UP, localcontext,
)
from typing import Callable, List, Optional

from ..models import Receipt
from ..utils.logging import logger

Rule = Callable[[Receipt], int]

# -----------------------------
# Tunables
# -----------------------------
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_DIVISOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START = time(14, 0)   # exclusive
AFTERNOON_END = time(16, 0)     # exclusive

RETAILER_MODES = ("all", "alphanumeric")

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")

# -----------------------------
# Helpers
# -----------------------------
def parse_amount(value: str | None) -> Decimal:
    """Decimal amount from text; missing, malformed or non-finite values count as zero."""
    try:
        amount = Decimal(value or "")
    except InvalidOperation:
        logger.debug("Unparseable amount %r, treating as 0", value)
        return Decimal(0)
    if not amount.is_finite():
        logger.debug("Non-finite amount %r, treating as 0", value)
        return Decimal(0)
    return amount

def exact_context(amount: Decimal) -> Context:
    """Context wide enough that multiplying `amount` by a short constant never rounds."""
    return Context(prec=len(amount.as_tuple().digits) + 8, Emax=MAX_EMAX, Emin=MIN_EMIN)

def parse_purchase_date(value: str | None) -> Optional[date]:
    # zero-padded YYYY-MM-DD only
    if not DATE_RE.fullmatch(value or ""):
        logger.debug("Unparseable purchase date %r", value)
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        logger.debug("Unparseable purchase date %r", value)
        return None

def parse_purchase_time(value: str | None) -> Optional[time]:
    # zero-padded 24h HH:MM only
    if not TIME_RE.fullmatch(value or ""):
        logger.debug("Unparseable purchase time %r", value)
        return None
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        logger.debug("Unparseable purchase time %r", value)
        return None

# -----------------------------
# Rules
# -----------------------------
def retailer_name_points(receipt: Receipt) -> int:
    return len(receipt.retailer)

def retailer_alphanumeric_points(receipt: Receipt) -> int:
    return sum(1 for ch in receipt.retailer if ch.isalnum())

def round_dollar_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    return ROUND_DOLLAR_POINTS if total == total.to_integral_value() else 0

def quarter_multiple_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    with localcontext(exact_context(total)):
        cents = (total * 100).to_integral_value(rounding=ROUND_HALF_UP)
        # a coefficient scaled by 10**2 or more is always a multiple of 25
        divisible = cents.as_tuple().exponent >= 2 or cents % 25 == 0
    return QUARTER_MULTIPLE_POINTS if divisible else 0

def item_pair_points(receipt: Receipt) -> int:
    return len(receipt.items) // 2 * ITEM_PAIR_POINTS

def description_length_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        if len(item.short_description) % DESCRIPTION_LENGTH_DIVISOR != 0:
            continue
        price = parse_amount(item.price)
        with localcontext(exact_context(price)):
            bonus = (price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING)
        # negative prices never take points away
        if bonus > 0:
            points += int(bonus)
    return points

def odd_day_points(receipt: Receipt) -> int:
    d = parse_purchase_date(receipt.purchase_date)
    return ODD_DAY_POINTS if d is not None and d.day % 2 == 1 else 0

def afternoon_points(receipt: Receipt) -> int:
    t = parse_purchase_time(receipt.purchase_time)
    return AFTERNOON_POINTS if t is not None and AFTERNOON_START < t < AFTERNOON_END else 0

# -----------------------------
# Rule sets
# -----------------------------
def build_rules(retailer_mode: str = "all") -> List[Rule]:
    if retailer_mode not in RETAILER_MODES:
        raise ValueError(f"Unknown retailer points mode: {retailer_mode!r}")
    retailer_rule = retailer_name_points if retailer_mode == "all" else retailer_alphanumeric_points
    return [
        retailer_rule,
        round_dollar_points,
        quarter_multiple_points,
        item_pair_points,
        description_length_points,
        odd_day_points,
        afternoon_points,
    ]

DEFAULT_RULES: List[Rule] = build_rules("all")
