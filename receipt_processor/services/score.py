# receipt_processor/services/score.py

from decimal import Decimal, InvalidOperation, ROUND_CEILING, ROUND_HALF_UP
from typing import Dict, Optional
import re
import sys
from receipt_processor.models.receipt import Receipt
import logging

logger = logging.getLogger("receipt_processor.score")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
# Amounts past double range are unparsable; a single item bonus saturates
MAX_AMOUNT_EXPONENT = 308
MAX_ITEM_BONUS = sys.maxsize

AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
INT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_amount(value: str) -> Optional[Decimal]:
    """Parse a decimal string, returning None for anything unusable"""
    value = value.strip()
    if not AMOUNT_PATTERN.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return None
    if amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        return None
    return amount


def _parse_int(value: str) -> Optional[int]:
    if not INT_PATTERN.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        return None


def retailer_points(receipt: Receipt) -> int:
    return sum(1 for c in receipt.retailer if c.isalnum())


def round_dollar_points(receipt: Receipt) -> int:
    total = _parse_amount(receipt.total)
    if total is None:
        return 0
    return ROUND_DOLLAR_POINTS if total == total.to_integral_value() else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    total = _parse_amount(receipt.total)
    if total is None:
        return 0
    try:
        cents = int((total * 100).to_integral_value(rounding=ROUND_HALF_UP))
    except ArithmeticError:
        return 0
    return QUARTER_MULTIPLE_POINTS if cents % 25 == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return ITEM_PAIR_POINTS * (len(receipt.items) // 2)


def item_description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % 3 != 0:
            continue
        price = _parse_amount(item.price)
        if price is None:
            logger.debug(f"Skipping unparsable price {item.price!r}")
            continue
        try:
            bonus = (price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING)
        except ArithmeticError:
            continue
        points += min(max(0, int(bonus)), MAX_ITEM_BONUS)
    return points


def odd_day_points(receipt: Receipt) -> int:
    fields = receipt.purchase_date.split("-")
    if len(fields) < 3:
        return 0
    day = _parse_int(fields[2])
    if day is None:
        return 0
    return ODD_DAY_POINTS if day % 2 != 0 else 0


def afternoon_points(receipt: Receipt) -> int:
    """14:00 through 16:00, both ends inclusive"""
    fields = receipt.purchase_time.split(":")
    if len(fields) < 2:
        return 0
    hour, minute = _parse_int(fields[0]), _parse_int(fields[1])
    if hour is None or minute is None:
        return 0
    if hour in (14, 15) or (hour == 16 and minute == 0):
        return AFTERNOON_POINTS
    return 0


# Evaluation order; names are what the breakdown reports
RULES = {
    "retailer_name": retailer_points,
    "round_dollar": round_dollar_points,
    "quarter_multiple": quarter_multiple_points,
    "item_pairs": item_pair_points,
    "item_description": item_description_points,
    "odd_day": odd_day_points,
    "afternoon_time": afternoon_points,
}


def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    """
    Points awarded by each rule, keyed by rule name in evaluation order.
    Malformed fields contribute zero to their own rules and never raise.
    """
    return {name: rule(receipt) for name, rule in RULES.items()}


def score(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
