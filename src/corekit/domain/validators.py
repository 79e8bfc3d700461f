"""Validated query functions.

Every function here is pure. Input shape and type are checked before any
business rule. Functions that can reject their input return a `Failure`
instead of raising; predicates (`is_price_in_range`, `is_valid_username`)
simply return a bool.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from corekit import config

from .coupons import find_coupon
from .utils import is_number
from .value_objects import Coupon, Failure, FailureReason, Success, ValidationResult

logger = logging.getLogger(__name__)


def _reject(check: str, *reasons: FailureReason) -> Failure:
    logger.debug("%s rejected: %s", check, [reason.name for reason in reasons])
    return Failure(reasons)


def validate_discount_input(price: Any, code: Any) -> Failure | None:
    """Check the inputs of a discount calculation.

    Checks run in order (price type, price sign, code type) and stop at the
    first failure.

    Args:
        price: Candidate price; an int, float, Fraction or Decimal >= 0.
        code: Candidate discount code; must be a string.

    Returns:
        None when both inputs are acceptable, otherwise a `Failure` with a
        single reason.
    """
    if not is_number(price) or price < 0:
        return _reject("Discount", FailureReason.INVALID_PRICE)
    if not isinstance(code, str):
        return _reject("Discount", FailureReason.INVALID_DISCOUNT_CODE)
    return None


def apply_coupon(price: Any, coupon: Coupon | None) -> Any:
    """Return `price` reduced by `coupon`'s rate, or unchanged without a coupon.

    Args:
        price: A validated, non-negative price. Decimal prices stay Decimal.
        coupon: The coupon to apply, or None.

    Returns:
        The discounted price.
    """
    if coupon is None:
        return price
    if isinstance(price, Decimal):
        return price * (1 - Decimal(str(coupon.discount)))
    return price * (1 - float(coupon.discount))


def calculate_discount(price: Any, code: Any) -> Any:
    """Apply the catalog discount for `code` to `price`.

    An unknown but well-formed code is not an error: the undiscounted price
    is returned.

    Args:
        price: Non-negative price (int, float, Fraction or Decimal).
        code: Discount code to look up in the coupon catalog.

    Returns:
        The discounted price, or a `Failure` with a single reason.
    """
    if (failure := validate_discount_input(price, code)) is not None:
        return failure
    return apply_coupon(price, find_coupon(code))


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    """Return True iff `min_price <= price <= max_price` (both bounds inclusive)."""
    return min_price <= price <= max_price


def is_valid_username(username: Any) -> bool:
    """Return True iff `username` is a string of acceptable length.

    Never raises: anything that is not a string (None, numbers, ...) is
    simply not a valid username.
    """
    if not isinstance(username, str):
        return False
    return config.USERNAME_MIN_LENGTH <= len(username) <= config.USERNAME_MAX_LENGTH


def validate_user_input(username: Any, age: Any) -> ValidationResult:
    """Validate a username and an age together.

    Both checks always run, so a single result can report an invalid username
    and an invalid age at once.

    Args:
        username: Candidate username; a string of 3 to 255 characters.
        age: Candidate age; a number of at least `config.MIN_AGE`. Numeric
            strings are rejected.

    Returns:
        `Success` when both values are valid, otherwise a `Failure` listing
        every reason found (username first, then age).
    """
    reasons: list[FailureReason] = []

    if not (
        isinstance(username, str)
        and config.MIN_USERNAME_LENGTH <= len(username) <= config.MAX_USERNAME_LENGTH
    ):
        reasons.append(FailureReason.INVALID_USERNAME)

    if not (is_number(age) and age >= config.MIN_AGE):
        reasons.append(FailureReason.INVALID_AGE)

    if reasons:
        return _reject("User input", *reasons)
    return Success()


def can_drive(age: Any, country_code: Any) -> bool | Failure:
    """Decide whether someone of `age` may drive in `country_code`.

    Both inputs are checked, and every problem found is reported in one
    `Failure`.

    Args:
        age: The driver's age; must be a number (numeric strings are rejected).
        country_code: One of the codes in `config.DRIVING_AGES`, e.g. "US".

    Returns:
        True if `age` reaches the country's minimum driving age, False if not,
        or a `Failure` when either input is invalid.
    """
    reasons: list[FailureReason] = []
    if not is_number(age):
        reasons.append(FailureReason.INVALID_AGE)
    if not isinstance(country_code, str) or country_code not in config.DRIVING_AGES:
        reasons.append(FailureReason.INVALID_COUNTRY_CODE)
    if reasons:
        return _reject("Driving eligibility", *reasons)

    return age >= config.DRIVING_AGES[country_code]
