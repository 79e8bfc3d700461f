"""Domain layer utilities."""

import math
from decimal import Decimal
from numbers import Real
from typing import Any


def is_number(value: Any) -> bool:
    """Return True for real numbers and Decimals, excluding bools and NaN.

    Args:
        value: Anything.

    Returns:
        True if `value` can take part in price or age arithmetic.

    Note:
        Numeric strings such as "12" are not numbers here.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    if isinstance(value, Real):
        return not math.isnan(value)
    return False
