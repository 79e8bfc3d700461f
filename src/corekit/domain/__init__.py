"""Domain core for COREKIT.

Re-exports the stack, the coupon catalog, the validators and the value
objects they return, so callers can import from `corekit.domain` directly.
"""

from .coupons import CouponCatalog, find_coupon, get_coupons
from .errors import (
    DomainError,
    EmptyFailureError,
    EmptyStackError,
    InvalidCatalogError,
    InvalidCouponError,
)
from .stack import Stack
from .validators import (
    apply_coupon,
    calculate_discount,
    can_drive,
    is_price_in_range,
    is_valid_username,
    validate_discount_input,
    validate_user_input,
)
from .value_objects import Coupon, Failure, FailureReason, Success, ValidationResult

__all__ = [
    "Coupon",
    "CouponCatalog",
    "DomainError",
    "EmptyFailureError",
    "EmptyStackError",
    "Failure",
    "FailureReason",
    "InvalidCatalogError",
    "InvalidCouponError",
    "Stack",
    "Success",
    "ValidationResult",
    "apply_coupon",
    "calculate_discount",
    "can_drive",
    "find_coupon",
    "get_coupons",
    "is_price_in_range",
    "is_valid_username",
    "validate_discount_input",
    "validate_user_input",
]
