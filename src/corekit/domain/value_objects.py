"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import EmptyFailureError, InvalidCouponError
from .utils import is_number

SUCCESS_MESSAGE = "Validation successful"


class FailureReason(Enum):
    """Enumeration of reasons a validation can fail.

    The value of each member is the human-readable message used when the
    failure is rendered as text.
    """

    INVALID_PRICE = "Invalid price"
    INVALID_DISCOUNT_CODE = "Invalid discount code"
    INVALID_USERNAME = "Invalid username"
    INVALID_AGE = "Invalid age"
    INVALID_COUNTRY_CODE = "Invalid country code"


@dataclass(frozen=True, slots=True)
class Coupon:
    """Immutable discount coupon.

    Conventions:
      - `code` is a non-empty string, matched exactly (e.g., "SAVE10").
      - `discount` is a fractional rate in (0, 1] (e.g., 0.10 for 10% off).
    """

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise InvalidCouponError(self.code, "code must be a non-empty string")
        if not is_number(self.discount):
            raise InvalidCouponError(self.code, "discount must be a number")
        if not 0 < self.discount <= 1:
            raise InvalidCouponError(self.code, "discount must be in (0, 1]")


@dataclass(frozen=True, slots=True)
class Success:
    """Successful validation outcome."""

    message: str = SUCCESS_MESSAGE

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed validation outcome carrying one or more accumulated reasons."""

    reasons: tuple[FailureReason, ...]

    def __post_init__(self) -> None:
        if not self.reasons:
            raise EmptyFailureError()

    @classmethod
    def of(cls, *reasons: FailureReason) -> Failure:
        """Build a failure from one or more reasons."""
        return cls(tuple(reasons))

    @property
    def messages(self) -> list[str]:
        """Human-readable message for each reason, in the order they were found."""
        return [reason.value for reason in self.reasons]

    def render(self) -> str:
        """Join all reason messages into a single line.

        Example:
            ``Invalid username, Invalid age``
        """
        return ", ".join(self.messages)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.render()


ValidationResult = Success | Failure
