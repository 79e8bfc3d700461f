"""The coupon catalog.

The catalog is built once, at import time, from `corekit.config.COUPONS` and
is never mutated afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from corekit import config

from .errors import InvalidCatalogError
from .value_objects import Coupon

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CouponCatalog:
    """Immutable, non-empty, ordered collection of coupons."""

    coupons: tuple[Coupon, ...]

    def __post_init__(self) -> None:
        if not self.coupons:
            raise InvalidCatalogError("must contain at least one coupon")
        codes = [coupon.code for coupon in self.coupons]
        if len(set(codes)) != len(codes):
            raise InvalidCatalogError(f"duplicate codes in {codes}")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float]]) -> CouponCatalog:
        """Build a catalog from `(code, discount)` pairs."""
        return cls(tuple(Coupon(code, discount) for code, discount in pairs))

    def find(self, code: str) -> Coupon | None:
        """Return the coupon matching `code` exactly, or None."""
        for coupon in self.coupons:
            if coupon.code == code:
                return coupon
        return None

    def __iter__(self) -> Iterator[Coupon]:
        return iter(self.coupons)

    def __len__(self) -> int:
        return len(self.coupons)


COUPON_CATALOG = CouponCatalog.from_pairs(config.COUPONS)


def get_coupons() -> tuple[Coupon, ...]:
    """Return every coupon in the catalog, in catalog order."""
    return COUPON_CATALOG.coupons


def find_coupon(code: str) -> Coupon | None:
    """Look up a coupon by its exact code.

    Args:
        code: The discount code, e.g. "SAVE10".

    Returns:
        The matching coupon, or None if the code is not in the catalog.
    """
    coupon = COUPON_CATALOG.find(code)
    logger.debug("Coupon lookup %r -> %s", code, coupon)
    return coupon
