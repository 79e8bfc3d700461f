"""Configuration constants for COREKIT.

This module centralizes the named thresholds used by the validators and the
compiled-in coupon catalog data. Everything here is process-wide constant
state; nothing is read from the environment at import time.
"""

from types import MappingProxyType

# Format check used by `is_valid_username` (inclusive bounds).
USERNAME_MIN_LENGTH = 5  # pragma: no mutate
USERNAME_MAX_LENGTH = 15  # pragma: no mutate

# Username rule used by `validate_user_input` (inclusive bounds).
MIN_USERNAME_LENGTH = 3  # pragma: no mutate
MAX_USERNAME_LENGTH = 255  # pragma: no mutate

MIN_AGE = 18  # pragma: no mutate

# Minimum legal driving age per recognized country code.
DRIVING_AGES = MappingProxyType({"US": 16, "UK": 17})

# (code, fractional discount) pairs; order is the catalog order.
COUPONS: tuple[tuple[str, float], ...] = (
    ("SAVE10", 0.10),
    ("SAVE20", 0.20),
)
