"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Stack related errors
# ============================================================================


class EmptyStackError(DomainError):
    """Raised when reading from or removing the top of an empty stack."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Stack is empty: cannot {operation}.")
        self.operation = operation


# ============================================================================
#                           Coupon related errors
# ============================================================================


class InvalidCouponError(DomainError):
    """Raised when a coupon record violates the catalog invariants."""

    def __init__(self, code: object, reason: str) -> None:
        super().__init__(f"Invalid coupon ({code!r}): {reason}")
        self.code = code
        self.reason = reason


class InvalidCatalogError(DomainError):
    """Raised when a coupon catalog is empty or holds duplicate codes."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid coupon catalog: {reason}")
        self.reason = reason


# ============================================================================
#                           Validation result errors
# ============================================================================


class EmptyFailureError(DomainError):
    """Raised when a Failure is built without any reason."""

    def __init__(self) -> None:
        super().__init__("Failure requires at least one reason.")
