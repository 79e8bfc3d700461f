"""COREKIT

Small, well-tested building blocks: a generic LIFO stack, a fixed coupon
catalog with a discount calculator, and a family of input validators that
report structured failures instead of raising.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
