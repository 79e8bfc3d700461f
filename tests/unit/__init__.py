"""Unit tests.

Verify one module at a time: the stack, the coupon catalog, the validators
and their result types, and the CLI helpers. Keep them small and
deterministic.
"""
