"""COREKIT query commands.

Thin shells over `corekit.domain`: Click parses the arguments, the domain
function decides, and the outcome is printed. Results go to **stdout**;
status lines go to **stderr**.

Failure modes
- Malformed numbers → Click usage error (exit status 2).
- A domain `Failure` (e.g. negative price, unknown country code) → red error
  line on stderr with the rendered reasons, exit status 1.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from corekit.domain import (
    Failure,
    apply_coupon,
    can_drive,
    find_coupon,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    validate_discount_input,
    validate_user_input,
)

from .helpers import error, success, warn

logger = logging.getLogger(__name__)


def _echo_bool(value: bool) -> None:
    click.echo("true" if value else "false")


def _fail(result: Failure) -> NoReturn:
    logger.info("Rejected: %s", [reason.name for reason in result.reasons])
    error(str(result))
    click.get_current_context().exit(1)


@click.command()
def coupons() -> None:
    """List the coupon catalog, one CODE and discount per line."""
    for coupon in get_coupons():
        click.echo(f"{coupon.code}\t{coupon.discount:.0%}")


@click.command()
@click.argument("price", type=float)
@click.argument("code")
def discount(price: float, code: str) -> None:
    """Print PRICE after applying the discount for coupon CODE."""
    if (failure := validate_discount_input(price, code)) is not None:
        _fail(failure)
    coupon = find_coupon(code)
    if coupon is None:
        warn(f"Unknown coupon code {code!r}; no discount applied.")
    result = apply_coupon(price, coupon)
    logger.info("Discounted %s with %r -> %s", price, code, result)
    click.echo(f"{result:.2f}")


@click.command(name="price-in-range")
@click.argument("price", type=float)
@click.argument("min_price", metavar="MIN", type=float)
@click.argument("max_price", metavar="MAX", type=float)
def price_in_range(price: float, min_price: float, max_price: float) -> None:
    """Print whether MIN <= PRICE <= MAX."""
    result = is_price_in_range(price, min_price, max_price)
    logger.info("Price %s in [%s, %s] -> %s", price, min_price, max_price, result)
    _echo_bool(result)


@click.command(name="check-username")
@click.argument("username")
def check_username(username: str) -> None:
    """Print whether USERNAME has an acceptable format."""
    result = is_valid_username(username)
    logger.info("Username %r -> %s", username, result)
    _echo_bool(result)


@click.command(name="validate-user")
@click.argument("username")
@click.argument("age", type=int)
def validate_user(username: str, age: int) -> None:
    """Validate USERNAME and AGE together, reporting every problem found."""
    result = validate_user_input(username, age)
    if isinstance(result, Failure):
        _fail(result)
    logger.info("User %r aged %s accepted", username, age)
    success(str(result))


@click.command(name="can-drive")
@click.argument("age", type=int)
@click.argument("country_code")
def can_drive_command(age: int, country_code: str) -> None:
    """Print whether someone aged AGE may drive in COUNTRY_CODE (e.g. US, UK)."""
    result = can_drive(age, country_code)
    if isinstance(result, Failure):
        _fail(result)
    logger.info("Age %s in %s -> %s", age, country_code, result)
    _echo_bool(result)


QUERY_COMMANDS = (
    coupons,
    discount,
    price_in_range,
    check_username,
    validate_user,
    can_drive_command,
)
