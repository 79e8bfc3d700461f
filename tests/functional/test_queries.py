"""Functional tests for the COREKIT query commands.

A shopper and a registration clerk drive the CLI the way they would from a
shell: results on stdout, status lines on stderr, and a non-zero exit status
whenever the input is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from corekit.entrypoints.cli.main import corekit

if TYPE_CHECKING:
    from click.testing import Result

# pylint: disable=redefined-outer-name,magic-value-comparison


@pytest.fixture
def invoke():
    """Run `corekit`, keeping stderr separate from stdout."""
    runner = CliRunner()

    def _invoke(*args: str) -> Result:
        return runner.invoke(corekit, list(args))

    return _invoke


class TestShopper:
    """A shopper checks coupons and prices."""

    @staticmethod
    def test_lists_coupons(invoke):
        """Every catalog coupon is listed with its percentage."""
        result = invoke("coupons")

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["SAVE10\t10%", "SAVE20\t20%"]

    @staticmethod
    @pytest.mark.parametrize(
        ("code", "expected"), [("SAVE10", "90.00"), ("SAVE20", "80.00")]
    )
    def test_discount_with_known_coupon(invoke, code, expected):
        """A known code discounts the price."""
        result = invoke("discount", "100", code)

        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    @staticmethod
    def test_discount_with_unknown_coupon(invoke):
        """An unknown code keeps the price and warns on stderr."""
        result = invoke("discount", "100", "FREESTUFF")

        assert result.exit_code == 0
        assert result.stdout.strip() == "100.00"
        assert "Unknown coupon code 'FREESTUFF'" in result.stderr

    @staticmethod
    def test_discount_with_negative_price(invoke):
        """A negative price is rejected with exit status 1."""
        result = invoke("discount", "--", "-10", "SAVE10")

        assert result.exit_code == 1
        assert "Invalid price" in result.stderr
        assert result.stdout == ""

    @staticmethod
    def test_discount_with_malformed_price(invoke):
        """A price that is not a number is a usage error."""
        result = invoke("discount", "ten", "SAVE10")

        assert result.exit_code == 2

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (("200", "0", "100"), "false"),
            (("200", "0", "300"), "true"),
            (("0", "0", "300"), "true"),
            (("300", "0", "300"), "true"),
        ],
    )
    def test_price_in_range(invoke, args, expected):
        """Range bounds are inclusive."""
        result = invoke("price-in-range", *args)

        assert result.exit_code == 0
        assert result.stdout.strip() == expected


class TestRegistrationClerk:
    """A clerk checks usernames, user details and driving eligibility."""

    @staticmethod
    @pytest.mark.parametrize(
        ("username", "expected"), [("dipesh", "true"), ("Dip", "false")]
    )
    def test_check_username(invoke, username, expected):
        """Username format is reported as true/false."""
        result = invoke("check-username", username)

        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    @staticmethod
    def test_validate_user_success(invoke):
        """Valid details report success on stderr."""
        result = invoke("validate-user", "dipesh98", "20")

        assert result.exit_code == 0
        assert "Validation successful" in result.stderr

    @staticmethod
    def test_validate_user_reports_every_problem(invoke):
        """Both problems are reported in a single error line."""
        result = invoke("validate-user", "dp", "10")

        assert result.exit_code == 1
        assert "Invalid username, Invalid age" in result.stderr

    @staticmethod
    @pytest.mark.parametrize(
        ("age", "country", "expected"),
        [("16", "US", "true"), ("15", "US", "false"), ("17", "UK", "true")],
    )
    def test_can_drive(invoke, age, country, expected):
        """Eligibility is printed as true/false."""
        result = invoke("can-drive", age, country)

        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    @staticmethod
    def test_can_drive_unknown_country(invoke):
        """Unknown country codes are rejected with exit status 1."""
        result = invoke("can-drive", "16", "USA")

        assert result.exit_code == 1
        assert "Invalid country code" in result.stderr

    @staticmethod
    def test_rejection_is_logged_at_info(invoke):
        """With -v, the rejected reasons are logged."""
        result = invoke("-v", "can-drive", "16", "USA")

        assert result.exit_code == 1
        assert "INVALID_COUNTRY_CODE" in result.stderr
