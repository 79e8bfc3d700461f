"""Functional tests.

Drive `corekit` as a black box through CliRunner and check stdout, stderr
and exit status.
"""
