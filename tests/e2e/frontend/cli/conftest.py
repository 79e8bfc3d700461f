"""Fixtures for end-to-end CLI logging tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from corekit.entrypoints.cli.main import corekit

# pylint: disable=redefined-outer-name

E2E_ROOT = Path(__file__).resolve().parents[2]


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=unused-argument
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture
def run(tmp_path, monkeypatch):
    """Run `corekit` from an empty working directory, keeping stderr separate."""
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    def _run(*args: str, env: dict[str, str] | None = None):
        return runner.invoke(corekit, list(args), env=env)

    return _run
