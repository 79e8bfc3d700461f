"""Global pytest fixtures for COREKIT."""

import logging

import pytest


def _logger_levels() -> dict[str, int]:
    return {
        name: lgr.level
        for name, lgr in logging.root.manager.loggerDict.items()
        if isinstance(lgr, logging.Logger)
    }


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Restore root handlers and per-logger levels after each test.

    The CLI reconfigures the root logger on every invocation and `-L` changes
    named loggers; without this, either would leak into later tests.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    levels = _logger_levels()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in levels.items():
        logging.getLogger(name).setLevel(lvl)
    for name in _logger_levels().keys() - levels.keys():
        logging.getLogger(name).setLevel(logging.NOTSET)
