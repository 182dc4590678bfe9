"""Package logging is silent by default and opt-in through configure_logging."""

from __future__ import annotations

import logging

import pytest

from statedo import ContainerConsumedError, configure_logging, state
from statedo._logging import ROOT_LOGGER


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved = (logger.level, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]


def test_configure_logging_is_idempotent(package_logger: logging.Logger):
    configure_logging(logging.INFO)
    configure_logging(logging.INFO)

    assert package_logger.level == logging.INFO
    added = [h for h in package_logger.handlers if getattr(h, "_statedo", False)]
    assert len(added) == 1


def test_run_logs_family(debug_logs: pytest.LogCaptureFixture):
    state.run(0, state.get())

    assert "event='run'" in debug_logs.text
    assert "family='State'" in debug_logs.text


def test_reuse_logs_warning(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.WARNING, logger=ROOT_LOGGER)
    ma = state.get()
    state.run(0, ma)

    with pytest.raises(ContainerConsumedError):
        state.run(0, ma)
    assert "container reused" in caplog.text
