from __future__ import annotations

import io
import logging

import pytest

from refniche.foundation.logging import LOGGER_NAME, configure_refniche_logging


@pytest.fixture
def clean_loggers(monkeypatch):
    logger = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "propagate", True)
    monkeypatch.setattr(logger, "level", logging.NOTSET)
    return logger


def test_second_call_reuses_handler(clean_loggers):
    first = configure_refniche_logging(level=logging.INFO)
    second = configure_refniche_logging(level=logging.DEBUG)

    assert first is second
    assert clean_loggers.handlers == [first]
    assert clean_loggers.level == logging.DEBUG
    assert clean_loggers.propagate is False


def test_records_are_formatted_with_level(clean_loggers):
    stream = io.StringIO()
    configure_refniche_logging(level=logging.DEBUG, stream=stream)

    logging.getLogger("refniche.engine.nsgaiii.normalizer").debug("Using nadir-based intercepts %s", [1.0])

    assert stream.getvalue() == "[DEBUG] refniche.engine.nsgaiii.normalizer: Using nadir-based intercepts [1.0]\n"


def test_existing_configuration_is_left_alone(clean_loggers, monkeypatch):
    monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])

    assert configure_refniche_logging() is None
    assert clean_loggers.handlers == []


def test_force_attaches_despite_root_handlers(clean_loggers, monkeypatch):
    monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])

    handler = configure_refniche_logging(force=True)

    assert clean_loggers.handlers == [handler]
