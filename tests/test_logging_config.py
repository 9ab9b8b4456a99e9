import json
import logging

import pytest

from jobtracker.core.logging_config import CustomJsonFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_adds_standard_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(module)s %(funcName)s %(message)s')
    record = logging.LogRecord("jobtracker.test", logging.WARNING, __file__, 12, "Job %s not found", ("job1",), None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Job job1 not found"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "jobtracker.test"
    assert payload["line"] == 12
    assert "timestamp" in payload


def test_info_records_skip_location():
    formatter = CustomJsonFormatter('%(message)s')
    record = logging.LogRecord("jobtracker.test", logging.INFO, __file__, 12, "hello", None, None)

    payload = json.loads(formatter.format(record))

    assert "line" not in payload
    assert "pathname" not in payload


def test_setup_logging_json(restore_root_logger):
    setup_logging("DEBUG", json_logs=True)

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, CustomJsonFormatter)


def test_setup_logging_plain(restore_root_logger):
    setup_logging("warning", json_logs=False)

    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(restore_root_logger.handlers[0].formatter, CustomJsonFormatter)
