import logging

from cidrcalc.logging_config import configure_logging, get_logger, setup_logging


def test_console_logging():
    logger = setup_logging(level="DEBUG")
    assert logger.name == "cidrcalc"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_file_logging_keeps_debug_records(tmp_path):
    log_path = tmp_path / "logs" / "cidr.log"
    logger = setup_logging(level="INFO", log_file=log_path)
    assert len(logger.handlers) == 2

    get_logger("cidrcalc.address.core").debug("packed 0x1041")
    for handler in logger.handlers:
        handler.flush()

    assert "packed 0x1041" in log_path.read_text()
    # Console stays at INFO
    assert logger.handlers[0].level == logging.INFO


def test_setup_replaces_handlers(tmp_path):
    setup_logging(log_file=tmp_path / "cidr.log")
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_configure_logging_debug():
    configure_logging(debug=True)
    assert logging.getLogger("cidrcalc").level == logging.DEBUG
    configure_logging()
    assert logging.getLogger("cidrcalc").level == logging.INFO
