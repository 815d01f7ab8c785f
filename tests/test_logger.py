import logging

from silicon_tvl.logger import (
    NOISY_LOGGERS,
    TRACE,
    ColoredFormatter,
    resolve_level,
    setup_logging,
)


def test_resolve_level():
    assert resolve_level("trace") == TRACE
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("nonsense") == logging.INFO


def test_colored_formatter_restores_levelname():
    formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hi", None, None)

    output = formatter.format(record)

    assert "WARNING" in output
    assert "\033[33m" in output
    assert record.levelname == "WARNING"


def test_setup_logging_quiets_web3_at_debug():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert logging.getLogger("web3").level == logging.WARNING
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("web3").setLevel(logging.NOTSET)
        logging.getLogger("urllib3").setLevel(logging.NOTSET)


def test_setup_logging_opens_noisy_loggers_at_trace():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("trace")

        assert root.level == TRACE
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == TRACE
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)
