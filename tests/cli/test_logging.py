import logging
import sys

from hitting_tracker.cli._logging import configure_logging


class TestConfigureLogging:
    def setup_method(self) -> None:
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_levels(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_yaml_logger_quiet_unless_verbose(self) -> None:
        configure_logging()
        assert logging.getLogger("yaml").level == logging.WARNING
        configure_logging(verbose=True)
        assert logging.getLogger("yaml").level == logging.NOTSET

    def test_single_stderr_handler(self) -> None:
        configure_logging()
        configure_logging()
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].stream is sys.stderr

    def test_format_includes_level_and_logger(self) -> None:
        configure_logging()
        formatter = logging.getLogger().handlers[0].formatter
        assert formatter is not None
        record = logging.LogRecord("hitting_tracker.ingest", logging.INFO, __file__, 1, "loaded", None, None)
        assert formatter.format(record).endswith("INFO     hitting_tracker.ingest - loaded")
