"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from deadref.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    yield
    root.handlers[:], level = saved
    root.setLevel(level)
    logging.getLogger("deadref").setLevel(logging.NOTSET)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("normal", str(log_file))
        get_logger("core").warning("Skipping src/a.ts")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "deadref.core: Skipping src/a.ts" in log_file.read_text()


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("scanning").name == "deadref.scanning"

    def test_module_names_pass_through(self):
        assert get_logger("deadref.resolution.resolver").name == "deadref.resolution.resolver"

    def test_package_logger(self):
        assert get_logger().name == "deadref"
        assert get_logger("deadref").name == "deadref"
