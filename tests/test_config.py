"""Tests for store path resolution and logger setup."""

import logging
import os

from lockbox.config import default_store_path, resolve_log_path, resolve_store_path
from lockbox.logger import LOGGER_NAME, setup_logger


class TestResolveStorePath:

    def test_cli_path_wins(self, monkeypatch):
        monkeypatch.setenv("LOCKBOX_STORE", "/from/env")
        assert resolve_store_path("/from/cli") == "/from/cli"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("LOCKBOX_STORE", "/from/env")
        assert resolve_store_path(None) == "/from/env"

    def test_default(self, tmp_path):
        expected = os.path.join(str(tmp_path / "home"), ".lockbox", "store")
        assert default_store_path() == expected
        assert resolve_store_path(None) == expected

    def test_log_path_next_to_store(self, tmp_path):
        store = tmp_path / "vaults" / "store"
        log_path = resolve_log_path(str(store))
        assert log_path == str(tmp_path / "vaults" / "lockbox.log")
        assert (tmp_path / "vaults").is_dir()


class TestSetupLogger:

    def test_writes_module_records(self, tmp_path):
        log_file = tmp_path / "lockbox.log"
        logger = setup_logger(str(log_file))
        try:
            assert logger.name == LOGGER_NAME
            logging.getLogger("lockbox.store").info("Unlocked store")
            for handler in logger.handlers:
                handler.flush()
            assert "INFO - Unlocked store" in log_file.read_text()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.setLevel(logging.NOTSET)
