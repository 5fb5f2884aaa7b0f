"""
Unit tests for logging configuration.
"""

import logging

from envsettings.utils.logging_config import MASKED_VALUE, LoggingConfig, mask_value


class TestLoggingConfig:

    def setup_method(self):
        self.config = LoggingConfig()

    def teardown_method(self):
        self.config.reset()

    def test_configure_sets_root_level_and_handler(self):
        self.config.configure_logging(level="debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert self.config._console_handler in root.handlers

    def test_configure_is_once_unless_forced(self):
        self.config.configure_logging(level="error")
        self.config.configure_logging(level="debug")
        assert logging.getLogger().level == logging.ERROR

        self.config.configure_logging(level="debug", force=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self):
        self.config.configure_logging(level="verbose")

        assert logging.getLogger().level == logging.INFO

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "agent-settings.log"

        self.config.configure_logging(level="info", log_file=str(log_file))
        logging.getLogger("envsettings.test").info("written to file")
        self.config.reset()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_reset_removes_handlers(self):
        self.config.configure_logging(level="info")
        handler = self.config._console_handler

        self.config.reset()

        assert handler not in logging.getLogger().handlers


class TestMaskValue:

    def test_masks_sensitive_keys(self):
        assert mask_value("OPENAI_API_KEY", "sk") == MASKED_VALUE
        assert mask_value("discord.token", "t") == MASKED_VALUE

    def test_empty_sensitive_value_reads_as_none(self):
        assert mask_value("OPENAI_API_KEY", "") is None

    def test_other_keys_pass_through(self):
        assert mask_value("LARGE_OPENAI_MODEL", "gpt-4o") == "gpt-4o"
