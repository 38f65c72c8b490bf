"""
Unit tests for the generation side console.
"""

import logging

from logbundle_dsl.api.config import GeneratorSettings
from logbundle_dsl.api.gen_logging import GEN_LOGGER, configure_gen_logging, gen_log_level, get_logger


class TestGenLogging:

    def test_child_logger_names(self):
        assert get_logger("logbundle_dsl.api.sink").name == "logbundle.gen.sink"
        assert get_logger().name == GEN_LOGGER

    def test_levels(self):
        assert gen_log_level() == logging.INFO
        assert gen_log_level(quiet=True) == logging.WARNING
        assert gen_log_level(GeneratorSettings(DEBUG=True), quiet=True) == logging.DEBUG

    def test_single_handler_across_calls(self):
        configure_gen_logging(quiet=True)
        gen_logger = configure_gen_logging(GeneratorSettings(DEBUG=True))

        assert len(gen_logger.handlers) == 1
        assert gen_logger.level == logging.DEBUG
        assert gen_logger.handlers[0].level == logging.DEBUG
        assert gen_logger.propagate is False

    def test_messages_go_to_stderr(self, capsys):
        configure_gen_logging()
        get_logger("logbundle_dsl.api.sink").info("[GENERATED] Foo.java")

        captured = capsys.readouterr()
        assert "[GENERATED] Foo.java" in captured.err
        assert captured.out == ""
