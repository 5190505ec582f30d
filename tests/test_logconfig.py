"""Tests for taxotree.utilities.logconfig."""

import logging

from taxotree.utilities.logconfig import configure_logging, level_from_flags


class TestLevelFromFlags:
    def test_levels(self):
        assert level_from_flags() == logging.WARNING
        assert level_from_flags(verbose=True) == logging.DEBUG
        assert level_from_flags(quiet=True) == logging.ERROR
        assert level_from_flags(verbose=True, quiet=True) == logging.DEBUG


class TestConfigureLogging:
    def test_installs_one_handler(self):
        logger = configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)

        tagged = [h for h in logger.handlers if getattr(h, "_taxotree_handler", False)]
        assert len(tagged) == 1
        assert tagged[0].level == logging.DEBUG
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_messages_go_to_stderr(self, capsys):
        configure_logging(logging.INFO)
        logging.getLogger("taxotree.tree.builder").info("hello")

        assert "INFO | taxotree.tree.builder | hello" in capsys.readouterr().err
