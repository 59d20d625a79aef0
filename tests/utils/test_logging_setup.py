import logging

from taskpad.utils.logging_setup import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_single_handler(self):
        """Test that setup sets the level and one handler."""
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)

        logger = logging.getLogger("taskpad")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_writes_to_stderr(self, capsys):
        """Test that log records go to stderr."""
        configure_logging(logging.WARNING)

        logging.getLogger("taskpad.core.task_store").warning("something odd")
        logging.getLogger("taskpad.core.task_store").info("hidden")

        err = capsys.readouterr().err
        assert "taskpad.core.task_store - WARNING - something odd" in err
        assert "hidden" not in err
