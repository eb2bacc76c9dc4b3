import logging

from modules.auth.interfaces import INotifier
from modules.auth.notifier import LogNotifier


class TestLogNotifier:
    def test_implements_protocol(self):
        assert isinstance(LogNotifier(), INotifier)

    def test_logs_message(self, caplog):
        """The message and destination should appear in the log."""
        with caplog.at_level(logging.INFO, logger="modules.auth.notifier"):
            LogNotifier().notify("alice@x.com", "Your Protus login code is 123456")

        assert "alice@x.com" in caplog.text
        assert "123456" in caplog.text
