"""
One-time code delivery.

LogNotifier writes the message to the application log. It stands in for
an e-mail sender in development deployments.
"""

import logging

logger = logging.getLogger(__name__)


class LogNotifier:
    """INotifier that logs messages instead of sending them."""

    def notify(self, destination: str, message: str) -> None:
        logger.info(f"Notification for {destination}: {message}")
