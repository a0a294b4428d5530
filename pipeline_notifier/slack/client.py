"""
Slack Notification Client

Sends attachment formatted messages to a Slack incoming webhook.
"""

import logging
from typing import Optional

import requests

from ..config import NotifierConfig
from ..errors import ConfigurationError, DeliveryError
from ..models import NotificationPayload
from ..monitoring.decorators import track_performance
from ..result import Result

logger = logging.getLogger(__name__)

ACK_MESSAGE = "posted to slack"
JSON_HEADERS = {"Content-Type": "application/json"}


class SlackNotifier:
    """
    Posts notification payloads to the configured Slack webhook.

    Every call makes exactly one delivery attempt.

    Usage:
        config = NotifierConfig.from_env()
        notifier = SlackNotifier(config)

        result = notifier.post_notification(payload)
        if result.is_error:
            ...
    """

    def __init__(self, config: Optional[NotifierConfig] = None):
        """
        Initialize Slack notifier.

        Args:
            config: NotifierConfig with webhook URL

        Raises:
            ConfigurationError: If no webhook URL is configured
        """
        self.config = config or NotifierConfig.from_env()
        if not self.config.slack_enabled:
            raise ConfigurationError("SLACK_HOOK_URL is not set")
        self._webhook_url = self.config.slack_webhook_url

    @track_performance(operation_name="slack_post", warn_threshold_seconds=5.0)
    def post_notification(self, payload: NotificationPayload) -> Result[str]:
        """
        Send a payload to Slack.

        Args:
            payload: Notification to deliver

        Returns:
            Success result with the acknowledgement on HTTP 200, otherwise an
            error result carrying a DeliveryError
        """
        try:
            response = requests.post(
                self._webhook_url,
                data=payload.to_json(),
                headers=JSON_HEADERS,
                timeout=self.config.slack_timeout_seconds,
            )
        except requests.RequestException as e:
            logger.warning("Failed to send Slack notification: %s", e)
            return Result.failure(DeliveryError(str(e)))

        if response.status_code != 200:
            logger.warning("Slack webhook answered with status code %d", response.status_code)
            return Result.failure(DeliveryError.from_status(response.status_code))

        logger.debug("Slack notification sent successfully")
        return Result.success(ACK_MESSAGE)
