"""
AWS Lambda entry point.

Configure the function handler as ``pipeline_notifier.handler.lambda_handler``
and subscribe it to CodePipeline state-change events.
"""

import json
import logging
from typing import Any, Dict, Optional

from .api.client import ProductionCodePipelineClient
from .api.metadata import MetadataFetcher
from .config import NotifierConfig
from .monitoring.decorators import capture_errors
from .monitoring.sentry import init_sentry
from .router import EventRouter
from .slack.client import SlackNotifier
from .slack.formatter import MessageFormatter

logger = logging.getLogger(__name__)

# Built on the first invocation and reused by warm containers
_router: Optional[EventRouter] = None


def build_router(config: NotifierConfig) -> EventRouter:
    """Wire the production fetcher, formatter and notifier together."""
    fetcher = MetadataFetcher(
        ProductionCodePipelineClient(region_name=config.aws_region),
        strict_stage_lookup=config.strict_stage_lookup,
    )
    formatter = MessageFormatter(fetcher, region=config.console_region)
    notifier = SlackNotifier(config)
    return EventRouter(formatter, notifier, config)


def get_router() -> EventRouter:
    global _router

    if _router is None:
        config = NotifierConfig.from_env()
        logging.getLogger().setLevel(config.log_level)
        init_sentry(config)
        _router = build_router(config)
    return _router


@capture_errors(step_name="lambda_handler")
def lambda_handler(event: Dict[str, Any], context: Any) -> str:
    """
    Handle one CodePipeline event.

    Returns:
        "posted to slack" when the primary notification was delivered, or a
        "skipped: ..." message when the event sends nothing

    Raises:
        NotifierError: If the notification could not be built or delivered
    """
    logger.info("Received event: %s", json.dumps(event, indent=2, default=str))

    result = get_router().route(event)

    if result.is_skipped:
        return f"skipped: {result.message}"
    return result.data
