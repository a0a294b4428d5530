"""Event Router - Dispatches CodePipeline events to their notification sequence."""

import logging
from typing import Any, Dict

from .config import NotifierConfig
from .errors import NotifierError
from .models import DetailType, PipelineEvent
from .monitoring.sentry import add_breadcrumb, set_event_context
from .result import Result
from .slack.client import SlackNotifier
from .slack.formatter import MessageFormatter

logger = logging.getLogger(__name__)


class EventRouter:
    """
    Routes one inbound event to enrichment, formatting and delivery.

    Only the primary notification decides the outcome. Primary failures
    raise; the build-metadata notification is best effort.

    Usage:
        router = EventRouter(formatter, notifier, config)
        result = router.route(event)
    """

    def __init__(
        self,
        formatter: MessageFormatter,
        notifier: SlackNotifier,
        config: NotifierConfig,
    ):
        self.formatter = formatter
        self.notifier = notifier
        self.config = config

    def route(self, raw_event: Dict[str, Any]) -> Result[str]:
        """
        Handle a single EventBridge event.

        Args:
            raw_event: Event dict as delivered by EventBridge

        Returns:
            Success result with the acknowledgement, or a skipped result when
            the event kind sends nothing

        Raises:
            NotifierError: If parsing, enrichment, formatting or the primary
                delivery fails
        """
        detail_type = DetailType.from_value(raw_event.get("detail-type"))

        if detail_type is None:
            logger.info("Ignoring event with detail-type %r", raw_event.get("detail-type"))
            return Result.skipped(f"unrecognized detail-type: {raw_event.get('detail-type')}")

        if detail_type == DetailType.ACTION:
            self.formatter.format_action_execution_message()
            return Result.skipped("action execution notifications are not sent")

        if detail_type == DetailType.PIPELINE and not self.config.notify_pipeline_events:
            logger.info("Pipeline execution notifications are disabled, skipping")
            return Result.skipped("pipeline execution notifications are disabled")

        event = PipelineEvent.from_event(raw_event)
        set_event_context(
            detail_type.value,
            pipeline_name=event.pipeline_name,
            stage_name=event.stage_name,
            state=event.state,
            execution_id=event.execution_id,
        )

        if detail_type == DetailType.PIPELINE:
            return self._route_pipeline_event(event)
        return self._route_stage_event(event)

    def _route_pipeline_event(self, event: PipelineEvent) -> Result[str]:
        payload = self.formatter.format_pipeline_execution_message(
            event.pipeline_name,
            event.execution_id,
            event.state,
            event.time,
        )
        return self.notifier.post_notification(payload).unwrap()

    def _route_stage_event(self, event: PipelineEvent) -> Result[str]:
        if event.stage_name == self.config.build_stage_name:
            secondary = self._post_build_metadata(event)
            if secondary.is_error:
                logger.warning("Build metadata notification not delivered: %s", secondary.message)
                add_breadcrumb(
                    message=f"Build metadata notification failed: {secondary.message}",
                    category="slack",
                    level="warning",
                )
            else:
                logger.info("Posted build metadata to slack")

        payload = self.formatter.format_stage_execution_message(
            event.pipeline_name,
            event.stage_name,
            event.state,
        )
        return self.notifier.post_notification(payload).unwrap()

    def _post_build_metadata(self, event: PipelineEvent) -> Result[str]:
        """Announce the revision being built. Never raises NotifierError."""
        try:
            payload = self.formatter.format_build_metadata_message(
                event.pipeline_name,
                event.execution_id,
            )
        except NotifierError as e:
            return Result.failure(e)
        return self.notifier.post_notification(payload)
