"""Message Formatter - Enrich an event, then build its Slack payload."""

import logging
from typing import Optional, Union

from ..api.metadata import MetadataFetcher
from ..config import DEFAULT_CONSOLE_REGION
from ..errors import MissingRevisionError
from ..models import NotificationPayload, RevisionInfo
from .blocks import (
    build_build_metadata_message,
    build_pipeline_execution_message,
    build_stage_execution_message,
)

logger = logging.getLogger(__name__)


class MessageFormatter:
    """
    Builds notification payloads for pipeline events.

    Usage:
        formatter = MessageFormatter(MetadataFetcher(client))
        payload = formatter.format_stage_execution_message("app", "build", "FAILED")
    """

    def __init__(self, fetcher: MetadataFetcher, region: str = DEFAULT_CONSOLE_REGION):
        self.fetcher = fetcher
        self.region = region

    def _require_revision(self, pipeline_name: str, execution_id: str) -> RevisionInfo:
        revision = self.fetcher.fetch_revision_info(pipeline_name, execution_id)
        if revision is None:
            raise MissingRevisionError(
                f"execution {execution_id} of {pipeline_name} has no artifact revision"
            )
        return revision

    def format_pipeline_execution_message(
        self,
        pipeline_name: str,
        execution_id: str,
        state: str,
        time: Optional[Union[str, int, float]] = None,
    ) -> NotificationPayload:
        """
        Build the pipeline execution notification.

        Raises:
            UpstreamQueryError: If the revision lookup fails
            MissingRevisionError: If the execution has no artifact revision
        """
        revision = self._require_revision(pipeline_name, execution_id)
        return build_pipeline_execution_message(
            revision, pipeline_name, execution_id, state, time, self.region
        )

    def format_stage_execution_message(
        self,
        pipeline_name: str,
        stage_name: str,
        state: str,
    ) -> NotificationPayload:
        """
        Build the stage execution notification.

        Raises:
            UpstreamQueryError: If the pipeline lookup fails
            StageNotFoundError: If the stage is unknown and lookup is strict
        """
        position = self.fetcher.fetch_stage_position(pipeline_name, stage_name)
        return build_stage_execution_message(position, state, self.region)

    def format_build_metadata_message(
        self,
        pipeline_name: str,
        execution_id: str,
    ) -> NotificationPayload:
        """Build the revision announcement for a build stage event."""
        revision = self._require_revision(pipeline_name, execution_id)
        return build_build_metadata_message(revision)

    def format_action_execution_message(self, *args, **kwargs) -> None:
        """Action-level notifications are not sent."""
        logger.debug("Action execution notifications are not implemented, skipping")
        return None
