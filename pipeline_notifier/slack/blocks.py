"""
Slack Attachment Builders

Creates the attachment-style messages for pipeline notifications.
Everything here is pure: the same inputs always build the same payload.
"""

from typing import Dict, Optional, Union

from ..config import DEFAULT_CONSOLE_REGION
from ..models import (
    Attachment,
    AttachmentField,
    Color,
    NotificationPayload,
    PipelineState,
    RevisionInfo,
    StateContext,
    StagePosition,
)

MRKDWN_FIELDS = ["text", "title"]

_STAGE_COLORS: Dict[str, Color] = {
    PipelineState.STARTED.value: Color.GREY,
    PipelineState.SUCCEEDED.value: Color.GREEN,
    PipelineState.RESUMED.value: Color.BLUE,
    PipelineState.FAILED.value: Color.RED,
    PipelineState.CANCELLED.value: Color.YELLOW,
}

# SUPERCEDED only exists for whole executions
_PIPELINE_COLORS: Dict[str, Color] = {
    **_STAGE_COLORS,
    PipelineState.SUPERCEDED.value: Color.BLUE,
}


def color_for_state(state: str, context: StateContext) -> Optional[Color]:
    """
    Map a lifecycle state to its severity color.

    Args:
        state: Raw state string, e.g. "FAILED"
        context: StateContext.STAGE or StateContext.PIPELINE

    Returns:
        Color, or None for states without a color
    """
    table = _PIPELINE_COLORS if context == StateContext.PIPELINE else _STAGE_COLORS
    return table.get(state)


def title_case(word: str) -> str:
    """Upper-case the first character only."""
    return word[:1].upper() + word[1:]


def humanize_state(state: str) -> str:
    """FAILED -> Failed."""
    return title_case(state.lower())


def console_url(pipeline_name: str, region: str = DEFAULT_CONSOLE_REGION) -> str:
    """Link to the pipeline's view in the CodePipeline console."""
    return (
        f"https://console.aws.amazon.com/codepipeline/home?region={region}"
        f"#/view/{pipeline_name}"
    )


def _revision_title(revision: RevisionInfo) -> str:
    return (
        f"Building and deploying: "
        f"<{revision.source_url}|{revision.artifact_name}@{revision.short_commit}>"
    )


def build_pipeline_execution_message(
    revision: RevisionInfo,
    pipeline_name: str,
    execution_id: str,
    state: str,
    time: Optional[Union[str, int, float]] = None,
    region: str = DEFAULT_CONSOLE_REGION,
) -> NotificationPayload:
    """
    Build the notification for a pipeline execution state change.

    Args:
        revision: First artifact revision of the execution
        pipeline_name: Pipeline name
        execution_id: Pipeline execution id
        state: Raw execution state
        time: Event time, passed through as the attachment timestamp
        region: Console region for the pipeline link

    Returns:
        NotificationPayload with a single attachment
    """
    pipeline_link = f"<{console_url(pipeline_name, region)}|{pipeline_name}>"

    attachment = Attachment(
        color=color_for_state(state, StateContext.PIPELINE),
        title=_revision_title(revision),
        text=revision.summary,
        mrkdwn_in=list(MRKDWN_FIELDS),
        fields=[
            AttachmentField(title="Pipeline", value=pipeline_link, short=True),
            AttachmentField(title="Execution Id", value=execution_id, short=True),
            AttachmentField(title="State", value=humanize_state(state), short=True),
        ],
        ts=time,
    )
    return NotificationPayload(attachments=[attachment])


def build_stage_execution_message(
    position: StagePosition,
    state: str,
    region: str = DEFAULT_CONSOLE_REGION,
) -> NotificationPayload:
    """
    Build the notification for a stage execution state change.

    Args:
        position: Stage position within its pipeline
        state: Raw stage state
        region: Console region for the title link

    Returns:
        NotificationPayload with a single attachment
    """
    title = (
        f"Pipeline: {title_case(position.pipeline_name)}, "
        f"Stage: {position.stage_name} "
        f"({position.index_1_based}/{position.total_stages}), "
        f"State: {humanize_state(state)}"
    )

    attachment = Attachment(
        color=color_for_state(state, StateContext.STAGE),
        title=title,
        title_link=console_url(position.pipeline_name, region),
    )
    return NotificationPayload(attachments=[attachment])


def build_build_metadata_message(revision: RevisionInfo) -> NotificationPayload:
    """Build the revision announcement sent when the build stage changes state."""
    attachment = Attachment(
        title=_revision_title(revision),
        text=revision.summary,
        mrkdwn_in=list(MRKDWN_FIELDS),
    )
    return NotificationPayload(attachments=[attachment])
