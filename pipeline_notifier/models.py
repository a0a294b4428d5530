"""
Notifier Types

Data structures for inbound pipeline events, enrichment metadata and
outbound Slack payloads.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .errors import InvalidEventError


class DetailType(Enum):
    """EventBridge ``detail-type`` values emitted by CodePipeline."""
    PIPELINE = "CodePipeline Pipeline Execution State Change"
    STAGE = "CodePipeline Stage Execution State Change"
    ACTION = "CodePipeline Action Execution State Change"

    @classmethod
    def from_value(cls, value: Any) -> Optional["DetailType"]:
        """Look up a detail type by its exact string, None if unrecognized."""
        for member in cls:
            if member.value == value:
                return member
        return None


class PipelineState(Enum):
    """Lifecycle states reported for pipelines and stages."""
    STARTED = "STARTED"
    SUCCEEDED = "SUCCEEDED"
    RESUMED = "RESUMED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    SUPERCEDED = "SUPERCEDED"


class StateContext(Enum):
    """Whether a state belongs to a stage or to a whole pipeline execution."""
    STAGE = "stage"
    PIPELINE = "pipeline"


class Color(Enum):
    """Attachment severity colors."""
    GREY = "#d0d0d0"
    BLUE = "#67d4e2"
    GREEN = "#54a158"
    RED = "#c3291c"
    YELLOW = "#d5a048"


@dataclass(frozen=True)
class PipelineEvent:
    """A CodePipeline state-change event, parsed once per invocation."""

    detail_type: DetailType
    pipeline_name: str
    state: str
    execution_id: str
    stage_name: Optional[str] = None
    time: Optional[Union[str, int, float]] = None

    @classmethod
    def from_event(cls, raw: Dict[str, Any]) -> "PipelineEvent":
        """
        Build an event from the EventBridge wire shape.

        Args:
            raw: Event dict with ``detail-type``, ``detail`` and ``time``

        Returns:
            Parsed PipelineEvent

        Raises:
            InvalidEventError: If the detail type is unknown or a required
                detail field is missing
        """
        detail_type = DetailType.from_value(raw.get("detail-type"))
        if detail_type is None:
            raise InvalidEventError(f"unrecognized detail-type: {raw.get('detail-type')!r}")

        detail = raw.get("detail")
        if not isinstance(detail, dict):
            raise InvalidEventError("event has no detail object")

        missing = [key for key in ("pipeline", "state", "execution-id") if not detail.get(key)]
        if missing:
            raise InvalidEventError(f"event detail is missing: {', '.join(missing)}")

        stage_name = detail.get("stage")
        if detail_type == DetailType.STAGE and not stage_name:
            raise InvalidEventError("stage event detail is missing: stage")

        return cls(
            detail_type=detail_type,
            pipeline_name=detail["pipeline"],
            state=detail["state"],
            execution_id=detail["execution-id"],
            stage_name=stage_name,
            time=raw.get("time"),
        )


@dataclass(frozen=True)
class RevisionInfo:
    """First artifact revision of a pipeline execution."""

    artifact_name: str
    commit_id: str
    summary: str
    source_url: str

    @property
    def short_commit(self) -> str:
        """Abbreviated commit hash for display."""
        return self.commit_id[:7]


@dataclass(frozen=True)
class StagePosition:
    """Position of a stage among its pipeline's declared stages."""

    pipeline_name: str
    stage_name: str
    index_1_based: int
    total_stages: int


@dataclass(frozen=True)
class AttachmentField:
    """A title/value pair rendered inside an attachment."""

    title: str
    value: str
    short: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(frozen=True)
class Attachment:
    """A single Slack message attachment."""

    title: str
    color: Optional[Color] = None
    title_link: Optional[str] = None
    text: Optional[str] = None
    mrkdwn_in: List[str] = field(default_factory=list)
    fields: List[AttachmentField] = field(default_factory=list)
    ts: Optional[Union[str, int, float]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the webhook wire format, leaving out unset keys."""
        data: Dict[str, Any] = {}
        if self.color is not None:
            data["color"] = self.color.value
        data["title"] = self.title
        if self.title_link is not None:
            data["title_link"] = self.title_link
        if self.text is not None:
            data["text"] = self.text
        if self.mrkdwn_in:
            data["mrkdwn_in"] = list(self.mrkdwn_in)
        if self.fields:
            data["fields"] = [f.to_dict() for f in self.fields]
        if self.ts is not None:
            data["ts"] = self.ts
        return data


@dataclass(frozen=True)
class NotificationPayload:
    """Body POSTed to the Slack webhook."""

    attachments: List[Attachment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"attachments": [a.to_dict() for a in self.attachments]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
