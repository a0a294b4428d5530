"""Tests for event parsing and payload serialization (models.py)."""

import json

import pytest

from pipeline_notifier.errors import InvalidEventError
from pipeline_notifier.models import (
    Attachment,
    AttachmentField,
    Color,
    DetailType,
    NotificationPayload,
    PipelineEvent,
    RevisionInfo,
)


class TestDetailType:
    def test_known_values(self):
        assert DetailType.from_value("CodePipeline Stage Execution State Change") == DetailType.STAGE
        assert DetailType.from_value("CodePipeline Pipeline Execution State Change") == DetailType.PIPELINE
        assert DetailType.from_value("CodePipeline Action Execution State Change") == DetailType.ACTION

    def test_match_is_case_exact(self):
        assert DetailType.from_value("codepipeline stage execution state change") is None

    def test_unknown_and_missing(self):
        assert DetailType.from_value("EC2 Instance State-change Notification") is None
        assert DetailType.from_value(None) is None


class TestPipelineEvent:
    def test_from_stage_event(self, stage_event):
        event = PipelineEvent.from_event(stage_event(stage="build", state="STARTED"))

        assert event.detail_type == DetailType.STAGE
        assert event.pipeline_name == "app"
        assert event.stage_name == "build"
        assert event.state == "STARTED"
        assert event.execution_id == "exec-1"
        assert event.time == "2024-05-01T12:00:00Z"

    def test_from_pipeline_event_keeps_time_verbatim(self, pipeline_event):
        event = PipelineEvent.from_event(pipeline_event)

        assert event.detail_type == DetailType.PIPELINE
        assert event.stage_name is None
        assert event.time == 1714564800

    def test_is_immutable(self, stage_event):
        event = PipelineEvent.from_event(stage_event())
        with pytest.raises(AttributeError):
            event.state = "FAILED"

    def test_missing_detail(self):
        with pytest.raises(InvalidEventError, match="no detail"):
            PipelineEvent.from_event({"detail-type": DetailType.STAGE.value})

    def test_missing_execution_id(self, stage_event):
        raw = stage_event()
        del raw["detail"]["execution-id"]
        with pytest.raises(InvalidEventError, match="execution-id"):
            PipelineEvent.from_event(raw)

    def test_stage_event_without_stage(self, stage_event):
        raw = stage_event()
        del raw["detail"]["stage"]
        with pytest.raises(InvalidEventError, match="stage"):
            PipelineEvent.from_event(raw)

    def test_unrecognized_detail_type(self, stage_event):
        raw = stage_event()
        raw["detail-type"] = "Something Else"
        with pytest.raises(InvalidEventError, match="unrecognized"):
            PipelineEvent.from_event(raw)


class TestRevisionInfo:
    def test_short_commit(self):
        revision = RevisionInfo("app", "abcdef1234567890", "fix bug", "http://x/1")
        assert revision.short_commit == "abcdef1"

    def test_short_commit_of_short_id(self):
        assert RevisionInfo("app", "abc", "", "").short_commit == "abc"


class TestPayloadSerialization:
    def test_unset_keys_are_omitted(self):
        payload = NotificationPayload(attachments=[Attachment(title="hello")])
        assert payload.to_dict() == {"attachments": [{"title": "hello"}]}

    def test_wire_field_names(self):
        attachment = Attachment(
            title="t",
            color=Color.RED,
            title_link="https://example.com",
            text="body",
            mrkdwn_in=["text", "title"],
            fields=[AttachmentField(title="State", value="Failed", short=True)],
            ts=1714564800,
        )

        data = attachment.to_dict()

        assert data == {
            "color": "#c3291c",
            "title": "t",
            "title_link": "https://example.com",
            "text": "body",
            "mrkdwn_in": ["text", "title"],
            "fields": [{"title": "State", "value": "Failed", "short": True}],
            "ts": 1714564800,
        }

    def test_to_json_is_valid_json(self):
        payload = NotificationPayload(attachments=[Attachment(title="a", color=Color.GREEN)])
        assert json.loads(payload.to_json()) == {"attachments": [{"color": "#54a158", "title": "a"}]}
