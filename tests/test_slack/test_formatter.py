"""Tests for enrichment + formatting (formatter.py)."""

import pytest

from pipeline_notifier.api.client import MockCodePipelineClient
from pipeline_notifier.api.metadata import MetadataFetcher
from pipeline_notifier.errors import MissingRevisionError, StageNotFoundError
from pipeline_notifier.slack.formatter import MessageFormatter


@pytest.fixture
def empty_execution_formatter():
    client = MockCodePipelineClient()
    client.set_execution("app", "exec-1", [])
    return MessageFormatter(MetadataFetcher(client))


class TestFormatPipelineExecutionMessage:
    def test_enriched_payload(self, formatter):
        payload = formatter.format_pipeline_execution_message("app", "exec-1", "SUCCEEDED", 1714564800)
        attachment = payload.to_dict()["attachments"][0]

        assert "app@abcdef1>" in attachment["title"]
        assert attachment["text"] == "fix bug"
        assert attachment["ts"] == 1714564800

    def test_missing_revision(self, empty_execution_formatter):
        with pytest.raises(MissingRevisionError):
            empty_execution_formatter.format_pipeline_execution_message("app", "exec-1", "FAILED")


class TestFormatStageExecutionMessage:
    def test_enriched_title(self, formatter):
        payload = formatter.format_stage_execution_message("app", "build", "FAILED")
        assert payload.attachments[0].title == "Pipeline: App, Stage: build (2/3), State: Failed"

    def test_uses_configured_region(self, fetcher):
        payload = MessageFormatter(fetcher, region="ap-southeast-2").format_stage_execution_message(
            "app", "deploy", "STARTED"
        )
        assert "region=ap-southeast-2" in payload.attachments[0].title_link

    def test_identical_inputs_give_identical_payloads(self, formatter):
        first = formatter.format_stage_execution_message("app", "deploy", "SUCCEEDED")
        second = formatter.format_stage_execution_message("app", "deploy", "SUCCEEDED")
        assert first.to_json() == second.to_json()

    def test_unknown_stage(self, formatter):
        with pytest.raises(StageNotFoundError):
            formatter.format_stage_execution_message("app", "lint", "STARTED")


class TestFormatBuildMetadataMessage:
    def test_enriched(self, formatter):
        payload = formatter.format_build_metadata_message("app", "exec-1")
        assert payload.attachments[0].text == "fix bug"
        assert payload.attachments[0].color is None

    def test_missing_revision(self, empty_execution_formatter):
        with pytest.raises(MissingRevisionError):
            empty_execution_formatter.format_build_metadata_message("app", "exec-1")


def test_action_messages_are_not_built(formatter, mock_client):
    assert formatter.format_action_execution_message("app", "build", "deploy-action") is None
    assert mock_client.call_count == 0
