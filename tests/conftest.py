"""Shared pytest fixtures for pipeline notifier tests."""

import pytest
from unittest.mock import MagicMock

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"
FULL_COMMIT = "abcdef1234567890abcdef1234567890abcdef12"


@pytest.fixture
def config():
    """Notifier config with a webhook and default behavior."""
    from pipeline_notifier.config import NotifierConfig
    return NotifierConfig(slack_webhook_url=WEBHOOK_URL)


@pytest.fixture
def sample_revision():
    """A CodePipeline artifact revision as returned by get_pipeline_execution."""
    return {
        "name": "app",
        "revisionId": FULL_COMMIT,
        "revisionSummary": "fix bug",
        "revisionUrl": "https://github.com/acme/app/commit/abcdef1",
    }


@pytest.fixture
def mock_client(sample_revision):
    """Mock CodePipeline client with one pipeline and one execution."""
    from pipeline_notifier.api.client import MockCodePipelineClient
    client = MockCodePipelineClient()
    client.set_pipeline("app", ["source", "build", "deploy"])
    client.set_execution("app", "exec-1", [sample_revision])
    return client


@pytest.fixture
def fetcher(mock_client):
    from pipeline_notifier.api.metadata import MetadataFetcher
    return MetadataFetcher(mock_client)


@pytest.fixture
def formatter(fetcher):
    from pipeline_notifier.slack.formatter import MessageFormatter
    return MessageFormatter(fetcher)


@pytest.fixture
def notifier(config):
    from pipeline_notifier.slack.client import SlackNotifier
    return SlackNotifier(config)


@pytest.fixture
def router(formatter, notifier, config):
    from pipeline_notifier.router import EventRouter
    return EventRouter(formatter, notifier, config)


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects with a given status."""
    def _make(status_code: int = 200):
        response = MagicMock()
        response.status_code = status_code
        return response
    return _make


@pytest.fixture
def stage_event():
    """Factory for stage execution state change events."""
    def _make(stage="deploy", state="SUCCEEDED", pipeline="app", execution_id="exec-1"):
        return {
            "version": "0",
            "detail-type": "CodePipeline Stage Execution State Change",
            "source": "aws.codepipeline",
            "time": "2024-05-01T12:00:00Z",
            "region": "us-east-1",
            "detail": {
                "pipeline": pipeline,
                "execution-id": execution_id,
                "stage": stage,
                "state": state,
                "version": 3,
            },
        }
    return _make


@pytest.fixture
def pipeline_event():
    """A pipeline execution state change event."""
    return {
        "version": "0",
        "detail-type": "CodePipeline Pipeline Execution State Change",
        "source": "aws.codepipeline",
        "time": 1714564800,
        "region": "us-east-1",
        "detail": {
            "pipeline": "app",
            "execution-id": "exec-1",
            "state": "FAILED",
            "version": 3,
        },
    }
