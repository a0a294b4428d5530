"""CodePipeline API Client - Interface and implementations for CodePipeline calls."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..errors import UpstreamQueryError


class CodePipelineClient(ABC):
    """Abstract interface for the CodePipeline calls used for enrichment."""

    @abstractmethod
    def get_pipeline_execution(self, pipeline_name: str, execution_id: str) -> Dict[str, Any]:
        """Get execution detail, including its artifact revisions."""
        pass

    @abstractmethod
    def get_pipeline(self, pipeline_name: str) -> Dict[str, Any]:
        """Get the pipeline definition, including its ordered stages."""
        pass


class ProductionCodePipelineClient(CodePipelineClient):
    """Real CodePipeline client using boto3."""

    def __init__(self, region_name: Optional[str] = None, client: Any = None):
        if client is None:
            import boto3

            client = boto3.client("codepipeline", region_name=region_name)
        self._client = client

    def get_pipeline_execution(self, pipeline_name: str, execution_id: str) -> Dict[str, Any]:
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            return self._client.get_pipeline_execution(
                pipelineName=pipeline_name,
                pipelineExecutionId=execution_id,
            )
        except (BotoCoreError, ClientError) as e:
            raise UpstreamQueryError(
                f"get_pipeline_execution failed for {pipeline_name}/{execution_id}: {e}"
            ) from e

    def get_pipeline(self, pipeline_name: str) -> Dict[str, Any]:
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            return self._client.get_pipeline(name=pipeline_name)
        except (BotoCoreError, ClientError) as e:
            raise UpstreamQueryError(f"get_pipeline failed for {pipeline_name}: {e}") from e


class MockCodePipelineClient(CodePipelineClient):
    """Mock client for testing."""

    def __init__(self):
        self.responses: Dict[str, Dict[str, Any]] = {}
        self.call_count = 0

    def _get_response(self, key: str) -> Dict[str, Any]:
        self.call_count += 1
        if key not in self.responses:
            raise UpstreamQueryError(f"no mock response for {key}")
        return self.responses[key]

    def get_pipeline_execution(self, pipeline_name: str, execution_id: str) -> Dict[str, Any]:
        return self._get_response(f"execution_{pipeline_name}_{execution_id}")

    def get_pipeline(self, pipeline_name: str) -> Dict[str, Any]:
        return self._get_response(f"pipeline_{pipeline_name}")

    def set_response(self, key: str, data: Dict[str, Any]) -> None:
        """Test helper to set mock responses."""
        self.responses[key] = data

    def set_execution(self, pipeline_name: str, execution_id: str, revisions: list) -> None:
        """Test helper to register an execution with the given artifact revisions."""
        self.set_response(
            f"execution_{pipeline_name}_{execution_id}",
            {
                "pipelineExecution": {
                    "pipelineName": pipeline_name,
                    "pipelineExecutionId": execution_id,
                    "artifactRevisions": revisions,
                }
            },
        )

    def set_pipeline(self, pipeline_name: str, stage_names: list) -> None:
        """Test helper to register a pipeline declaring the given stages."""
        self.set_response(
            f"pipeline_{pipeline_name}",
            {
                "pipeline": {
                    "name": pipeline_name,
                    "stages": [{"name": name, "actions": []} for name in stage_names],
                }
            },
        )

    def reset(self) -> None:
        """Reset call count and responses."""
        self.call_count = 0
        self.responses = {}
