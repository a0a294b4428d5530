"""Metadata Fetcher - Revision and stage enrichment from CodePipeline."""

import logging
from typing import Optional

from ..errors import StageNotFoundError, UpstreamQueryError
from ..models import RevisionInfo, StagePosition
from .client import CodePipelineClient

logger = logging.getLogger(__name__)


class MetadataFetcher:
    """Looks up the metadata a notification is enriched with.

    Each call issues exactly one CodePipeline request; nothing is cached
    between calls.
    """

    def __init__(self, client: CodePipelineClient, strict_stage_lookup: bool = True):
        """
        Initialize fetcher.

        Args:
            client: CodePipeline client to query
            strict_stage_lookup: Raise StageNotFoundError for unknown stages
                instead of reporting position 0
        """
        self.client = client
        self.strict_stage_lookup = strict_stage_lookup

    def fetch_revision_info(self, pipeline_name: str, execution_id: str) -> Optional[RevisionInfo]:
        """
        Get the first artifact revision of an execution.

        Args:
            pipeline_name: Pipeline name
            execution_id: Pipeline execution id

        Returns:
            RevisionInfo, or None if the execution has no artifact revisions

        Raises:
            UpstreamQueryError: If the call fails or the response is malformed
        """
        response = self.client.get_pipeline_execution(pipeline_name, execution_id)

        try:
            revisions = response["pipelineExecution"].get("artifactRevisions") or []
        except (KeyError, TypeError, AttributeError) as e:
            raise UpstreamQueryError(
                f"unexpected get_pipeline_execution response for {pipeline_name}/{execution_id}"
            ) from e

        if not revisions:
            logger.info("Execution %s of %s has no artifact revisions", execution_id, pipeline_name)
            return None

        first = revisions[0]
        if not isinstance(first, dict):
            raise UpstreamQueryError(
                f"unexpected artifact revision for {pipeline_name}/{execution_id}"
            )

        for key in ("name", "revisionId"):
            if not isinstance(first.get(key), str):
                raise UpstreamQueryError(
                    f"artifact revision of {pipeline_name}/{execution_id} has no {key}"
                )

        return RevisionInfo(
            artifact_name=first["name"],
            commit_id=first["revisionId"],
            summary=first.get("revisionSummary") or "",
            source_url=first.get("revisionUrl") or "",
        )

    def fetch_stage_position(self, pipeline_name: str, stage_name: str) -> StagePosition:
        """
        Get the 1-based position of a stage within its pipeline.

        Args:
            pipeline_name: Pipeline name
            stage_name: Stage name, matched exactly

        Returns:
            StagePosition with index and total stage count

        Raises:
            UpstreamQueryError: If the call fails or the response is malformed
            StageNotFoundError: If the stage is not declared and lookup is strict
        """
        response = self.client.get_pipeline(pipeline_name)

        try:
            names = [stage["name"] for stage in response["pipeline"]["stages"]]
        except (KeyError, TypeError) as e:
            raise UpstreamQueryError(f"unexpected get_pipeline response for {pipeline_name}") from e

        index = names.index(stage_name) if stage_name in names else -1

        if index < 0:
            if self.strict_stage_lookup:
                raise StageNotFoundError(pipeline_name, stage_name)
            logger.warning(
                "Stage %s not found in %s, reporting position 0/%d",
                stage_name,
                pipeline_name,
                len(names),
            )

        return StagePosition(
            pipeline_name=pipeline_name,
            stage_name=stage_name,
            index_1_based=index + 1,
            total_stages=len(names),
        )
