"""API layer - CodePipeline communication."""

from .client import CodePipelineClient, ProductionCodePipelineClient, MockCodePipelineClient
from .metadata import MetadataFetcher

__all__ = [
    'CodePipelineClient',
    'ProductionCodePipelineClient',
    'MockCodePipelineClient',
    'MetadataFetcher',
]
