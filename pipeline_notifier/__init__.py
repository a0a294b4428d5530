"""CodePipeline to Slack notifier.

Receives CodePipeline state-change events, enriches them with revision and
stage metadata and posts attachment messages to a Slack webhook.

Modules:
    models - Event, metadata and payload types
    api - CodePipeline client and metadata fetcher
    slack - Message building and webhook delivery
    router - Event dispatch
    handler - AWS Lambda entry point
    config - Configuration
"""

from .config import NotifierConfig
from .errors import (
    ConfigurationError,
    DeliveryError,
    InvalidEventError,
    MissingRevisionError,
    NotifierError,
    StageNotFoundError,
    UpstreamQueryError,
)
from .router import EventRouter

__all__ = [
    'NotifierConfig',
    'EventRouter',
    'NotifierError',
    'ConfigurationError',
    'InvalidEventError',
    'UpstreamQueryError',
    'MissingRevisionError',
    'StageNotFoundError',
    'DeliveryError',
]

__version__ = '1.0.0'
