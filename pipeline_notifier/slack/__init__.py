"""
Slack Notification Module

Builds attachment messages for pipeline events and posts them to a webhook.
"""

from .client import SlackNotifier
from .formatter import MessageFormatter
from .blocks import (
    build_build_metadata_message,
    build_pipeline_execution_message,
    build_stage_execution_message,
    color_for_state,
    title_case,
)

__all__ = [
    'SlackNotifier',
    'MessageFormatter',
    'build_build_metadata_message',
    'build_pipeline_execution_message',
    'build_stage_execution_message',
    'color_for_state',
    'title_case',
]
