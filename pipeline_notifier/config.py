"""
Notifier Configuration

Loads notifier settings from environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigurationError

DEFAULT_CONSOLE_REGION = "us-east-1"
DEFAULT_BUILD_STAGE_NAME = "build"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{name} must be a logging level name, got {level!r}")
    return level


@dataclass(frozen=True)
class NotifierConfig:
    """Configuration for the CodePipeline -> Slack notifier."""

    # Slack settings
    slack_webhook_url: Optional[str] = field(default=None)
    slack_timeout_seconds: float = 10.0

    # CodePipeline settings
    aws_region: Optional[str] = None
    console_region: str = DEFAULT_CONSOLE_REGION
    build_stage_name: str = DEFAULT_BUILD_STAGE_NAME
    notify_pipeline_events: bool = False
    strict_stage_lookup: bool = True

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 0.0

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "NotifierConfig":
        """Create config from environment variables."""
        aws_region = os.getenv("AWS_REGION")
        return cls(
            slack_webhook_url=os.getenv("SLACK_HOOK_URL") or None,
            slack_timeout_seconds=_env_float("SLACK_TIMEOUT_SECONDS", "10"),
            aws_region=aws_region,
            console_region=os.getenv(
                "CODEPIPELINE_CONSOLE_REGION", aws_region or DEFAULT_CONSOLE_REGION
            ),
            build_stage_name=os.getenv("BUILD_STAGE_NAME", DEFAULT_BUILD_STAGE_NAME),
            notify_pipeline_events=_env_flag("NOTIFY_PIPELINE_EVENTS", "false"),
            strict_stage_lookup=_env_flag("STRICT_STAGE_LOOKUP", "true"),
            sentry_dsn=os.getenv("SENTRY_DSN") or None,
            sentry_environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
            sentry_traces_sample_rate=_env_float("SENTRY_TRACES_SAMPLE_RATE", "0.0"),
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
        )

    @property
    def slack_enabled(self) -> bool:
        """Check if the Slack webhook is configured."""
        return bool(self.slack_webhook_url)

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
