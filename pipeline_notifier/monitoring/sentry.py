"""
Sentry Setup and Context Management

Initializes Sentry SDK and provides context enrichment helpers.
All helpers are no-ops until init_sentry() succeeds.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import NotifierConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def init_sentry(config: NotifierConfig) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: NotifierConfig with DSN

    Returns:
        True if initialized successfully
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    try:
        logging_integration = LoggingIntegration(
            level=logging.INFO,  # Capture INFO and above as breadcrumbs
            event_level=logging.ERROR,  # Send ERROR and above as events
        )

        sentry_sdk.init(
            dsn=config.sentry_dsn,
            environment=config.sentry_environment,
            traces_sample_rate=config.sentry_traces_sample_rate,
            integrations=[logging_integration],
            send_default_pii=False,
            attach_stacktrace=True,
        )

        _sentry_initialized = True
        logger.debug("Sentry initialized successfully")
        return True

    except Exception as e:
        logger.error("Failed to initialize Sentry: %s", e)
        return False


def set_event_context(
    detail_type: Optional[str],
    pipeline_name: Optional[str] = None,
    stage_name: Optional[str] = None,
    state: Optional[str] = None,
    execution_id: Optional[str] = None,
) -> None:
    """
    Attach the inbound event to the current Sentry scope.

    Args:
        detail_type: EventBridge detail-type
        pipeline_name: Pipeline name
        stage_name: Stage name for stage events
        state: Reported state
        execution_id: Pipeline execution id
    """
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.set_context("pipeline_event", {
            "detail_type": detail_type,
            "pipeline": pipeline_name,
            "stage": stage_name,
            "state": state,
            "execution_id": execution_id,
        })

        if pipeline_name:
            sentry_sdk.set_tag("pipeline", pipeline_name)

    except Exception as e:
        logger.debug("Failed to set event context: %s", e)


def add_breadcrumb(
    message: str,
    category: str = "notifier",
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Add a breadcrumb to the current Sentry scope.

    Args:
        message: Breadcrumb message
        category: Category (notifier, slack, codepipeline)
        level: Level (debug, info, warning, error)
        data: Additional data
    """
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(
            message=message,
            category=category,
            level=level,
            data=data,
        )

    except Exception as e:
        logger.debug("Failed to add breadcrumb: %s", e)


def capture_exception(
    exception: BaseException,
    level: str = "error",
    tags: Optional[Dict[str, str]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Capture an exception and send to Sentry.

    Args:
        exception: The exception to capture
        level: Severity level (error, warning, info)
        tags: Additional tags
        extra: Additional context data

    Returns:
        Sentry event ID if captured, None otherwise
    """
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            scope.level = level

            if tags:
                for key, value in tags.items():
                    scope.set_tag(key, value)

            if extra:
                for key, value in extra.items():
                    scope.set_extra(key, value)

            return sentry_sdk.capture_exception(exception)

    except Exception as e:
        logger.debug("Failed to capture exception: %s", e)
        return None
