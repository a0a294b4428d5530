"""
Error tracking for the notifier: Sentry setup and monitoring decorators.
"""

from .decorators import capture_errors, track_performance
from .sentry import (
    add_breadcrumb,
    capture_exception,
    init_sentry,
    set_event_context,
)

__all__ = [
    'capture_errors',
    'track_performance',
    'init_sentry',
    'set_event_context',
    'add_breadcrumb',
    'capture_exception',
]
