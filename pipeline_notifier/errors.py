"""Error types raised while enriching and delivering notifications."""

from typing import Optional


class NotifierError(Exception):
    """Base class for all notifier failures."""
    pass


class ConfigurationError(NotifierError):
    """Raised when a required setting is missing."""
    pass


class InvalidEventError(NotifierError):
    """Raised when an inbound event lacks the fields a notification needs."""
    pass


class UpstreamQueryError(NotifierError):
    """Raised when a CodePipeline metadata call fails or returns inconsistent data."""
    pass


class MissingRevisionError(NotifierError):
    """Raised when an execution has no artifact revision to report."""
    pass


class StageNotFoundError(NotifierError):
    """Raised when a stage name is not declared in its pipeline."""

    def __init__(self, pipeline_name: str, stage_name: str):
        self.pipeline_name = pipeline_name
        self.stage_name = stage_name
        super().__init__(f"stage '{stage_name}' not found in pipeline '{pipeline_name}'")


class DeliveryError(NotifierError):
    """Raised when the webhook answers with anything but 200, or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int) -> "DeliveryError":
        return cls(f"status code: {status_code}", status_code=status_code)
