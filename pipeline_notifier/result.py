"""Result type for notification operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from .errors import NotifierError

T = TypeVar('T')


class ResultStatus(Enum):
    """Status of a routing or delivery operation."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class Result(Generic[T]):
    """Standard result type for delivery and routing."""
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error: Optional[NotifierError] = None

    @staticmethod
    def success(data: T, message: str = "") -> 'Result[T]':
        """Create a success result."""
        return Result(ResultStatus.SUCCESS, data, message)

    @staticmethod
    def skipped(message: str) -> 'Result[None]':
        """Create a skipped result."""
        return Result(ResultStatus.SKIPPED, None, message)

    @staticmethod
    def failure(error: NotifierError) -> 'Result[None]':
        """Create an error result carrying the failure."""
        return Result(ResultStatus.ERROR, None, str(error), error)

    @property
    def is_success(self) -> bool:
        """Check if result is successful."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        """Check if result was skipped."""
        return self.status == ResultStatus.SKIPPED

    @property
    def is_error(self) -> bool:
        """Check if result is an error."""
        return self.status == ResultStatus.ERROR

    def unwrap(self) -> 'Result[T]':
        """Raise the carried error for error results, otherwise return self."""
        if self.is_error:
            raise self.error or NotifierError(self.message)
        return self
