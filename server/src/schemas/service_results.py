"""
Structured service result types for clean error handling at the API boundary.

Services return structured results instead of raising for expected
failures (an undecodable chat link, an out-of-range skin id), so the API
layer can map them to HTTP errors in one place.
"""

from dataclasses import dataclass
from typing import Optional, Generic, List, TypeVar

T = TypeVar('T')


@dataclass
class ServiceResult(Generic[T]):
    """
    Generic service result with structured error information.
    """
    success: bool
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_with_data(cls, data: T, message: str = "Operation successful") -> 'ServiceResult[T]':
        """Create successful result with data."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def failure(cls, message: str, error_code: Optional[str] = None) -> 'ServiceResult[T]':
        """Create failure result with error information."""
        return cls(success=False, data=None, message=message, error_code=error_code)


@dataclass
class TemplateServiceResult(ServiceResult[T]):
    """Fashion template specific result extensions."""
    unresolved_skin_ids: Optional[List[int]] = None  # Skins the catalog did not return
    unresolved_color_ids: Optional[List[int]] = None  # Dyes the catalog did not return

    @classmethod
    def success_with_resolution(
        cls,
        data: T,
        unresolved_skin_ids: List[int],
        unresolved_color_ids: List[int],
        message: str = "Template resolved",
    ) -> 'TemplateServiceResult[T]':
        """Create successful result noting which ids fell back to placeholders."""
        return cls(
            success=True,
            data=data,
            message=message,
            unresolved_skin_ids=unresolved_skin_ids,
            unresolved_color_ids=unresolved_color_ids,
        )


# Error codes for consistent client-side error handling
class ServiceErrorCodes:
    """Standardized error codes across all services."""

    # Chat link errors
    UNDECODABLE_LINK = "UNDECODABLE_LINK"
    SKIN_ID_OUT_OF_RANGE = "SKIN_ID_OUT_OF_RANGE"
