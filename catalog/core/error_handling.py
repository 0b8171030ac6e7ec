"""
Centralized error types for archive callers.

The archive operations themselves never raise for a rejected request;
they return a result code. This module turns those codes into a
standard exception hierarchy for callers that would rather handle
failures with ``try``/``except``, and provides categorization and
logging helpers for those exceptions.
"""

from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from catalog.core.logging import archive_logger
from catalog.src.schema.materials import AddResult, UpdateResult


class ArchiveError(Exception):
    """Base archive exception with error code and context."""

    def __init__(
        self,
        detail: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code
        self.context = context or {}


# Pre-defined common errors
class CapacityExceededError(ArchiveError):
    def __init__(self, capacity: Optional[int] = None):
        super().__init__(
            detail="Archive capacity exceeded",
            error_code="CAPACITY_EXCEEDED",
            context={"capacity": capacity} if capacity is not None else {}
        )


class DuplicateTitleError(ArchiveError):
    def __init__(self, title: Optional[str] = None):
        super().__init__(
            detail="A material with this title already exists",
            error_code="DUPLICATE_TITLE",
            context={"title": title} if title is not None else {}
        )


class MaterialNotFoundError(ArchiveError):
    def __init__(self, title: Optional[str] = None):
        super().__init__(
            detail="Material not found",
            error_code="MATERIAL_NOT_FOUND",
            context={"title": title} if title is not None else {}
        )


class InvalidArgumentError(ArchiveError):
    def __init__(self, argument: str):
        super().__init__(
            detail=f"Invalid {argument}",
            error_code=f"INVALID_{argument.upper()}",
            context={"argument": argument}
        )


class InvalidSubtypeError(ArchiveError):
    def __init__(self, material_type: str, title: Optional[str] = None):
        context = {"material_type": material_type}
        if title is not None:
            context["title"] = title
        super().__init__(
            detail=f"Invalid {material_type} subtype",
            error_code=f"INVALID_{material_type.upper()}_SUBTYPE",
            context=context
        )


class InvalidMaterialTypeError(ArchiveError):
    def __init__(self, title: Optional[str] = None):
        super().__init__(
            detail="Invalid material type",
            error_code="INVALID_MATERIAL_TYPE",
            context={"title": title} if title is not None else {}
        )


def raise_for_result(
    result: Union[AddResult, UpdateResult],
    title: Optional[str] = None,
    capacity: Optional[int] = None,
) -> None:
    """Raise the exception matching a failed add or update result.

    ``AddResult.FAILED`` doesn't say whether the archive was full or the
    title taken; pass ``capacity`` when the caller knows the archive was
    full to get ``CapacityExceededError``, otherwise ``DuplicateTitleError``
    is raised.
    """
    if result.ok:
        return

    if result is AddResult.FAILED:
        if capacity is not None:
            raise CapacityExceededError(capacity)
        raise DuplicateTitleError(title)

    if result is UpdateResult.INVALID_ARCHIVE:
        raise InvalidArgumentError("archive")
    if result is UpdateResult.INVALID_TITLE:
        raise InvalidArgumentError("title")
    if result is UpdateResult.NOT_FOUND:
        raise MaterialNotFoundError(title)
    if result is UpdateResult.INVALID_BOOK_SUBTYPE:
        raise InvalidSubtypeError("book", title)
    if result is UpdateResult.INVALID_JOURNAL_SUBTYPE:
        raise InvalidSubtypeError("journal", title)
    if result is UpdateResult.INVALID_NEWSPAPER_SUBTYPE:
        raise InvalidSubtypeError("newspaper", title)
    raise InvalidMaterialTypeError(title)


class ErrorCategory:
    """Error categorization for monitoring."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    CAPACITY = "capacity"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


def categorize_exception(exception: Exception) -> str:
    """Categorize exception for monitoring purposes."""

    if isinstance(exception, CapacityExceededError):
        return ErrorCategory.CAPACITY
    elif isinstance(exception, DuplicateTitleError):
        return ErrorCategory.CONFLICT
    elif isinstance(exception, MaterialNotFoundError):
        return ErrorCategory.NOT_FOUND
    elif isinstance(exception, (ArchiveError, ValidationError)):
        return ErrorCategory.VALIDATION
    else:
        return ErrorCategory.INTERNAL


def log_exception(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None
) -> str:
    """Log exception with its category and context; returns the category."""

    error_category = categorize_exception(exception)

    log_context = {
        "event_type": "archive_error",
        "error_category": error_category,
        "exception_type": exception.__class__.__name__,
        "error_code": getattr(exception, "error_code", None),
        **getattr(exception, "context", {}),
        **(context or {})
    }

    if error_category == ErrorCategory.INTERNAL:
        archive_logger.error(
            f"System exception: {str(exception)}",
            extra=log_context,
            exc_info=exception
        )
    else:
        archive_logger.warning(
            f"Archive exception: {str(exception)}",
            extra=log_context
        )
    return error_category
