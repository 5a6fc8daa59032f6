"""
Custom Exception Classes for the Resume Skill Checker
"""
from typing import Any, Dict, Optional
from fastapi import HTTPException


class SkillCheckerBaseException(Exception):
    """Base exception for the Resume Skill Checker"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/response"""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ParseError(SkillCheckerBaseException):
    """Raised when document bytes cannot be parsed as a supported document"""

    def __init__(self, message: str, document_type: str = "pdf", **kwargs):
        details = kwargs.pop('details', None) or {}
        if document_type:
            details['document_type'] = document_type
        super().__init__(message, error_code="PARSE_ERROR", details=details, **kwargs)


class InvalidArgumentError(SkillCheckerBaseException):
    """Raised when a keyword list or skill selection is empty or unusable"""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs):
        details = kwargs.pop('details', None) or {}
        if field:
            details['field'] = field
        if value is not None:
            details['invalid_value'] = str(value)
        super().__init__(message, error_code="INVALID_ARGUMENT", details=details, **kwargs)


class NoFileSelectedError(SkillCheckerBaseException):
    """Raised when a scan is requested before any document was uploaded"""

    def __init__(self, message: str = "Please upload a resume before scanning", session_id: Optional[str] = None, **kwargs):
        details = kwargs.pop('details', None) or {}
        if session_id:
            details['session_id'] = session_id
        super().__init__(message, error_code="NO_FILE_SELECTED", details=details, **kwargs)


class SessionNotFoundError(SkillCheckerBaseException):
    """Raised when a scan session id is unknown"""

    def __init__(self, session_id: str, **kwargs):
        details = kwargs.pop('details', None) or {}
        details['session_id'] = session_id
        super().__init__(f"Session {session_id} not found", error_code="SESSION_NOT_FOUND", details=details, **kwargs)


class UploadTooLargeError(SkillCheckerBaseException):
    """Raised when an uploaded document exceeds the configured size limit"""

    def __init__(self, size: int, limit: int, **kwargs):
        details = kwargs.pop('details', None) or {}
        details['size_bytes'] = size
        details['limit_bytes'] = limit
        super().__init__(
            f"Uploaded file is {size} bytes, the limit is {limit} bytes",
            error_code="UPLOAD_TOO_LARGE",
            details=details,
            **kwargs
        )


# HTTP Exception Mapping
def map_to_http_exception(exc: SkillCheckerBaseException) -> HTTPException:
    """Map custom exceptions to HTTP exceptions"""

    status_code_mapping = {
        InvalidArgumentError: 400,
        NoFileSelectedError: 400,
        SessionNotFoundError: 404,
        UploadTooLargeError: 413,
        ParseError: 422,
    }

    status_code = status_code_mapping.get(type(exc), 500)

    detail = {
        "error": exc.to_dict(),
        "message": exc.message
    }

    return HTTPException(status_code=status_code, detail=detail)


class ExceptionContext:
    """Context manager for handling exceptions with additional context

    Exceptions from this package pass through untouched; anything else is
    wrapped in ``wrap_as`` and chained to the original.
    """

    def __init__(self, operation: str, logger=None, wrap_as=ParseError, **context):
        self.operation = operation
        self.logger = logger
        self.wrap_as = wrap_as
        self.context = context

    def __enter__(self):
        if self.logger:
            self.logger.debug(f"Starting operation: {self.operation}", extra=self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            if self.logger:
                self.logger.debug(f"Operation completed: {self.operation}", extra=self.context)
            return False

        # GeneratorExit, KeyboardInterrupt and friends
        if not isinstance(exc_val, Exception):
            return False

        if self.logger:
            self.logger.error(
                f"Operation failed: {self.operation} - {exc_val}",
                extra={**self.context, "exception_type": exc_type.__name__}
            )

        if isinstance(exc_val, SkillCheckerBaseException):
            return False

        raise self.wrap_as(
            f"{self.operation} failed: {exc_val or exc_type.__name__}",
            details=dict(self.context),
            cause=exc_val
        ) from exc_val
