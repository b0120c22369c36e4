"""Error models"""

from enum import Enum
from typing import Optional
import uuid


class ErrorCode(str, Enum):
    """Error codes"""
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    INVALID_PROMPT = "INVALID_PROMPT"
    GENERATION_FAILED = "GENERATION_FAILED"


class ApplicationError(Exception):
    """Base class for every error the generation flow raises on purpose"""

    code: ErrorCode = ErrorCode.GENERATION_FAILED

    def __init__(self, message: str, retryable: bool = False, hint: Optional[str] = None):
        self.error_id = str(uuid.uuid4())
        self.message = message
        self.retryable = retryable
        self.hint = hint
        super().__init__(self.message)

    def model_dump(self):
        """Return dict representation for logs"""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "message": self.message,
            "hint": self.hint,
            "retryable": self.retryable,
        }

    @property
    def http_status(self) -> int:
        """Map error code to HTTP status"""
        mapping = {
            ErrorCode.INVALID_PROMPT: 400,
            ErrorCode.CONFIGURATION_ERROR: 500,
            ErrorCode.UPSTREAM_ERROR: 500,
            ErrorCode.MALFORMED_RESPONSE: 500,
            ErrorCode.GENERATION_FAILED: 500,
        }
        return mapping.get(self.code, 500)


class ConfigurationError(ApplicationError):
    """Required configuration (the gateway API key) is missing"""
    code = ErrorCode.CONFIGURATION_ERROR


class UpstreamError(ApplicationError):
    """Network failure or non-2xx status from the AI gateway"""
    code = ErrorCode.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)
        self.status_code = status_code


class MalformedResponseError(ApplicationError):
    """The gateway answered, but not with the structured data we asked for"""
    code = ErrorCode.MALFORMED_RESPONSE


class PromptValidationError(ApplicationError):
    """Blank business description"""
    code = ErrorCode.INVALID_PROMPT
