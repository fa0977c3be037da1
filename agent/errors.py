"""Error taxonomy for the generation pipeline.

Validation errors are raised before any LLM call. Service and parse errors
are raised per platform and get wrapped into PlatformGenerationError by the
orchestrator, which aborts the whole request.
"""
from enum import Enum


class ValidationFailure(str, Enum):
    EMPTY_CONTENT = "empty_content"
    TOO_LONG = "too_long"
    NO_PLATFORMS_SELECTED = "no_platforms_selected"
    UNRECOGNIZED_PLATFORM = "unrecognized_platform"


class RepurposeError(Exception):
    """Base for every error this package raises on purpose."""


class InputValidationError(RepurposeError):
    def __init__(self, failure: ValidationFailure, message: str):
        super().__init__(message)
        self.failure = failure
        self.message = message


class ServiceCallError(RepurposeError):
    """The LLM provider could not be reached or rejected the request."""


class MissingCredentialError(ServiceCallError):
    pass


class PayloadParseError(RepurposeError):
    """No usable JSON payload could be pulled out of an LLM response."""


class PlatformGenerationError(RepurposeError):
    def __init__(self, platform: str, cause: Exception):
        self.platform = platform
        self.cause = cause
        super().__init__(f"Failed to generate content for {platform}: {str(cause) or 'Unknown error'}")
