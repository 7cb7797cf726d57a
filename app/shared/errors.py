"""Error taxonomy for the memo service.

Every class carries the HTTP status and machine-readable code it maps to, so
route handlers can translate any of them with a single ``except`` clause.
"""


class MemoServiceError(Exception):
    status: int = 500
    code: str = "internal_error"
    default_message: str = "Unexpected error."

    def __init__(self, message: str | None = None, details: str | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(MemoServiceError):
    """Missing or empty title/content. Caller-correctable."""
    status = 400
    code = "invalid_input"
    default_message = "Title and content are required."


class ConfigurationError(MemoServiceError):
    """The generation credential is not configured. Operator-correctable."""
    status = 500
    code = "config_error"
    default_message = "Server configuration error: the generation API key is not set."


class UpstreamError(MemoServiceError):
    """The generation call failed or returned no text."""
    status = 500
    code = "upstream_failed"
    default_message = "Text generation failed."


class EmptyResultError(MemoServiceError):
    """The call succeeded but parsing produced nothing usable."""
    status = 500
    code = "empty_result"
    default_message = "Generation returned no usable result."
