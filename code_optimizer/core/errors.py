class LLMError(Exception):
    """Base error for anything that goes wrong talking to the local model."""


class EndpointUnavailableOrFailed(LLMError):
    """Connection failure, timeout, or an error / malformed answer from the endpoint."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
