"""Error taxonomy for the chat pipeline.

Only ClientInputError ever reaches the user as a 4xx. Upstream data errors
degrade to empty data, backend errors move the invoker to the next model,
and TotalBackendFailure becomes a soft-fail 200 response.
"""


class ChatError(Exception):
    """Base class for pipeline errors."""


class ClientInputError(ChatError):
    """Malformed or missing request fields."""


class UpstreamDataError(ChatError):
    """A sports-data provider call failed or returned an unusable body."""


class BackendInvocationError(ChatError):
    """A single text-generation backend failed."""

    def __init__(self, model: str, message: str):
        super().__init__(f"{model}: {message}")
        self.model = model


class TotalBackendFailure(ChatError):
    """Every backend from the cursor to the end of the list failed."""

    def __init__(self, errors: list[BackendInvocationError]):
        detail = "; ".join(str(e) for e in errors) or "no backends configured"
        super().__init__(f"All AI models failed. {detail}")
        self.errors = errors
