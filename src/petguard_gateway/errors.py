from __future__ import annotations


class GatewayError(Exception):
    """Base class for every error raised by the gateway."""


class UnknownAction(GatewayError):
    def __init__(self, action: object):
        self.action = action
        super().__init__(f"Unknown action: {action}")


class ValidationFailure(GatewayError):
    """The request body or an action payload is missing a required field."""


class BackendCallFailure(GatewayError):
    """The generative backend could not be reached or rejected the call."""


class MalformedStructuredOutput(GatewayError):
    """Backend text was expected to hold a JSON object but does not."""
