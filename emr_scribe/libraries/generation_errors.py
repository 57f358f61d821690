"""Failures of a generation request, one class per error kind."""

from emr_scribe.structures.error_kind import ErrorKind


class GenerationError(Exception):
    """Base class of the generation failures.

    The message is for the logs; `user_message` is what may be shown to the end user.
    """

    kind: ErrorKind = ErrorKind.UPSTREAM_UNAVAILABLE
    user_message = "the structured record could not be generated, please try again"

    def __init__(self, message: str, payload: object = None):
        super().__init__(message)
        self.payload = payload


class InputMissingError(GenerationError):
    kind = ErrorKind.INPUT_MISSING
    user_message = "conversation is required"


class ConfigurationMissingError(GenerationError):
    kind = ErrorKind.CONFIGURATION_MISSING
    user_message = "the service is not configured"


class UpstreamUnavailableError(GenerationError):
    kind = ErrorKind.UPSTREAM_UNAVAILABLE


class UpstreamMalformedError(GenerationError):
    kind = ErrorKind.UPSTREAM_MALFORMED


class ShapeInvalidError(GenerationError):
    kind = ErrorKind.SHAPE_INVALID

    def __init__(self, message: str, payload: object = None, errors: list[str] | None = None):
        super().__init__(message, payload)
        self.errors = errors or []
