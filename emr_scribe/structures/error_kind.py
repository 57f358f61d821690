from enum import Enum
from http import HTTPStatus


class ErrorKind(Enum):
    INPUT_MISSING = "inputMissing"
    CONFIGURATION_MISSING = "configurationMissing"
    UPSTREAM_UNAVAILABLE = "upstreamUnavailable"
    UPSTREAM_MALFORMED = "upstreamMalformed"
    SHAPE_INVALID = "shapeInvalid"

    def http_status(self) -> HTTPStatus:
        if self == ErrorKind.INPUT_MISSING:
            return HTTPStatus.BAD_REQUEST
        if self == ErrorKind.CONFIGURATION_MISSING:
            return HTTPStatus.INTERNAL_SERVER_ERROR
        # transport, unparsable and invalid shape are the same failure for the caller
        return HTTPStatus.BAD_GATEWAY
