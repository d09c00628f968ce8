from enum import Enum, auto


class ErrorKind(Enum):
    INVALID_URL = auto()
    INVALID_IDENTIFIER = auto()
    UNREACHABLE = auto()
    NOT_FOUND = auto()
    FORBIDDEN = auto()
    UPSTREAM_ERROR = auto()
    MALFORMED_RESPONSE = auto()
    NO_EXTRACTABLE_LINKS = auto()
    UNRESOLVABLE_LINK = auto()


class ErrorCategory(Enum):
    BAD_REQUEST = auto()
    INTERNAL = auto()


class ResolveError(Exception):
    """Failure of a link resolution.

    `message` is safe to show to the user. `detail` is only meant for the
    logs (identifiers, status codes, payload excerpts).
    """

    kind = None
    category = ErrorCategory.INTERNAL
    default_message = "Unable to resolve direct links"

    def __init__(self, detail=None, message=None):
        self.detail = detail
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidUrlError(ResolveError):
    kind = ErrorKind.INVALID_URL
    category = ErrorCategory.BAD_REQUEST
    default_message = "Invalid URL format"


class InvalidIdentifierError(ResolveError):
    kind = ErrorKind.INVALID_IDENTIFIER
    category = ErrorCategory.BAD_REQUEST
    default_message = "Invalid album/image ID format"


class UnreachableError(ResolveError):
    kind = ErrorKind.UNREACHABLE
    default_message = "Unable to reach Imgur. Please try again shortly."


class UpstreamError(ResolveError):
    kind = ErrorKind.UPSTREAM_ERROR
    default_message = "Failed to fetch image data"

    def __init__(self, status_code, detail=None, message=None):
        self.status_code = status_code
        if detail is None:
            detail = f"Status: {status_code}"
        super().__init__(detail, message)


class NotFoundError(UpstreamError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Album or image not found. Please check the URL."


class ForbiddenError(UpstreamError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Access forbidden. The album may be private or deleted."


class MalformedResponseError(ResolveError):
    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = "Unable to parse Imgur response as JSON"


class NoExtractableLinksError(ResolveError):
    kind = ErrorKind.NO_EXTRACTABLE_LINKS
    default_message = "Unable to extract images from album."


class UnresolvableLinkError(ResolveError):
    kind = ErrorKind.UNRESOLVABLE_LINK
    default_message = "Unable to extract direct image link."


STATUS_ERRORS = {
    404: NotFoundError,
    403: ForbiddenError,
}


def error_for_status(status_code):
    error_cls = STATUS_ERRORS.get(status_code, UpstreamError)
    return error_cls(status_code)
