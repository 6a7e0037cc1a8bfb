"""Custom exceptions for client_id extraction."""


class RestplayError(Exception):
    """Base exception for all restplay errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NilRequestError(RestplayError):
    """Raised when no request is given to extract from."""

    def __init__(self) -> None:
        super().__init__("restplay: cannot get client_id from nil request")


class InvalidBearerTokenError(RestplayError):
    """Raised when a Bearer token is present but malformed."""

    def __init__(self) -> None:
        super().__init__("restplay: invalid token")


class MissingClientIDError(RestplayError):
    """Raised when no source in the request carries a client_id."""

    def __init__(self) -> None:
        super().__init__("restplay: failed to find client_id in request")


class RequestBodyReadError(RestplayError):
    """Raised when the request body cannot be read."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"restplay: failed to read request body: {reason}",
            details={"reason": reason},
        )


class FormParseError(RestplayError):
    """Raised when a url-encoded form (body or query string) is malformed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            f"restplay: failed to parse request form from {source}: {reason}",
            details={"source": source, "reason": reason},
        )
