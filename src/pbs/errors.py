"""
Adapter error types.

Errors raised while building or interpreting bidder requests are collected
and handed back to the auction alongside any successful results, so each
type carries a numeric code the host uses to attribute the failure.
"""


class ErrorCode:
    """Numeric error codes reported to the auction host."""

    BAD_INPUT = 3
    BAD_SERVER_RESPONSE = 4
    UNKNOWN = 999


class AdapterError(Exception):
    """Base adapter error. Also used for internal failures."""

    code = ErrorCode.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class BadInput(AdapterError):
    """The request sent to the bidder was invalid (caller's fault)."""

    code = ErrorCode.BAD_INPUT


class BadServerResponse(AdapterError):
    """The bidder returned something we could not use (bidder's fault)."""

    code = ErrorCode.BAD_SERVER_RESPONSE


class InvalidAdapterConfigError(ValueError):
    """Raised when an adapter is configured with unusable settings."""
