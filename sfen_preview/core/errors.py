"""
Errors raised while finding and decoding SFEN.
"""


class SfenError(ValueError):
    """Base class for SFEN failures."""


class SfenNotFoundError(SfenError):
    """The text contains no token shaped like an SFEN board."""

    def __init__(self, message: str = "string contains no SFEN"):
        super().__init__(message)


class MalformedSfenError(SfenError):
    """
    A candidate SFEN failed structural decoding.

    Attributes:
        field: Which SFEN field failed ("board", "turn" or "hands")
        reason: Human readable description of the failure
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"malformed SFEN {field}: {reason}")
