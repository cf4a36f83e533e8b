"""
errors – Exception hierarchy for netmime.

Only parsing raises; lookups report a miss as ``None`` and pattern matching
reports malformed input as ``False``.
"""


class MimeError(Exception):
    """Base class for every error raised by netmime."""


class MimeParseError(MimeError, ValueError):
    """A MIME type string could not be parsed."""


class NotATokenError(MimeParseError):
    """The type string is not ``token/token`` per the HTTP grammar."""

    def __init__(self, type_string: str) -> None:
        super().__init__(f"'{type_string}' is not a valid 'type/subtype' token pair")
        self.type_string = type_string
