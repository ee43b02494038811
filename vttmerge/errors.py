"""
Exception types for VTTMerge.

Parsing problems are reported with a single error kind that carries what was
expected and the literal text that was found instead.
"""


class VTTMergeError(Exception):
    """Base error for the VTTMerge package."""


class ParsingError(VTTMergeError):
    """
    Raised when WebVTT text does not match the supported grammar.

    Attributes:
        expected: Human-readable description of what the parser expected
        found: The literal text actually found (empty string if nothing was found)
    """

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"parsing error: expected {expected}, got '{found}'")


class ConfigurationError(VTTMergeError, ValueError):
    """Raised when the speakers and sources given to a merge do not pair up."""


class SourceError(VTTMergeError):
    """Raised when one input source fails to load or parse."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"while parsing {source}: {cause}")
