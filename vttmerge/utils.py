"""
Shared utility functions for VTTMerge.

Convenience conversions between timestamp text and seconds.
"""

from .models import Timestamp


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert a ':'-separated timestamp to seconds.

    Args:
        timestamp: Timestamp string, usually in HH:MM:SS.mmm format

    Returns:
        Time in seconds as float, truncated to milliseconds

    Raises:
        ParsingError: If the timestamp is malformed

    Example:
        >>> timestamp_to_seconds("00:01:30.500")
        90.5
    """
    return Timestamp.parse(timestamp).to_seconds()


def seconds_to_timestamp(seconds: float) -> str:
    """
    Convert seconds to HH:MM:SS.mmm format.

    Args:
        seconds: Non-negative time in seconds

    Returns:
        Timestamp string in HH:MM:SS.mmm format

    Example:
        >>> seconds_to_timestamp(90.5)
        '00:01:30.500'
    """
    return Timestamp.from_seconds(seconds).format()
