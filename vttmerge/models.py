"""
Data models for VTTMerge.

Defines the time-coded value types of the supported WebVTT subset and the
configuration objects consumed by the merge pipeline.
"""

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from .errors import ConfigurationError, ParsingError

ARROW = "-->"

# Largest representable time: 2**64 - 1 whole seconds
MAX_MILLISECONDS = (2 ** 64 - 1) * 1000 + 999

# Seconds may carry a fraction and an exponent; larger units are plain integers
_SECONDS_PATTERN = re.compile(r'\+?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)
_INTEGER_PATTERN = re.compile(r'\+?\d+', re.ASCII)


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time since track start, with millisecond resolution."""
    milliseconds: int

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """
        Parse a ':'-separated timestamp such as ``01:02:03.456``.

        The last component is a decimal number of seconds (truncated to whole
        milliseconds). Every earlier component is an integer worth 60**n seconds,
        where n is its distance from the seconds component, so any number of
        components is accepted.

        Args:
            text: Timestamp text

        Returns:
            Parsed Timestamp

        Raises:
            ParsingError: If any component is not a valid number

        Example:
            >>> Timestamp.parse("1:30.5").milliseconds
            90500
        """
        segments = text.split(':')
        segments.reverse()

        seconds_text = segments[0]
        if not _SECONDS_PATTERN.fullmatch(seconds_text) or not math.isfinite(float(seconds_text)):
            raise ParsingError("a decimal number", seconds_text)
        try:
            milliseconds = int(Decimal(seconds_text) * 1000)
        except ArithmeticError:
            raise ParsingError("a decimal number", seconds_text)
        if milliseconds > MAX_MILLISECONDS:
            raise ParsingError("a timestamp", text)

        for index, segment in enumerate(segments[1:], start=1):
            if not _INTEGER_PATTERN.fullmatch(segment):
                raise ParsingError("a number", segment)
            try:
                value = int(segment)
            except ValueError:
                raise ParsingError("a number", segment)
            if value:
                milliseconds += 60 ** index * value * 1000
            if milliseconds > MAX_MILLISECONDS:
                raise ParsingError("a timestamp", text)

        return cls(milliseconds)

    @classmethod
    def from_seconds(cls, seconds: float) -> "Timestamp":
        if seconds < 0:
            raise ValueError(f"Timestamp cannot be negative: {seconds}")
        return cls(int(Decimal(str(seconds)) * 1000))

    def to_seconds(self) -> float:
        return self.milliseconds / 1000

    def format(self) -> str:
        """Render as HH:MM:SS.mmm; hours are not wrapped."""
        total_seconds, millis = divmod(self.milliseconds, 1000)
        hours = total_seconds // 3600
        minutes = total_seconds // 60 % 60
        seconds = total_seconds % 60
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Timerange:
    """Start and end of a cue. ``start <= end`` is not enforced."""
    start: Timestamp
    end: Timestamp

    @classmethod
    def parse(cls, line: str) -> "Timerange":
        """
        Parse a cue timing line of the form ``<start> --> <end>``.

        Tokens are separated by single spaces. Anything after the end time
        is ignored.

        Raises:
            ParsingError: If a token is missing, the arrow is wrong, or a
                timestamp is malformed
        """
        tokens = line.split(' ')

        if not tokens[0]:
            raise ParsingError("a starting time", "")
        start = Timestamp.parse(tokens[0])

        arrow = tokens[1] if len(tokens) > 1 else ""
        if arrow != ARROW:
            raise ParsingError(ARROW, arrow)

        if len(tokens) < 3:
            raise ParsingError("a end time", "")
        end = Timestamp.parse(tokens[2])

        return cls(start, end)

    def format(self) -> str:
        return f"{self.start} {ARROW} {self.end}"

    def __str__(self) -> str:
        return self.format()


@dataclass
class Cue:
    """One timed line of subtitle text, optionally attributed to a speaker."""
    timerange: Timerange
    text: str
    speaker: Optional[str] = None

    @classmethod
    def from_line(cls, timerange: Timerange, line: str) -> "Cue":
        """Create an untagged cue for one text line."""
        return cls(timerange, line)

    @property
    def start(self) -> Timestamp:
        return self.timerange.start

    def format(self) -> str:
        """
        Render the cue as an output block.

        The block starts with an empty line, which separates consecutive
        cues in the rendered document.

        Example:
            >>> cue = Cue(Timerange.parse("00:00:01.000 --> 00:00:02.000"), "hello", "A")
            >>> cue.format()
            '\\n00:00:01.000 --> 00:00:02.000\\n<v A>hello\\n'
        """
        prefix = f"<v {self.speaker}>" if self.speaker is not None else ""
        return f"\n{self.timerange}\n{prefix}{self.text}\n"

    def __str__(self) -> str:
        return self.format()


@dataclass
class SpeakerSource:
    """One input of a merge: the speaker label and where to read the track from."""
    speaker: str
    source: str  # File path or http(s) URL


@dataclass
class MergeConfig:
    """Configuration for a speaker merge run."""
    sources: List[SpeakerSource] = field(default_factory=list)
    output_path: Optional[str] = None
    timeout: int = 30
    verify_ssl: bool = True

    @classmethod
    def from_lists(
        cls,
        files: Sequence[str],
        speakers: Sequence[str],
        **kwargs
    ) -> "MergeConfig":
        """
        Pair files with speakers in order.

        Raises:
            ConfigurationError: If the two sequences differ in length
        """
        if len(files) != len(speakers):
            raise ConfigurationError(
                "differing number of speakers and files. every file needs one speaker defined"
            )
        sources = [SpeakerSource(speaker, path) for speaker, path in zip(speakers, files)]
        return cls(sources=sources, **kwargs)
