"""
WebVTT track parsing, ordering and serialization for VTTMerge.

A Track is the ordered list of cues read from, or written to, one WebVTT
document. Only a small subset of WebVTT is understood: a ``WEBVTT`` header
followed by blocks of one timing line and one or more text lines.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .errors import ParsingError
from .models import Cue, Timerange

logger = logging.getLogger(__name__)

HEADER = "WEBVTT"


def _iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of text, dropping the line terminator (``\\n`` or ``\\r\\n``)."""
    lines = text.split('\n')
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith('\r') else line


@dataclass
class Track:
    """An ordered sequence of cues. Duplicates and overlaps are kept as-is."""
    cues: List[Cue] = field(default_factory=list)

    @classmethod
    def parse(cls, content: str) -> "Track":
        """
        Parse a WebVTT document into a Track.

        Every non-blank line that follows a timing line becomes its own cue
        sharing that timing; lines of one block are not joined. A blank line
        ends the block.

        Args:
            content: WebVTT document text

        Returns:
            Parsed Track with untagged cues in document order

        Raises:
            ParsingError: If the header is missing or any timing line is malformed

        Example:
            >>> track = Track.parse("WEBVTT\\n\\n00:00:01.000 --> 00:00:02.000\\nhello\\n")
            >>> len(track)
            1
        """
        if not content.startswith(HEADER):
            first_line = next(_iter_lines(content), "")
            raise ParsingError(HEADER, first_line)

        cues = []
        timerange: Optional[Timerange] = None
        for line in _iter_lines(content[len(HEADER):]):
            if not line.strip():
                timerange = None
                continue
            if timerange is None:
                timerange = Timerange.parse(line)
                continue
            cues.append(Cue.from_line(timerange, line))

        logger.debug(f"Parsed {len(cues)} cues")
        return cls(cues)

    def format(self) -> str:
        """Serialize the track as a WebVTT document."""
        return HEADER + "\n" + "".join(cue.format() for cue in self.cues)

    def sort(self) -> None:
        """Stable in-place sort by cue start time."""
        self.cues.sort(key=lambda cue: cue.start)

    def is_sorted(self) -> bool:
        return all(a.start <= b.start for a, b in zip(self.cues, self.cues[1:]))

    def set_speaker_for_all_lines(self, speaker: str) -> None:
        """Overwrite the speaker of every cue."""
        for cue in self.cues:
            cue.speaker = speaker

    def merge_with(self, other: "Track") -> None:
        """
        Move all cues of ``other`` into this track and re-sort by start time.

        Cues sharing a start time keep their append order, so this track's
        cues come before ``other``'s. ``other`` is left empty.
        """
        self.cues.extend(other.cues)
        other.cues = []
        self.sort()

    def copy(self) -> "Track":
        """Return a snapshot that is unaffected by later mutation of this track."""
        return Track([Cue(cue.timerange, cue.text, cue.speaker) for cue in self.cues])

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self) -> Iterator[Cue]:
        return iter(self.cues)

    def __str__(self) -> str:
        return self.format()
