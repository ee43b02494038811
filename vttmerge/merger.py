"""
Speaker merging for VTTMerge.

Combines several WebVTT tracks, one per speaker, into a single track ordered
by cue start time. Every cue is tagged with its track's speaker so the merged
document renders each line as ``<v Speaker>text``.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .errors import ParsingError, SourceError
from .loader import load_track
from .models import MergeConfig
from .track import Track

logger = logging.getLogger(__name__)


class SpeakerMerger:
    """
    Accumulates speaker-tagged tracks into one time-ordered track.

    Tracks are folded in the order they are added. Cues with identical start
    times keep that order, so earlier sources win ties.
    """

    def __init__(self):
        """Initialize merger with an empty accumulator track."""
        self.track = Track()
        self.unsorted_sources: List[str] = []

    def add_track(self, track: Track, speaker: str, source: str = "<track>") -> int:
        """
        Tag a parsed track with a speaker and merge it into the accumulator.

        A track that was not already in start-time order is sorted and
        reported with a warning; this never fails the merge.

        Args:
            track: Parsed track; its cues are moved into the accumulator
            speaker: Speaker label applied to every cue
            source: Name used in diagnostics

        Returns:
            Number of cues merged
        """
        original = track.copy()
        track.sort()
        if track != original:
            logger.warning(f"unsorted: {source}")
            self.unsorted_sources.append(source)

        track.set_speaker_for_all_lines(speaker)
        count = len(track)
        self.track.merge_with(track)

        logger.info(f"Merged {count} cues for speaker {speaker!r} from {source}")
        return count

    def add_from_content(self, vtt_content: str, speaker: str, source: str = "<content>") -> int:
        """
        Parse WebVTT content and merge it under a speaker.

        Raises:
            SourceError: If the content cannot be parsed
        """
        try:
            track = Track.parse(vtt_content)
        except ParsingError as e:
            raise SourceError(source, e) from e
        return self.add_track(track, speaker, source)

    def add_from_source(
        self,
        source: str,
        speaker: str,
        timeout: int = 30,
        verify_ssl: bool = True
    ) -> int:
        """
        Load a file or URL and merge it under a speaker.

        Raises:
            SourceError: If the source cannot be read or parsed
        """
        track = load_track(source, timeout=timeout, verify_ssl=verify_ssl)
        return self.add_track(track, speaker, source)

    def get_merged_content(self) -> str:
        """Get the merged WebVTT document."""
        return self.track.format()

    def save(self, output_path: str) -> None:
        """
        Save merged WebVTT content to file.

        Args:
            output_path: Path to save the merged VTT file
        """
        content = self.get_merged_content()

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)

        logger.info(f"Saved merged VTT with {len(self.track)} cues to {output_path}")

    def clear(self) -> None:
        """Clear all merged cues and diagnostics."""
        self.track = Track()
        self.unsorted_sources = []

    def get_cue_count(self) -> int:
        """Get the number of cues currently merged."""
        return len(self.track)


def merge_speaker_tracks(pairs: Iterable[Tuple[str, str]]) -> str:
    """
    Merge already-loaded documents, one per speaker.

    Args:
        pairs: (speaker, vtt_content) pairs in merge order

    Returns:
        Merged WebVTT document

    Raises:
        SourceError: On the first document that fails to parse; sources are
            named ``#1``, ``#2``, ... in diagnostics

    Example:
        >>> a = "WEBVTT\\n\\n00:00:05.000 --> 00:00:06.000\\nlater\\n"
        >>> b = "WEBVTT\\n\\n00:00:01.000 --> 00:00:02.000\\nsooner\\n"
        >>> print(merge_speaker_tracks([("A", a), ("B", b)]))
        WEBVTT
        <BLANKLINE>
        00:00:01.000 --> 00:00:02.000
        <v B>sooner
        <BLANKLINE>
        00:00:05.000 --> 00:00:06.000
        <v A>later
        <BLANKLINE>
    """
    merger = SpeakerMerger()
    for index, (speaker, content) in enumerate(pairs, start=1):
        merger.add_from_content(content, speaker, source=f"#{index}")
    return merger.get_merged_content()


def merge_from_config(config: MergeConfig, merger: Optional[SpeakerMerger] = None) -> SpeakerMerger:
    """
    Run a merge described by a MergeConfig.

    Sources are loaded and merged in order; the first failure aborts the run.
    When ``config.output_path`` is set the merged document is also saved there.

    Args:
        config: Merge configuration
        merger: Optional merger to fold into (default: a new one)

    Returns:
        The merger holding the merged track
    """
    merger = merger or SpeakerMerger()

    logger.info(f"Merging {len(config.sources)} sources")
    for item in config.sources:
        merger.add_from_source(
            item.source,
            item.speaker,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl
        )

    if config.output_path:
        merger.save(config.output_path)

    return merger
