"""
VTTMerge - Speaker-tagged WebVTT merging

Parses WebVTT subtitle tracks, one per speaker, tags every cue with its
speaker and merges all tracks into a single track ordered by cue start time.

Features:
- Parse a compact WebVTT subset (header, timing lines, text lines)
- Tag cues with WebVTT voice spans (<v Speaker>text)
- Stable merge of any number of tracks by start time
- Load tracks from local files or HTTP(S) URLs

Example usage:
    >>> from vttmerge import SpeakerMerger
    >>>
    >>> merger = SpeakerMerger()
    >>> merger.add_from_source("alice.vtt", "Alice")
    >>> merger.add_from_source("bob.vtt", "Bob")
    >>> merger.save("merged.vtt")
"""

import logging

__version__ = "0.1.0"
__author__ = "VTTMerge Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from .errors import VTTMergeError, ParsingError, ConfigurationError, SourceError

# Data models
from .models import Timestamp, Timerange, Cue, SpeakerSource, MergeConfig

# Core utility functions
from .utils import timestamp_to_seconds, seconds_to_timestamp

# Tracks and merging
from .track import Track
from .loader import is_url, load_vtt_text, load_track
from .merger import SpeakerMerger, merge_speaker_tracks, merge_from_config

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Errors
    "VTTMergeError",
    "ParsingError",
    "ConfigurationError",
    "SourceError",

    # Models
    "Timestamp",
    "Timerange",
    "Cue",
    "SpeakerSource",
    "MergeConfig",

    # Utility functions
    "timestamp_to_seconds",
    "seconds_to_timestamp",

    # Tracks and merging
    "Track",
    "is_url",
    "load_vtt_text",
    "load_track",
    "SpeakerMerger",
    "merge_speaker_tracks",
    "merge_from_config",
]
