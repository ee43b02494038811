"""
Command-line interface for VTTMerge.

Usage:
    vttmerge alice.vtt bob.vtt --speakers Alice,Bob > merged.vtt
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import ConfigurationError, SourceError
from .merger import merge_from_config
from .models import MergeConfig

logger = logging.getLogger(__name__)

_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once with a consistent, readable format.

    Args:
        level: Optional log level name (e.g., "INFO", "DEBUG"). Defaults to
               WARNING so unsorted-input warnings are still shown.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    _CONFIGURED = True


def _split_speakers(value: str) -> List[str]:
    return value.split(',')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vttmerge",
        description="Merge WebVTT files into one time-ordered track, tagging each file's cues with a speaker",
    )
    parser.add_argument("files", nargs="+", help="WebVTT files or http(s) URLs, one per speaker")
    parser.add_argument("--speakers", type=_split_speakers, action="extend", required=True,
                        help="Comma-separated speaker names, in the same order as the files")
    parser.add_argument("-o", "--output", default=None, help="Write the merged track to this file instead of stdout")
    parser.add_argument("--timeout", type=int, default=30, help="Download timeout in seconds for URL sources")
    parser.add_argument("--no-verify-ssl", dest="verify_ssl", action="store_false",
                        help="Skip SSL certificate verification for URL sources")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (e.g., INFO, DEBUG)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = MergeConfig.from_lists(
            args.files,
            args.speakers,
            output_path=args.output,
            timeout=args.timeout,
            verify_ssl=args.verify_ssl,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        merger = merge_from_config(config)
    except SourceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: while writing {config.output_path}: {e}", file=sys.stderr)
        return 1

    if config.output_path is None:
        print(merger.get_merged_content())
    return 0


if __name__ == "__main__":
    sys.exit(main())
