"""
Speaker merging example.

Demonstrates merging one VTT file per speaker into a single track.
"""

from vttmerge import MergeConfig, SourceError, merge_from_config


def main():
    print("Merging VTT files...")

    config = MergeConfig.from_lists(
        files=["alice.vtt", "bob.vtt", "carol.vtt"],
        speakers=["Alice", "Bob", "Carol"],
        output_path="merged.vtt",
    )

    try:
        merger = merge_from_config(config)
    except SourceError as e:
        print(f"Merge failed: {e}")
        return

    for source in merger.unsorted_sources:
        print(f"Source was not in time order: {source}")

    print(f"\nTotal cues in merged file: {merger.get_cue_count()}")
    print(f"Saved to: {config.output_path}")


if __name__ == "__main__":
    main()
