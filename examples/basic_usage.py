"""
Basic VTTMerge usage example.

Demonstrates parsing a track, tagging it with a speaker and printing it.
"""

from vttmerge import Track

CONTENT = """WEBVTT

00:00:03.000 --> 00:00:04.000
Second line

00:00:01.000 --> 00:00:02.000
First line
"""


def main():
    track = Track.parse(CONTENT)
    print(f"Parsed {len(track)} cues")

    if not track.is_sorted():
        print("Track is not in time order, sorting")
        track.sort()

    track.set_speaker_for_all_lines("Narrator")
    print(track.format())


if __name__ == "__main__":
    main()
