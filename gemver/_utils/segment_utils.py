import re

from gemver._compat import StrEnum

_SEGMENT_PATTERN = re.compile(r"[0-9]+|[a-zA-Z]+")
_LETTER_PATTERN = re.compile(r"[a-zA-Z]")


class SegmentKind(StrEnum):
    """Kind of a single version segment."""

    NUMERIC = "numeric"
    ALPHA = "alpha"


def segment_kind(segment: str) -> SegmentKind:
    """Classify a segment. Anything containing a letter is alphabetic."""
    if _LETTER_PATTERN.search(segment) is not None:
        return SegmentKind.ALPHA
    return SegmentKind.NUMERIC


def is_alpha_segment(segment: str) -> bool:
    return segment_kind(segment) is SegmentKind.ALPHA


def has_letter(text: str) -> bool:
    return _LETTER_PATTERN.search(text) is not None


def extract_segments(version: str) -> list[str]:
    """Split a version string into maximal runs of digits or letters, left to right."""
    return _SEGMENT_PATTERN.findall(version)


def truncate_at_first_alpha(segments: list[str]) -> list[str]:
    """Return the segments before the first alphabetic one."""
    for index, segment in enumerate(segments):
        if is_alpha_segment(segment):
            return segments[:index]
    return list(segments)


def strip_trailing_zeros(segments: list[str]) -> list[str]:
    """Drop zero-valued numeric segments from the end.

    The scan stops at the first segment that is non-zero or not numeric.
    """
    end = len(segments)
    while end > 0:
        segment = segments[end - 1]
        if is_alpha_segment(segment) or int(segment) != 0:
            break
        end -= 1
    return segments[:end]
