"""RubyGems-style version values.

A version string is a series of numbers separated by periods. Each part is
compared as its own number, so 3.10 sorts above 3.2. A part containing letters
makes the version a prerelease, which sorts below the release it precedes
(newest to oldest):

1. 1.0
2. 1.0.b1
3. 1.0.a.2
4. 0.9

A dash starts a prerelease suffix and is stored as ``.pre.``, so ``1.5-3``
becomes ``1.5.pre.3`` and reuses the dotted grammar for comparison.
"""

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from gemver._utils.segment_utils import (
    SegmentKind,
    extract_segments,
    has_letter,
    segment_kind,
    strip_trailing_zeros,
    truncate_at_first_alpha,
)
from gemver.exceptions import InvalidBumpStateError, MalformedVersionError

logger = logging.getLogger(__name__)

VERSION_PATTERN = r"[0-9]+(?:\.[0-9a-zA-Z]+)*(?:-[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)?"
ANCHORED_VERSION_PATTERN = re.compile(rf"^\s*(?:{VERSION_PATTERN})?\s*$")

PRERELEASE_MARKER = ".pre."


def is_valid_version(version: str) -> bool:
    """Check if a string matches the version grammar. Blank strings are valid."""
    return ANCHORED_VERSION_PATTERN.match(version) is not None


def _normalize(version: str) -> str:
    stripped = version.strip()
    if not stripped:
        return "0"
    return stripped.replace("-", PRERELEASE_MARKER)


class GemVersion(BaseModel):
    """An immutable, comparable version.

    ``version`` holds the canonical string: trimmed, blank mapped to ``"0"``
    and dashes rewritten to ``.pre.``. Segments are derived from it on demand.
    """

    model_config = ConfigDict(frozen=True)

    version: str

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, version: Any) -> str:
        if not isinstance(version, str) or not is_valid_version(version):
            msg = f"Malformed version number string: '{version}'"
            raise ValueError(msg)  # noqa: TRY004
        return _normalize(version)

    @classmethod
    def parse(cls, raw: str) -> "GemVersion":
        """Parse a version string.

        Args:
            raw: The version string (e.g. "1.2.3", "1.5-3", or blank for "0")

        Returns:
            The parsed GemVersion

        Raises:
            MalformedVersionError: If the string does not match the version grammar
        """
        if not is_valid_version(raw):
            raise MalformedVersionError(raw)
        return cls(version=raw)

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f"GemVersion({self.version!r})"

    # --- segments ---

    @property
    def segments(self) -> list[str]:
        """Maximal runs of digits or letters, e.g. "2.3.pre.0" -> ["2", "3", "pre", "0"]."""
        return extract_segments(self.version)

    def split_segments(self) -> tuple[list[str], list[str]]:
        """Split segments into the leading numeric run and the rest.

        The split point is the first segment containing a letter. When there is
        none, the second run is empty.

        Returns:
            Tuple of (numeric_run, alphanumeric_run)
        """
        segments = self.segments
        for index, segment in enumerate(segments):
            if segment_kind(segment) is SegmentKind.ALPHA:
                return segments[:index], segments[index:]
        return segments, []

    @property
    def canonical_segments(self) -> list[str]:
        """Segments with trailing zeros trimmed from the end of each run.

        Example: "2.3-0-0" -> ["2", "3", "pre", "0", "pre"]. Used for
        comparison only.
        """
        numeric_run, alpha_run = self.split_segments()
        return strip_trailing_zeros(numeric_run) + strip_trailing_zeros(alpha_run)

    # --- comparison ---

    def compare(self, other: "GemVersion") -> int:
        """Compare with another version.

        Alphabetic segments sort below numeric ones. Two alphabetic segments
        that differ are treated as a tie at their position and never decide
        the comparison on their own.

        Args:
            other: The version to compare against

        Returns:
            -1 if this version is older, 0 if equal, 1 if newer
        """
        left = self.canonical_segments
        right = other.canonical_segments

        if self.version == other.version or left == right:
            return 0

        width = max(len(left), len(right))
        left += ["0"] * (width - len(left))
        right += ["0"] * (width - len(right))

        for left_segment, right_segment in zip(left, right):
            if left_segment == right_segment:
                continue

            left_kind = segment_kind(left_segment)
            right_kind = segment_kind(right_segment)
            if left_kind is SegmentKind.ALPHA and right_kind is SegmentKind.NUMERIC:
                return -1
            if left_kind is SegmentKind.NUMERIC and right_kind is SegmentKind.ALPHA:
                return 1
            if left_kind is SegmentKind.ALPHA:
                continue

            left_value = int(left_segment)
            right_value = int(right_segment)
            if left_value != right_value:
                return 1 if left_value > right_value else -1

        return 0

    def eql(self, other: "GemVersion") -> bool:
        """Strict equality: "1" and "1.0" compare equal but are not eql."""
        return self.version == other.version

    def _ordering_key(self) -> tuple[int | None, ...]:
        # Alphabetic segments tie with each other in compare(), so they share a placeholder.
        return tuple(
            None if segment_kind(segment) is SegmentKind.ALPHA else int(segment) for segment in self.canonical_segments
        )

    def __hash__(self) -> int:
        return hash(self._ordering_key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GemVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GemVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, GemVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, GemVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, GemVersion):
            return NotImplemented
        return self.compare(other) >= 0

    # --- derived versions ---

    def is_prerelease(self) -> bool:
        """A version is a prerelease if it contains a letter."""
        return has_letter(self.version)

    def release(self) -> "GemVersion":
        """The release for this version (e.g. 1.2.0.a -> 1.2.0).

        Non-prerelease versions return themselves.
        """
        if not self.is_prerelease():
            return self
        return GemVersion.parse(".".join(truncate_at_first_alpha(self.segments)))

    def bump(self) -> "GemVersion":
        """Return a version whose next-to-last number is one greater (5.3.1 -> 5.4).

        Prerelease parts are dropped first, so 5.3.1.b.2 -> 5.4.

        Returns:
            The bumped version

        Raises:
            InvalidBumpStateError: If no integer segment is left to increment
        """
        segments = truncate_at_first_alpha(self.segments)
        if len(segments) > 1:
            segments = segments[:-1]

        if not segments or segment_kind(segments[-1]) is not SegmentKind.NUMERIC:
            msg = f"Cannot bump version '{self.version}': no numeric segment left to increment"
            raise InvalidBumpStateError(msg)

        segments[-1] = str(int(segments[-1]) + 1)
        bumped = GemVersion.parse(".".join(segments))
        logger.debug("Bumped version '%s' to '%s'", self.version, bumped.version)
        return bumped

    def approximate_recommendation(self) -> str:
        """A recommended ``~>`` requirement for this version.

        Examples: "1.3.5.7" -> "~> 1.3", "1.3.1-4" -> "~> 1.3.a".
        """
        segments = truncate_at_first_alpha(self.segments)[:2]
        while len(segments) < 2:
            segments.append("0")

        recommendation = "~> " + ".".join(segments)
        if self.is_prerelease():
            recommendation += ".a"
        return recommendation


def parse_version(version_str: str) -> GemVersion:
    """Parse a version string into a GemVersion.

    Args:
        version_str: The version string to parse (e.g. "1.2.3" or "1.0.b1").

    Returns:
        The parsed GemVersion.

    Raises:
        MalformedVersionError: If the string does not match the version grammar.
    """
    return GemVersion.parse(version_str)


def parse_version_or_none(version_str: str) -> GemVersion | None:
    """Parse a version string, returning None if it is malformed."""
    try:
        return GemVersion.parse(version_str)
    except MalformedVersionError:
        logger.debug("Ignoring malformed version '%s'", version_str)
        return None
