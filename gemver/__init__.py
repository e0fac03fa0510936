"""RubyGems-style version ordering and requirement evaluation."""

from gemver.exceptions import (
    GemverError,
    InvalidBumpStateError,
    InvalidOperatorError,
    MalformedRequirementError,
    MalformedVersionError,
)
from gemver.requirement import (
    DEFAULT_PRERELEASE_REQUIREMENT,
    DEFAULT_REQUIREMENT,
    Operator,
    Requirement,
    RequirementSpecifier,
    parse_requirement,
    version_satisfies,
)
from gemver.version import GemVersion, parse_version, parse_version_or_none

__all__ = [
    "DEFAULT_PRERELEASE_REQUIREMENT",
    "DEFAULT_REQUIREMENT",
    "GemVersion",
    "GemverError",
    "InvalidBumpStateError",
    "InvalidOperatorError",
    "MalformedRequirementError",
    "MalformedVersionError",
    "Operator",
    "Requirement",
    "RequirementSpecifier",
    "parse_requirement",
    "parse_version",
    "parse_version_or_none",
    "version_satisfies",
]
