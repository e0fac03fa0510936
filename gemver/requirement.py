"""Version requirements: one or more operator + version restrictions.

A single restriction such as ``"~> 3.5"`` is a RequirementSpecifier. A
Requirement is a conjunction of specifiers and is satisfied by a version only
when every specifier is.

Supported operators: ``=``, ``!=``, ``>``, ``<``, ``>=``, ``<=``, ``~>``.
A bare version (``"1.3.5"``) means ``=``.
"""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field

from gemver._compat import StrEnum
from gemver.exceptions import InvalidOperatorError, MalformedRequirementError
from gemver.version import VERSION_PATTERN, GemVersion

logger = logging.getLogger(__name__)


class Operator(StrEnum):
    """Requirement operators."""

    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    PESSIMISTIC = "~>"


# Two-character operators come first so ">" never matches inside ">=".
OPERATORS: tuple[str, ...] = ("!=", ">=", "<=", "~>", ">", "<", "=")

_QUOTED_OPERATORS = "|".join(re.escape(op) for op in OPERATORS)
REQUIREMENT_PATTERN = re.compile(rf"^\s*(?P<operator>{_QUOTED_OPERATORS})?\s*(?P<version>{VERSION_PATTERN})\s*$")


class RequirementSpecifier(BaseModel):
    """A single requirement: an operator and a version."""

    model_config = ConfigDict(frozen=True)

    operator: Operator
    version: GemVersion

    def __str__(self) -> str:
        return f"{self.operator.value} {self.version.version}"

    @classmethod
    def parse(cls, raw: str) -> "RequirementSpecifier":
        """Parse a single constraint such as "> 1.3.5" or "1.3.5".

        ">= 0" and ">= 0.a" resolve to DEFAULT_REQUIREMENT and
        DEFAULT_PRERELEASE_REQUIREMENT themselves.

        Args:
            raw: The constraint string

        Returns:
            The parsed RequirementSpecifier

        Raises:
            MalformedRequirementError: If the string does not match the requirement grammar
            InvalidOperatorError: If the operator token is not a known operator
            MalformedVersionError: If the version part is not a valid version
        """
        matched = REQUIREMENT_PATTERN.match(raw)
        if matched is None:
            msg = f"Unable to parse requirement: '{raw}' with regex: {REQUIREMENT_PATTERN.pattern}"
            raise MalformedRequirementError(raw, msg)

        operator_token = matched.group("operator") or Operator.EQ.value
        version_str = matched.group("version")

        try:
            operator = Operator(operator_token)
        except ValueError as exc:
            raise InvalidOperatorError(raw, operator_token) from exc

        if operator is Operator.GE and version_str == DEFAULT_REQUIREMENT.version.version:
            logger.debug("Requirement '%s' resolved to the default requirement", raw)
            return DEFAULT_REQUIREMENT
        if operator is Operator.GE and version_str == DEFAULT_PRERELEASE_REQUIREMENT.version.version:
            logger.debug("Requirement '%s' resolved to the default prerelease requirement", raw)
            return DEFAULT_PRERELEASE_REQUIREMENT

        return cls(operator=operator, version=GemVersion.parse(version_str))

    def is_satisfied_by(self, version: GemVersion) -> bool:
        """Check whether a version satisfies this single requirement.

        Args:
            version: The version to check

        Returns:
            True if the version satisfies the requirement
        """
        comparison = self.version.compare(version)
        match self.operator:
            case Operator.EQ:
                return comparison == 0
            case Operator.NE:
                return comparison != 0
            case Operator.GT:
                return comparison == -1
            case Operator.LT:
                return comparison == 1
            case Operator.GE:
                return comparison in (0, -1)
            case Operator.LE:
                return comparison in (0, 1)
            case Operator.PESSIMISTIC:
                # At least the given version, below the release of its next bump.
                upper = self.version.release().bump().release()
                return comparison in (0, -1) and upper.compare(version) == 1
            case _:
                raise InvalidOperatorError(str(self), str(self.operator))


DEFAULT_REQUIREMENT = RequirementSpecifier(operator=Operator.GE, version=GemVersion.parse("0"))
DEFAULT_PRERELEASE_REQUIREMENT = RequirementSpecifier(operator=Operator.GE, version=GemVersion.parse("0.a"))


class Requirement(BaseModel):
    """A set of requirement specifiers, all of which must hold.

    Order is kept for display only. The set is only mutated through concat(),
    which is not safe to call from several threads at once.
    """

    specifiers: list[RequirementSpecifier] = Field(default_factory=list)

    def __str__(self) -> str:
        return ", ".join(self.as_list())

    @classmethod
    def parse(cls, *requirements: str) -> "Requirement":
        """Build a requirement from constraint strings, parsed independently.

        Args:
            *requirements: Constraint strings such as "> 1.2", "< 1.4"

        Returns:
            The Requirement, with specifiers in input order and no deduplication

        Raises:
            MalformedRequirementError: On the first constraint that does not parse
            MalformedVersionError: On the first constraint whose version does not parse
        """
        return cls(specifiers=[RequirementSpecifier.parse(raw) for raw in requirements])

    @classmethod
    def default(cls) -> "Requirement":
        return cls(specifiers=[DEFAULT_REQUIREMENT])

    @classmethod
    def default_prerelease(cls) -> "Requirement":
        return cls(specifiers=[DEFAULT_PRERELEASE_REQUIREMENT])

    def concat(self, *requirements: str) -> "Requirement":
        """Merge more constraints into this requirement, in place.

        Each new constraint is checked against every specifier present when its
        turn starts. It is skipped for a specifier with the same operator or an
        equal version, and appended once for each other specifier, so it can be
        appended several times.

        Args:
            *requirements: Constraint strings to merge

        Returns:
            This requirement

        Raises:
            MalformedRequirementError: If any constraint does not parse (nothing is appended)
            MalformedVersionError: If any constraint's version does not parse (nothing is appended)
        """
        parsed = [RequirementSpecifier.parse(raw) for raw in requirements]

        for new_specifier in parsed:
            for registered in tuple(self.specifiers):
                if registered.operator == new_specifier.operator or new_specifier.version.compare(registered.version) == 0:
                    logger.debug("Skipping '%s' against existing '%s'", new_specifier, registered)
                    continue
                logger.debug("Appending '%s' (differs from '%s')", new_specifier, registered)
                self.specifiers.append(new_specifier)

        return self

    def has_none(self) -> bool:
        """True if this requirement is the single catch-all ">= 0.a" restriction.

        The operator is checked against DEFAULT_REQUIREMENT and the version
        against DEFAULT_PRERELEASE_REQUIREMENT, so ">= 0" alone does not count.
        """
        if len(self.specifiers) != 1:
            return False
        specifier = self.specifiers[0]
        return (
            specifier.operator == DEFAULT_REQUIREMENT.operator
            and specifier.version.compare(DEFAULT_PRERELEASE_REQUIREMENT.version) == 0
        )

    def exact(self) -> bool:
        """True if the requirement is for exactly one version."""
        return len(self.specifiers) == 1 and self.specifiers[0].operator is Operator.EQ

    def is_prerelease(self) -> bool:
        """True if any specifier names a prerelease version."""
        return any(specifier.version.is_prerelease() for specifier in self.specifiers)

    def is_specific(self) -> bool:
        """True unless the requirement is a single open-ended ">" or "<" restriction."""
        if len(self.specifiers) > 1:
            return True
        if self.specifiers:
            return self.specifiers[0].operator not in (Operator.GT, Operator.LT)
        return True

    def is_satisfied_by(self, version: GemVersion) -> bool:
        """True if the version satisfies every specifier. An empty requirement is always satisfied."""
        return all(specifier.is_satisfied_by(version) for specifier in self.specifiers)

    def as_list(self) -> list[str]:
        return [str(specifier) for specifier in self.specifiers]


def parse_requirement(*requirements: str) -> Requirement:
    """Parse constraint strings into a Requirement.

    Args:
        *requirements: Constraint strings (e.g. ">= 1.2", "< 2.0").

    Returns:
        The parsed Requirement.

    Raises:
        MalformedRequirementError: If a constraint string is not valid.
        MalformedVersionError: If a constraint's version is not valid.
    """
    return Requirement.parse(*requirements)


def version_satisfies(version: GemVersion, requirement: Requirement) -> bool:
    """Check whether a version satisfies a requirement.

    Args:
        version: The version to check.
        requirement: The requirement to check against.

    Returns:
        True if the version satisfies the requirement.
    """
    return requirement.is_satisfied_by(version)
