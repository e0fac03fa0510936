class GemverError(Exception):
    """Base exception for all gemver parsing and evaluation errors."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class MalformedVersionError(GemverError):
    """Raised when a string does not match the version grammar."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Malformed version number string: '{version}'")


class MalformedRequirementError(GemverError):
    """Raised when a constraint string cannot be split into an operator and a version."""

    def __init__(self, requirement: str, message: str = "") -> None:
        self.requirement = requirement
        super().__init__(message or f"Unable to parse requirement: '{requirement}'")


class InvalidOperatorError(MalformedRequirementError):
    """Raised when a constraint matched the grammar but carries an unknown operator."""

    def __init__(self, requirement: str, operator: str) -> None:
        self.operator = operator
        super().__init__(requirement, f"Invalid operator '{operator}' in requirement '{requirement}'")


class InvalidBumpStateError(GemverError):
    """Raised when a version has no integer segment left to increment."""
