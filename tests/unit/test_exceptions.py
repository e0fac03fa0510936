import pytest

from gemver.exceptions import (
    GemverError,
    InvalidBumpStateError,
    InvalidOperatorError,
    MalformedRequirementError,
    MalformedVersionError,
)


class TestExceptions:
    """Tests for the gemver.exceptions hierarchy."""

    def test_base_exception_message(self):
        exc = GemverError("something went wrong")
        assert exc.message == "something went wrong"
        assert str(exc) == "something went wrong"

    def test_base_exception_default_message(self):
        exc = GemverError()
        assert exc.message == ""

    def test_malformed_version_carries_input(self):
        exc = MalformedVersionError("1.")
        assert exc.version == "1."
        assert exc.message == "Malformed version number string: '1.'"

    def test_malformed_requirement_default_message(self):
        exc = MalformedRequirementError(">> 1")
        assert exc.requirement == ">> 1"
        assert ">> 1" in exc.message

    def test_invalid_operator_carries_operator(self):
        exc = InvalidOperatorError("=~ 1.0", "=~")
        assert exc.operator == "=~"
        assert exc.requirement == "=~ 1.0"
        assert "=~" in str(exc)

    @pytest.mark.parametrize(
        ("exc", "parent_cls"),
        [
            (MalformedVersionError("x"), GemverError),
            (MalformedRequirementError("x"), GemverError),
            (InvalidOperatorError("x", "?"), MalformedRequirementError),
            (InvalidBumpStateError("x"), GemverError),
        ],
    )
    def test_subclass_hierarchy(self, exc: GemverError, parent_cls: type):
        """Each concrete exception is a subclass of its expected parent."""
        assert isinstance(exc, parent_cls)

    def test_catching_parent_catches_child(self):
        with pytest.raises(MalformedRequirementError):
            raise InvalidOperatorError("=~ 1", "=~")

        with pytest.raises(GemverError):
            raise MalformedVersionError("1.5-")
