"""
Tests for the exception hierarchy.
"""

import pytest

from koordinater.core.errors import (
    KoordinaterException,
    ProjectionError,
    TranslationMissingError,
    UnknownCoordinateOptionError,
)


class TestKoordinaterException:
    """Tests for the base exception."""

    def test_attributes(self) -> None:
        """Test message, code and details."""
        error = KoordinaterException("Something failed", "SOMETHING", {"a": 1})
        assert error.message == "Something failed"
        assert error.error_code == "SOMETHING"
        assert error.details == {"a": 1}
        assert str(error) == "SOMETHING: Something failed"
        assert repr(error) == (
            "KoordinaterException(error_code='SOMETHING', message='Something failed')"
        )

    def test_to_dict(self) -> None:
        """Test dictionary representation."""
        assert KoordinaterException("x", "CODE").to_dict() == {
            "error_code": "CODE",
            "message": "x",
            "details": {},
        }


class TestSubclasses:
    """Tests for specific exceptions."""

    def test_translation_missing(self) -> None:
        """Test TranslationMissingError."""
        error = TranslationMissingError("noValue")
        assert isinstance(error, KoordinaterException)
        assert error.error_code == "TRANSLATION_MISSING"
        assert error.details == {"message_key": "noValue"}
        assert "noValue" in error.message

    def test_unknown_option(self) -> None:
        """Test UnknownCoordinateOptionError."""
        error = UnknownCoordinateOptionError(1234)
        assert error.message == "Missing coordinate option metadata for WKID 1234"
        assert error.details == {"wkid": 1234}

    def test_projection_error(self) -> None:
        """Test ProjectionError details."""
        error = ProjectionError("failed", source_wkid=4326, target_wkid=3006)
        assert error.error_code == "PROJECTION_ERROR"
        assert error.details == {"source_wkid": 4326, "target_wkid": 3006}

    def test_catch_as_base(self) -> None:
        """Test subclasses can be caught as the base exception."""
        with pytest.raises(KoordinaterException):
            raise ProjectionError("failed")
