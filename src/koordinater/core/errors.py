"""
Custom exception hierarchy for Koordinater.

Recoverable problems (bad configuration, failed projections) are handled
locally and never surface as exceptions. The exceptions defined here signal
broken host integrations and are meant to propagate.
"""

from typing import Any, Dict, Optional


class KoordinaterException(Exception):
    """
    Base exception for all Koordinater-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: Human-readable error message
        details: Technical details for logging/debugging
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize KoordinaterException.

        Args:
            message: Human-readable error message
            error_code: String identifier for the error type
            details: Technical details for logging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class TranslationMissingError(KoordinaterException):
    """
    Raised when a required translation is missing.

    The "no value" placeholder must always be resolvable; a missing entry
    means the host did not register the message catalog.
    """

    def __init__(self, message_key: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize TranslationMissingError.

        Args:
            message_key: Translation key that could not be resolved
            details: Additional technical details
        """
        error_details = details or {}
        error_details["message_key"] = message_key

        super().__init__(
            message=f"Missing translation for '{message_key}'",
            error_code="TRANSLATION_MISSING",
            details=error_details,
        )
        self.message_key = message_key


class UnknownCoordinateOptionError(KoordinaterException):
    """Raised when no catalog metadata exists for a WKID."""

    def __init__(self, wkid: int, details: Optional[Dict[str, Any]] = None):
        """
        Initialize UnknownCoordinateOptionError.

        Args:
            wkid: WKID without catalog metadata
            details: Additional technical details
        """
        error_details = details or {}
        error_details["wkid"] = wkid

        super().__init__(
            message=f"Missing coordinate option metadata for WKID {wkid}",
            error_code="UNKNOWN_COORDINATE_OPTION",
            details=error_details,
        )
        self.wkid = wkid


class ProjectionError(KoordinaterException):
    """
    Raised by projection backends when a transformation fails.

    The projection orchestrator converts this into a ``None`` result.
    """

    def __init__(
        self,
        message: str,
        source_wkid: Optional[int] = None,
        target_wkid: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize ProjectionError.

        Args:
            message: Human-readable error message
            source_wkid: WKID of the source spatial reference
            target_wkid: WKID of the target spatial reference
            details: Additional technical details
        """
        error_details = details or {}
        if source_wkid is not None:
            error_details["source_wkid"] = source_wkid
        if target_wkid is not None:
            error_details["target_wkid"] = target_wkid

        super().__init__(
            message=message,
            error_code="PROJECTION_ERROR",
            details=error_details,
        )
