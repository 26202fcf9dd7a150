"""
Custom exception classes for the iris matcher.

This module defines the exception hierarchy used by the matching engine and
its interactive driver. Recoverable input problems (bad codes, unknown or
blank names) have their own classes so the driver can re-prompt, while
everything else is treated as fatal.
"""

from typing import Optional, Dict, Any


class IrisMatcherError(Exception):
    """
    Base exception class for all iris matcher errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    context : dict, optional
        Additional context information about the error.
    error_code : str, optional
        Unique error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        self.error_code = error_code
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return a formatted string representation of the error."""
        parts = [self.message]

        if self.error_code:
            parts.append(f"[Error Code: {self.error_code}]")

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"[Context: {context_str}]")

        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionary for structured logging.

        Returns
        -------
        dict
            Dictionary representation of the exception.
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
        }


class CodeDecodeError(IrisMatcherError):
    """
    Exception raised when a raw iris code is not a usable hex literal.

    This covers empty input, characters outside ``[0-9a-fA-F]`` and values
    that need more than 63 bits.
    """

    def __init__(self, message: str, raw_code: str, reason: str) -> None:
        context = {"raw_code": raw_code, "reason": reason}
        super().__init__(message, context, "DECODE_001")


class IdentityError(IrisMatcherError):
    """
    Exception raised for identity store problems.

    Parameters
    ----------
    message : str
        Human-readable error message.
    name : str, optional
        The identity name involved.
    """

    def __init__(self, message: str, name: Optional[str] = None, **kwargs) -> None:
        context = kwargs.get("context", {})
        if name is not None:
            context["name"] = name

        super().__init__(message, context, kwargs.get("error_code"))


class IdentityNotFoundError(IdentityError):
    """Exception raised when a name has never been enrolled."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Identity not enrolled: {name}", name=name, error_code="STORE_001"
        )


class InvalidIdentityError(IdentityError):
    """Exception raised when an identity name is empty or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "Identity name must be a non-empty string",
            name=name,
            error_code="STORE_002",
        )


class CodeAlignmentError(IrisMatcherError):
    """
    Exception raised when two codes are compared without being aligned.

    This indicates a programming error rather than bad user input.
    """

    def __init__(self, message: str, first_length: int, second_length: int) -> None:
        context = {"first_length": first_length, "second_length": second_length}
        super().__init__(message, context, "MATCH_001")


class ConfigurationError(IrisMatcherError):
    """
    Exception raised for configuration-related errors.

    This includes invalid values read from environment variables or a
    ``.env`` file.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.get("context", {})
        if config_key:
            context["config_key"] = config_key
        if config_value:
            context["config_value"] = config_value

        super().__init__(message, context, kwargs.get("error_code", "CONFIG_001"))
