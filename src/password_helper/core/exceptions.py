"""Exceptions for policy construction and password generation."""


class PasswordHelperError(Exception):
    """Base class for all password_helper errors."""
    pass


class InvalidPolicyError(PasswordHelperError, ValueError):
    """Raised when policy bounds contradict each other."""
    pass


class InvalidArgumentError(PasswordHelperError, ValueError):
    """Raised when generation is requested without any usable character class."""
    pass


class GenerationExhaustedError(PasswordHelperError):
    """Raised when no policy-satisfying password was found within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"No password satisfying the policy was generated after {attempts} attempts. "
            "Consider relaxing the complexity rules."
        )
