"""password_helper - password policy engine.

Defines configurable complexity rules, generates passwords that satisfy
them, validates arbitrary passwords against them, and scores password
strength.
"""

__version__ = "0.1.0"

from password_helper.application.services.password_service import PasswordService
from password_helper.core.exceptions import (
    GenerationExhaustedError,
    InvalidArgumentError,
    InvalidPolicyError,
    PasswordHelperError,
)
from password_helper.domain.entities import CharacterClass, Policy
from password_helper.domain.services import (
    PasswordGenerator,
    PasswordValidationError,
    PasswordValidator,
    StrengthChecker,
    StrengthLevel,
    StrengthReport,
)

__all__ = [
    "CharacterClass",
    "GenerationExhaustedError",
    "InvalidArgumentError",
    "InvalidPolicyError",
    "PasswordGenerator",
    "PasswordHelperError",
    "PasswordService",
    "PasswordValidationError",
    "PasswordValidator",
    "Policy",
    "StrengthChecker",
    "StrengthLevel",
    "StrengthReport",
    "__version__",
]
