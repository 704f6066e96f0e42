"""Domain services for password_helper.

Services contain the validation, generation and scoring logic. They have no
dependencies on infrastructure.
"""

from password_helper.domain.services.password_generator import PasswordGenerator
from password_helper.domain.services.password_validator import (
    PasswordValidationError,
    PasswordValidator,
    default_password_validator,
)
from password_helper.domain.services.strength_checker import (
    StrengthChecker,
    StrengthLevel,
    StrengthReport,
    default_strength_checker,
)

__all__ = [
    "PasswordGenerator",
    "PasswordValidationError",
    "PasswordValidator",
    "StrengthChecker",
    "StrengthLevel",
    "StrengthReport",
    "default_password_validator",
    "default_strength_checker",
]
