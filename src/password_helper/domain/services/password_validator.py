"""Password validation service.

Validates passwords against a Policy:
- Length range
- Per-class minimums (digits, letters, uppercase, lowercase, special)
- Distinct character-type count
- Complexity toggles (repeats, sequences, common patterns)

Validation never raises; it reports errors or returns False.
"""

from dataclasses import dataclass

from password_helper.domain.entities.character_class import CharacterClass
from password_helper.domain.entities.policy import DEFAULT_POLICY, Policy
from password_helper.domain.services.password_patterns import (
    count_classes,
    has_common_pattern,
    has_repeated_characters,
    has_sequential_characters,
)


@dataclass(frozen=True)
class PasswordValidationError:
    """Represents a password validation error.

    Attributes:
        field: The field name (always 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


def _error(message: str, code: str) -> PasswordValidationError:
    return PasswordValidationError(field="password", message=message, code=code)


class PasswordValidator:
    """Validates passwords against a policy.

    Every ``meets_*`` check can be called on its own for diagnostics. A
    check whose minimum is zero, or whose defect the policy allows, is
    always satisfied.
    """

    def __init__(self, policy: Policy | None = None) -> None:
        """Initialize the password validator.

        Args:
            policy: The policy to enforce. Defaults to the default policy.
        """
        self.policy = policy or DEFAULT_POLICY

    def _prepare(self, password: str) -> str:
        return password.strip() if self.policy.strip_whitespace else password

    def meets_length_requirement(self, password: str) -> bool:
        length = len(self._prepare(password))
        maximum = self.policy.maximum_length
        return length >= self.policy.minimum_length and (maximum is None or length <= maximum)

    def meets_minimum_digits(self, password: str) -> bool:
        if self.policy.minimum_digits == 0:
            return True
        return count_classes(self._prepare(password))[CharacterClass.DIGIT] >= self.policy.minimum_digits

    def meets_minimum_letters(self, password: str) -> bool:
        if self.policy.minimum_letters == 0:
            return True
        counts = count_classes(self._prepare(password))
        letters = counts[CharacterClass.UPPERCASE] + counts[CharacterClass.LOWERCASE]
        return letters >= self.policy.minimum_letters

    def meets_minimum_uppercase(self, password: str) -> bool:
        if self.policy.minimum_uppercase == 0:
            return True
        return (
            count_classes(self._prepare(password))[CharacterClass.UPPERCASE]
            >= self.policy.minimum_uppercase
        )

    def meets_minimum_lowercase(self, password: str) -> bool:
        if self.policy.minimum_lowercase == 0:
            return True
        return (
            count_classes(self._prepare(password))[CharacterClass.LOWERCASE]
            >= self.policy.minimum_lowercase
        )

    def meets_minimum_special_chars(self, password: str) -> bool:
        if self.policy.minimum_special_chars == 0:
            return True
        return (
            count_classes(self._prepare(password))[CharacterClass.SPECIAL]
            >= self.policy.minimum_special_chars
        )

    def count_character_types(self, password: str) -> int:
        """Count distinct character classes present in the password."""
        return len(count_classes(self._prepare(password)))

    def meets_character_type_requirement(self, password: str) -> bool:
        return self.count_character_types(password) >= self.policy.minimum_character_types

    def meets_complexity_requirements(self, password: str) -> bool:
        """Check the repeated, sequential and common-pattern toggles."""
        return not self._complexity_errors(self._prepare(password))

    def _complexity_errors(self, password: str) -> list[PasswordValidationError]:
        errors: list[PasswordValidationError] = []

        if not self.policy.allow_repeated_characters and has_repeated_characters(password):
            errors.append(
                _error(
                    "Password must not contain three or more repeated characters in a row",
                    "password_repeated_characters",
                )
            )

        if not self.policy.allow_sequential_characters and has_sequential_characters(password):
            errors.append(
                _error(
                    "Password must not contain sequential characters",
                    "password_sequential_characters",
                )
            )

        if not self.policy.allow_common_patterns and has_common_pattern(password):
            errors.append(
                _error(
                    "Password must not contain a commonly used password",
                    "password_common_pattern",
                )
            )

        return errors

    def validate(self, password: str) -> list[PasswordValidationError]:
        """Validate a password against the policy.

        Args:
            password: The password to validate.

        Returns:
            List of validation errors. Empty list if password is valid.
        """
        policy = self.policy
        errors: list[PasswordValidationError] = []

        if len(self._prepare(password)) < policy.minimum_length:
            errors.append(
                _error(
                    f"Password must be at least {policy.minimum_length} characters",
                    "password_too_short",
                )
            )
        elif not self.meets_length_requirement(password):
            errors.append(
                _error(
                    f"Password must be at most {policy.maximum_length} characters",
                    "password_too_long",
                )
            )

        if not self.meets_minimum_digits(password):
            errors.append(
                _error(
                    f"Password must contain at least {policy.minimum_digits} digit(s)",
                    "password_too_few_digits",
                )
            )

        if not self.meets_minimum_letters(password):
            errors.append(
                _error(
                    f"Password must contain at least {policy.minimum_letters} letter(s)",
                    "password_too_few_letters",
                )
            )

        if not self.meets_minimum_uppercase(password):
            errors.append(
                _error(
                    f"Password must contain at least {policy.minimum_uppercase} uppercase letter(s)",
                    "password_too_few_uppercase",
                )
            )

        if not self.meets_minimum_lowercase(password):
            errors.append(
                _error(
                    f"Password must contain at least {policy.minimum_lowercase} lowercase letter(s)",
                    "password_too_few_lowercase",
                )
            )

        if not self.meets_minimum_special_chars(password):
            errors.append(
                _error(
                    f"Password must contain at least {policy.minimum_special_chars} special character(s)",
                    "password_too_few_special",
                )
            )

        if not self.meets_character_type_requirement(password):
            errors.append(
                _error(
                    f"Password must contain at least {policy.minimum_character_types} of: "
                    "uppercase letters, lowercase letters, digits, special characters",
                    "password_too_few_character_types",
                )
            )

        errors.extend(self._complexity_errors(self._prepare(password)))

        return errors

    def is_valid(self, password: str) -> bool:
        """Check if a password is valid.

        Args:
            password: The password to validate.

        Returns:
            True if password meets all requirements, False otherwise.
        """
        return len(self.validate(password)) == 0


# Default validator instance
default_password_validator = PasswordValidator()
