"""Password service.

Single entry point that composes policy validation, generation, strength
scoring and Argon2 hashing.
"""

from collections.abc import Mapping
from typing import Any

from password_helper.core.logging import get_logger
from password_helper.domain.entities.policy import Policy
from password_helper.domain.services.password_generator import PasswordGenerator
from password_helper.domain.services.password_validator import (
    PasswordValidationError,
    PasswordValidator,
)
from password_helper.domain.services.strength_checker import StrengthChecker, StrengthLevel
from password_helper.infrastructure.auth import password_hasher

logger = get_logger(__name__)


class PasswordService:
    """Facade over the policy engine and the password hasher."""

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        policy: Policy | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Count-based policy configuration, used when no policy is given.
            policy: A ready-built policy. Takes precedence over config.
        """
        self.policy = policy or Policy.from_config(config)
        self.checker = StrengthChecker()
        self.validator = PasswordValidator(self.policy)
        self.generator = PasswordGenerator(self.policy, self.validator)
        logger.debug("policy_normalized", policy=self.policy.to_dict())

    def generate(self) -> str:
        """Generate a password that satisfies the policy."""
        return self.generator.generate()

    def validate_complexity(self, password: str) -> bool:
        """Check whether a password satisfies the policy."""
        return self.validator.is_valid(password)

    def validation_errors(self, password: str) -> list[PasswordValidationError]:
        return self.validator.validate(password)

    def check_strength(self, password: str) -> int:
        """Score a password from 1 to 100."""
        return self.checker.check_strength(password)

    def check_strength_label(self, password: str) -> StrengthLevel:
        return self.checker.check_label(password)

    def hash(self, password: str) -> str:
        return password_hasher.hash_password(password)

    def verify(self, password: str, hashed: str) -> bool:
        return password_hasher.verify_password(password, hashed)

    def needs_rehash(self, hashed: str) -> bool:
        return password_hasher.needs_rehash(hashed)

    def get_info(self, hashed: str) -> dict[str, Any]:
        return password_hasher.get_hash_info(hashed)
