"""Domain entities for password_helper.

Entities are pure Python dataclasses and enums that represent core
concepts. They have no dependencies on infrastructure or external frameworks.
"""

from password_helper.domain.entities.character_class import CharacterClass
from password_helper.domain.entities.policy import DEFAULT_POLICY, Policy

__all__ = [
    "CharacterClass",
    "DEFAULT_POLICY",
    "Policy",
]
