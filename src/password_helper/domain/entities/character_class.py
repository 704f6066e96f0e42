"""Character class entity.

Defines the four character classes a password policy reasons about and the
single classification rule shared by validation, generation and scoring.
"""

import string
from enum import Enum


class CharacterClass(str, Enum):
    """Character classes recognised by password policies.

    Classification is ASCII-based: anything that is not an ASCII letter or
    digit counts as special, including whitespace and non-ASCII letters.
    """

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def alphabet(self) -> str:
        """Characters the generator draws from for this class."""
        return ALPHABETS[self]

    @classmethod
    def of(cls, char: str) -> "CharacterClass":
        """Classify a single character.

        Examples:
            >>> CharacterClass.of("A")
            <CharacterClass.UPPERCASE: 'uppercase'>
            >>> CharacterClass.of("é")
            <CharacterClass.SPECIAL: 'special'>
        """
        if char in string.ascii_uppercase:
            return cls.UPPERCASE
        if char in string.ascii_lowercase:
            return cls.LOWERCASE
        if char in string.digits:
            return cls.DIGIT
        return cls.SPECIAL


# Generated specials are a subset of what CharacterClass.of() calls special.
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SPECIAL: SPECIAL_CHARS,
}

LETTERS = string.ascii_letters

# Order in which optional classes are added to satisfy a character-type count.
CLASS_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SPECIAL,
)
