"""Character counting and weak-pattern detection.

Shared by the validator and the strength checker so that both agree on what
counts as a repeated run, an ascending sequence, or a denylisted substring.
"""

import re
from collections import Counter
from collections.abc import Iterable

from password_helper.domain.entities.character_class import CharacterClass

COMMON_PATTERNS: tuple[str, ...] = (
    "123456", "password", "qwerty", "admin", "welcome",
    "monkey", "letmein", "dragon", "baseball", "iloveyou",
    "trustno1", "sunshine", "master", "hello", "shadow",
    "ashley", "football", "jesus", "michael", "ninja",
    "mustang", "password1", "12345678", "qwerty123", "admin123",
)

COMMON_WORDS: tuple[str, ...] = (
    "password", "admin", "user", "login", "welcome",
    "hello", "world", "test", "guest", "default",
)

KEYBOARD_ROWS: tuple[str, ...] = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

REPEATED_CHARACTERS = re.compile(r"(.)\1{2,}", re.DOTALL)


def _windows(sequence: str, size: int) -> list[str]:
    return [sequence[i:i + size] for i in range(len(sequence) - size + 1)]


# 012..789 and abc..xyz use three-character windows; keyboard rows use four.
SEQUENTIAL_NUMBERS = re.compile("|".join(_windows("0123456789", 3)))
SEQUENTIAL_LETTERS = re.compile(
    "|".join(_windows("abcdefghijklmnopqrstuvwxyz", 3)), re.IGNORECASE
)
KEYBOARD_PATTERNS = re.compile(
    "|".join(window for row in KEYBOARD_ROWS for window in _windows(row, 4)),
    re.IGNORECASE,
)


def count_classes(password: str) -> Counter[CharacterClass]:
    """Count characters per character class.

    Args:
        password: The password to inspect.

    Returns:
        Counter keyed by CharacterClass. Missing classes count as zero.
    """
    return Counter(CharacterClass.of(char) for char in password)


def present_classes(password: str) -> set[CharacterClass]:
    """Return the set of character classes that appear in the password."""
    return set(count_classes(password))


def has_repeated_characters(password: str) -> bool:
    """Check for a run of three or more identical characters."""
    return REPEATED_CHARACTERS.search(password) is not None


def has_sequential_numbers(password: str) -> bool:
    return SEQUENTIAL_NUMBERS.search(password) is not None


def has_sequential_letters(password: str) -> bool:
    return SEQUENTIAL_LETTERS.search(password) is not None


def has_keyboard_pattern(password: str) -> bool:
    return KEYBOARD_PATTERNS.search(password) is not None


def has_sequential_characters(password: str) -> bool:
    """Check for ascending digit, alphabet or keyboard-row runs."""
    return (
        has_sequential_numbers(password)
        or has_sequential_letters(password)
        or has_keyboard_pattern(password)
    )


def contains_any(password: str, denylist: Iterable[str]) -> bool:
    """Case-insensitive substring check against a denylist."""
    lowered = password.lower()
    return any(entry in lowered for entry in denylist)


def has_common_pattern(password: str) -> bool:
    """Check for a substring from COMMON_PATTERNS."""
    return contains_any(password, COMMON_PATTERNS)


def has_dictionary_word(password: str) -> bool:
    """Check for a substring from COMMON_WORDS."""
    return contains_any(password, COMMON_WORDS)
