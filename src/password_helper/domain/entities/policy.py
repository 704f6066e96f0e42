"""Password policy entity.

A Policy is the normalized, immutable set of rules a password must satisfy.
Two configuration shapes are supported:

- count-based: per-class minimums (digits, lowercase, uppercase, special,
  letters) plus a minimum length. Inconsistent values are normalized, never
  rejected.
- character-types: a length range, a count of distinct character classes,
  and complexity toggles. Inconsistent bounds are rejected.

Both shapes produce the same Policy type.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from password_helper.core.exceptions import InvalidPolicyError
from password_helper.domain.entities.character_class import CLASS_ORDER, CharacterClass

# camelCase configuration keys mapped to Policy field names.
CONFIG_KEYS: dict[str, str] = {
    "minimumDigits": "minimum_digits",
    "minimumLowercase": "minimum_lowercase",
    "minimumUppercase": "minimum_uppercase",
    "minimumSpecialChars": "minimum_special_chars",
    "minimumLetters": "minimum_letters",
    "minimumLength": "minimum_length",
    "maximumLength": "maximum_length",
    "minimumCharacterTypes": "minimum_character_types",
    "allowRepeatedCharacters": "allow_repeated_characters",
    "allowSequentialCharacters": "allow_sequential_characters",
    "allowCommonPatterns": "allow_common_patterns",
    "stripWhitespace": "strip_whitespace",
}

_COUNT_FIELDS = (
    "minimum_digits",
    "minimum_lowercase",
    "minimum_uppercase",
    "minimum_special_chars",
    "minimum_letters",
    "minimum_length",
    "minimum_character_types",
)

_FLAG_FIELDS = (
    "allow_repeated_characters",
    "allow_sequential_characters",
    "allow_common_patterns",
    "strip_whitespace",
)

CHARACTER_TYPES_MINIMUM_LENGTH = 8


def _coerce_count(name: str, value: Any) -> int:
    """Truncate to an integer and drop the sign (5.8 -> 5, -12 -> 12)."""
    try:
        return abs(int(value))
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidPolicyError(f"{name} must be a number, got {value!r}") from e


@dataclass(frozen=True)
class Policy:
    """Password policy.

    Attributes:
        minimum_length: Minimum password length. Never smaller than the sum
            of the per-class minimums.
        maximum_length: Maximum password length, or None for unbounded.
        minimum_digits: Minimum number of digits.
        minimum_lowercase: Minimum number of lowercase letters.
        minimum_uppercase: Minimum number of uppercase letters.
        minimum_special_chars: Minimum number of special characters.
        minimum_letters: Minimum number of letters of either case. Never
            smaller than minimum_lowercase + minimum_uppercase.
        minimum_character_types: Distinct character classes that must appear (0-4).
        allow_repeated_characters: Allow runs of three or more identical characters.
        allow_sequential_characters: Allow ascending digit, alphabet or keyboard runs.
        allow_common_patterns: Allow substrings from the common password denylist.
        strip_whitespace: Trim leading/trailing whitespace before validation.
    """

    minimum_length: int = 10
    maximum_length: int | None = None
    minimum_digits: int = 1
    minimum_lowercase: int = 1
    minimum_uppercase: int = 1
    minimum_special_chars: int = 1
    minimum_letters: int = 1
    minimum_character_types: int = 0
    allow_repeated_characters: bool = True
    allow_sequential_characters: bool = True
    allow_common_patterns: bool = True
    strip_whitespace: bool = True

    def __post_init__(self) -> None:
        for name in _COUNT_FIELDS:
            object.__setattr__(self, name, _coerce_count(name, getattr(self, name)))

        for name in _FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidPolicyError(f"{name} must be a boolean, got {value!r}")

        object.__setattr__(self, "minimum_character_types", min(self.minimum_character_types, 4))

        object.__setattr__(
            self,
            "minimum_letters",
            max(self.minimum_letters, self.minimum_lowercase + self.minimum_uppercase),
        )

        required = (
            self.minimum_letters + self.minimum_digits + self.minimum_special_chars
        )
        # Classes beyond the counted ones still need one character each.
        missing_types = max(0, self.minimum_character_types - self.guaranteed_type_count)
        object.__setattr__(
            self, "minimum_length", max(self.minimum_length, required + missing_types)
        )

        if self.maximum_length is not None:
            object.__setattr__(
                self, "maximum_length", _coerce_count("maximum_length", self.maximum_length)
            )
            if self.maximum_length < self.minimum_length:
                raise InvalidPolicyError(
                    f"Maximum length ({self.maximum_length}) must be greater than "
                    f"or equal to minimum length ({self.minimum_length})"
                )

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None = None) -> "Policy":
        """Build a count-based policy from a configuration mapping.

        Keys may be camelCase (``minimumDigits``) or snake_case
        (``minimum_digits``). Unknown keys are ignored and missing keys fall
        back to the defaults.

        Args:
            config: Configuration mapping.

        Returns:
            The normalized policy.

        Raises:
            InvalidPolicyError: If a count is not numeric, a toggle is not a
                bool, or the maximum length is below the normalized minimum
                length.
        """
        field_names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in (config or {}).items():
            name = CONFIG_KEYS.get(key, key)
            if name in field_names:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_character_types(
        cls,
        minimum_length: int = CHARACTER_TYPES_MINIMUM_LENGTH,
        maximum_length: int = 20,
        minimum_character_types: int = 3,
        allow_repeated_characters: bool = False,
        allow_sequential_characters: bool = False,
        allow_common_patterns: bool = False,
    ) -> "Policy":
        """Build a policy from a length range and a character-type count.

        Per-class minimums are all zero and whitespace is not trimmed.

        Raises:
            InvalidPolicyError: If minimum_length < 8, maximum_length <
                minimum_length, or minimum_character_types is outside 1-4.
        """
        if minimum_length < CHARACTER_TYPES_MINIMUM_LENGTH:
            raise InvalidPolicyError(
                f"Minimum length must be at least {CHARACTER_TYPES_MINIMUM_LENGTH} characters"
            )
        if maximum_length < minimum_length:
            raise InvalidPolicyError("Maximum length must be greater than minimum length")
        if not 1 <= minimum_character_types <= 4:
            raise InvalidPolicyError("Minimum character types must be between 1 and 4")

        return cls(
            minimum_length=minimum_length,
            maximum_length=maximum_length,
            minimum_digits=0,
            minimum_lowercase=0,
            minimum_uppercase=0,
            minimum_special_chars=0,
            minimum_letters=0,
            minimum_character_types=minimum_character_types,
            allow_repeated_characters=allow_repeated_characters,
            allow_sequential_characters=allow_sequential_characters,
            allow_common_patterns=allow_common_patterns,
            strip_whitespace=False,
        )

    @property
    def class_minimums(self) -> dict[CharacterClass, int]:
        """Per-class minimum counts."""
        return {
            CharacterClass.UPPERCASE: self.minimum_uppercase,
            CharacterClass.LOWERCASE: self.minimum_lowercase,
            CharacterClass.DIGIT: self.minimum_digits,
            CharacterClass.SPECIAL: self.minimum_special_chars,
        }

    @property
    def extra_letters(self) -> int:
        """Letters required beyond the lowercase and uppercase minimums."""
        return self.minimum_letters - self.minimum_lowercase - self.minimum_uppercase

    @property
    def required_classes(self) -> tuple[CharacterClass, ...]:
        """Classes with a non-zero minimum, in canonical order."""
        minimums = self.class_minimums
        return tuple(cls for cls in CLASS_ORDER if minimums[cls] > 0)

    @property
    def guaranteed_type_count(self) -> int:
        """Distinct classes any password meeting the per-class minimums contains.

        A letter minimum that is not pinned to a case guarantees one letter
        class without saying which.
        """
        count = len(self.required_classes)
        if self.extra_letters > 0 and not (self.minimum_lowercase or self.minimum_uppercase):
            count += 1
        return count

    def replace(self, **changes: Any) -> "Policy":
        """Return a copy with the given fields changed, normalized again."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return the normalized policy keyed by configuration names."""
        names = {v: k for k, v in CONFIG_KEYS.items()}
        return {names[key]: value for key, value in asdict(self).items()}


DEFAULT_POLICY = Policy()
