"""Password strength scoring.

Scores any password on a 1-100 scale, independent of a policy:
- Length (up to 30 points)
- Character variety (up to 30 points)
- Complexity (up to 20 points)
- Entropy estimate (up to 20 points)
"""

import math
from dataclasses import dataclass
from enum import Enum

from password_helper.domain.entities.character_class import CharacterClass
from password_helper.domain.services.password_patterns import (
    has_common_pattern,
    has_dictionary_word,
    has_repeated_characters,
    has_sequential_characters,
    present_classes,
)

MIN_LENGTH = 8
MAX_LENGTH = 20

MIN_SCORE = 1
MAX_SCORE = 100

# Charset sizes used by the entropy estimate.
CHARSET_SIZES: dict[CharacterClass, int] = {
    CharacterClass.LOWERCASE: 26,
    CharacterClass.UPPERCASE: 26,
    CharacterClass.DIGIT: 10,
    CharacterClass.SPECIAL: 32,
}


class StrengthLevel(str, Enum):
    """Ordered strength labels derived from the numeric score."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

    @classmethod
    def from_score(cls, score: int) -> "StrengthLevel":
        """Map a 1-100 score to a label.

        Examples:
            >>> StrengthLevel.from_score(19).value
            'Very Weak'
            >>> StrengthLevel.from_score(90).value
            'Very Strong'
        """
        for threshold, level in (
            (20, cls.VERY_WEAK),
            (40, cls.WEAK),
            (60, cls.FAIR),
            (80, cls.GOOD),
            (90, cls.STRONG),
        ):
            if score < threshold:
                return level
        return cls.VERY_STRONG

    @property
    def rank(self) -> int:
        """Position in the ordering, 0 for Very Weak."""
        return list(type(self)).index(self)


@dataclass(frozen=True)
class StrengthReport:
    """Score breakdown for a single password.

    Attributes:
        score: Final clamped score (1-100).
        length: Length component (0-30).
        variety: Character variety component (0-30).
        complexity: Complexity component (0-20).
        entropy: Entropy component (0-20).
        entropy_bits: Raw entropy estimate in bits.
        level: Label for the score.
    """

    score: int
    length: int
    variety: int
    complexity: int
    entropy: int
    entropy_bits: float
    level: StrengthLevel


class StrengthChecker:
    """Evaluates password strength on a 1-100 scale.

    Stateless; a single instance can be shared freely.
    """

    def check_strength(self, password: str) -> int:
        """Score a password.

        Empty passwords and passwords shorter than 8 characters score 1.

        Args:
            password: The password to evaluate.

        Returns:
            A score from 1 to 100.
        """
        return self.analyze(password).score

    score = check_strength

    def check_label(self, password: str) -> StrengthLevel:
        """Return the strength label for a password."""
        return StrengthLevel.from_score(self.check_strength(password))

    def analyze(self, password: str) -> StrengthReport:
        """Score a password and return every component.

        Args:
            password: The password to evaluate.

        Returns:
            StrengthReport with the final score and its components.
        """
        if len(password) < MIN_LENGTH:
            return StrengthReport(
                score=MIN_SCORE,
                length=0,
                variety=0,
                complexity=0,
                entropy=0,
                entropy_bits=0.0,
                level=StrengthLevel.VERY_WEAK,
            )

        classes = present_classes(password)
        length = self.calculate_length_score(password)
        variety = self.calculate_variety_score(classes)
        complexity = self.calculate_complexity_score(password)
        bits = self.calculate_entropy(password, classes)
        entropy = int(min(20, bits / 100 * 20))

        score = min(MAX_SCORE, max(MIN_SCORE, length + variety + complexity + entropy))
        return StrengthReport(
            score=score,
            length=length,
            variety=variety,
            complexity=complexity,
            entropy=entropy,
            entropy_bits=bits,
            level=StrengthLevel.from_score(score),
        )

    def calculate_length_score(self, password: str) -> int:
        """Linear 0-30 between 8 and 20 characters."""
        length = len(password)
        if length < MIN_LENGTH:
            return 0
        if length >= MAX_LENGTH:
            return 30
        return int((length - MIN_LENGTH) / (MAX_LENGTH - MIN_LENGTH) * 30)

    def calculate_variety_score(self, classes: set[CharacterClass]) -> int:
        """5 per class present, 5 for mixed case, 5 for three or more classes."""
        score = 5 * len(classes)
        if {CharacterClass.UPPERCASE, CharacterClass.LOWERCASE} <= classes:
            score += 5
        if len(classes) >= 3:
            score += 5
        return score

    def calculate_complexity_score(self, password: str) -> int:
        """5 for each weak pattern the password avoids."""
        checks = (
            has_repeated_characters,
            has_sequential_characters,
            has_common_pattern,
            has_dictionary_word,
        )
        return sum(5 for check in checks if not check(password))

    def calculate_entropy(self, password: str, classes: set[CharacterClass] | None = None) -> float:
        """Estimate entropy as length * log2(charset size)."""
        if classes is None:
            classes = present_classes(password)
        charset = sum(CHARSET_SIZES[cls] for cls in classes)
        if charset == 0:
            return 0.0
        return len(password) * math.log2(charset)


# Default checker instance
default_strength_checker = StrengthChecker()
