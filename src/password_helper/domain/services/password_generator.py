"""Password generator service.

Builds random passwords that satisfy a Policy:

1. Emit the characters each class minimum demands (and one character per
   extra class needed to reach the character-type count).
2. Fill up to a length drawn uniformly from the policy's length range with
   picks from the full character pool.
3. Shuffle the result so required characters have no fixed position.
4. Re-test the candidate with the validator, since repeat, sequence and
   denylist rules cannot be guaranteed by construction. Give up after a
   bounded number of attempts.

Every random draw comes from the operating system CSPRNG via ``secrets``.
"""

import secrets
from collections.abc import Iterable, Sequence

from password_helper.core.config import get_settings
from password_helper.core.exceptions import (
    GenerationExhaustedError,
    InvalidArgumentError,
    InvalidPolicyError,
)
from password_helper.core.logging import get_logger
from password_helper.domain.entities.character_class import (
    CLASS_ORDER,
    LETTERS,
    CharacterClass,
)
from password_helper.domain.entities.policy import (
    CHARACTER_TYPES_MINIMUM_LENGTH,
    DEFAULT_POLICY,
    Policy,
)
from password_helper.domain.services.password_validator import PasswordValidator

logger = get_logger(__name__)

_random = secrets.SystemRandom()

NO_CHARACTER_TYPES_MESSAGE = "At least one character type must be selected"


def get_random_character(alphabet: Sequence[str]) -> str:
    """Pick one character uniformly at random.

    Args:
        alphabet: Characters to choose from.

    Returns:
        A single character from the alphabet.

    Raises:
        InvalidArgumentError: If the alphabet is empty.
    """
    if not alphabet:
        raise InvalidArgumentError("Cannot pick a character from an empty alphabet")
    return secrets.choice(alphabet)


def build_character_pool(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of the given classes, each once.

    Examples:
        >>> build_character_pool([CharacterClass.DIGIT])
        '0123456789'
    """
    return "".join(cls.alphabet for cls in dict.fromkeys(classes))


def pool_classes(policy: Policy) -> tuple[CharacterClass, ...]:
    """Classes the filler characters are drawn from.

    Classes with a non-zero minimum always qualify. A case-free letter
    minimum adds both letter classes. A character-type count opens the pool
    to every class, since any of them counts towards it.
    """
    classes = set(policy.required_classes)
    if policy.extra_letters > 0:
        classes.update((CharacterClass.UPPERCASE, CharacterClass.LOWERCASE))
    if policy.minimum_character_types > 0:
        classes.update(CLASS_ORDER)
    return tuple(cls for cls in CLASS_ORDER if cls in classes)


def generate_required_characters(policy: Policy) -> str:
    """Generate the characters the policy's minimums demand, unshuffled.

    Per-class minimums come first in canonical class order, then letters of
    either case for the remaining letter minimum, then one character from
    each class still missing for the character-type count.
    """
    chars: list[str] = []
    for cls, minimum in policy.class_minimums.items():
        chars.extend(get_random_character(cls.alphabet) for _ in range(minimum))
    chars.extend(get_random_character(LETTERS) for _ in range(policy.extra_letters))

    present = {CharacterClass.of(char) for char in chars}
    for cls in CLASS_ORDER:
        if len(present) >= policy.minimum_character_types:
            break
        if cls not in present:
            chars.append(get_random_character(cls.alphabet))
            present.add(cls)

    return "".join(chars)


def fill_remaining_characters(password: str, pool: Sequence[str], length: int) -> str:
    """Append random pool characters until the password reaches length.

    The given prefix is preserved. A prefix already at or above length is
    returned unchanged.
    """
    missing = max(0, length - len(password))
    return password + "".join(get_random_character(pool) for _ in range(missing))


def shuffle_characters(password: str) -> str:
    """Return a uniformly random permutation of the password's characters."""
    chars = list(password)
    _random.shuffle(chars)
    return "".join(chars)


class PasswordGenerator:
    """Generates random passwords that satisfy a policy.

    Thread-Safety:
        Instances hold no mutable state. The only shared resource is the
        system CSPRNG, which is safe for concurrent use.
    """

    def __init__(
        self,
        policy: Policy | None = None,
        validator: PasswordValidator | None = None,
        max_attempts: int | None = None,
        default_maximum_length: int | None = None,
    ) -> None:
        """Initialize the password generator.

        Args:
            policy: The policy generated passwords must satisfy.
            validator: Validator used to re-test candidates. Defaults to a
                validator for the same policy.
            max_attempts: Candidates to try before giving up. Defaults to
                the ``generator_max_attempts`` setting.
            default_maximum_length: Upper length bound for policies without
                a maximum length. Defaults to the
                ``generator_default_maximum_length`` setting.

        Raises:
            InvalidArgumentError: If max_attempts is less than 1.
        """
        settings = get_settings()
        self.policy = policy or DEFAULT_POLICY
        self.validator = validator or PasswordValidator(self.policy)
        self.max_attempts = (
            max_attempts if max_attempts is not None else settings.generator_max_attempts
        )
        self.default_maximum_length = (
            default_maximum_length
            if default_maximum_length is not None
            else settings.generator_default_maximum_length
        )
        if self.max_attempts < 1:
            raise InvalidArgumentError("max_attempts must be at least 1")

    @classmethod
    def for_character_types(
        cls,
        include_uppercase: bool = True,
        include_lowercase: bool = True,
        include_numbers: bool = True,
        include_special: bool = True,
        minimum_length: int = 12,
        maximum_length: int = 20,
    ) -> "PasswordGenerator":
        """Build a generator that emits at least one character of each selected type.

        Raises:
            InvalidPolicyError: If minimum_length < 8 or maximum_length < minimum_length.
        """
        if minimum_length < CHARACTER_TYPES_MINIMUM_LENGTH:
            raise InvalidPolicyError(
                f"Minimum length must be at least {CHARACTER_TYPES_MINIMUM_LENGTH} characters"
            )
        if maximum_length < minimum_length:
            raise InvalidPolicyError("Maximum length must be greater than minimum length")

        policy = Policy(
            minimum_length=minimum_length,
            maximum_length=maximum_length,
            minimum_uppercase=int(include_uppercase),
            minimum_lowercase=int(include_lowercase),
            minimum_digits=int(include_numbers),
            minimum_special_chars=int(include_special),
            minimum_letters=0,
        )
        return cls(policy)

    @property
    def minimum_length(self) -> int:
        return self.policy.minimum_length

    @property
    def maximum_length(self) -> int:
        """Upper bound of the length range lengths are drawn from."""
        if self.policy.maximum_length is not None:
            return self.policy.maximum_length
        return max(self.policy.minimum_length, self.default_maximum_length)

    def choose_length(self) -> int:
        """Draw a length uniformly from [minimum_length, maximum_length]."""
        return _random.randint(self.minimum_length, self.maximum_length)

    def generate_candidate(self, pool: Sequence[str]) -> str:
        """Construct one shuffled candidate without re-testing it."""
        required = generate_required_characters(self.policy)
        password = fill_remaining_characters(required, pool, self.choose_length())
        return shuffle_characters(password)

    def generate(self) -> str:
        """Generate a password that satisfies the policy.

        Returns:
            A password accepted by the validator.

        Raises:
            InvalidArgumentError: If the policy requires no character class.
            GenerationExhaustedError: If max_attempts candidates were all rejected.
        """
        pool = build_character_pool(pool_classes(self.policy))
        if not pool:
            raise InvalidArgumentError(NO_CHARACTER_TYPES_MESSAGE)

        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generate_candidate(pool)
            if self.validator.is_valid(candidate):
                logger.debug("password_generated", attempt=attempt, length=len(candidate))
                return candidate
            logger.debug("password_generation_retry", attempt=attempt)

        logger.warning("password_generation_exhausted", attempts=self.max_attempts)
        raise GenerationExhaustedError(self.max_attempts)
