"""Unit tests for PasswordGenerator.

Covers:
- Generated passwords always pass the validator of the same policy
- Length stays within the policy's range
- The decomposed construction steps
- No-class and exhausted-retry failures
"""

import re
import string

import pytest

from password_helper.core.exceptions import (
    GenerationExhaustedError,
    InvalidArgumentError,
    InvalidPolicyError,
)
from password_helper.domain.entities.character_class import SPECIAL_CHARS, CharacterClass
from password_helper.domain.entities.policy import Policy
from password_helper.domain.services.password_generator import (
    NO_CHARACTER_TYPES_MESSAGE,
    PasswordGenerator,
    build_character_pool,
    fill_remaining_characters,
    generate_required_characters,
    get_random_character,
    pool_classes,
    shuffle_characters,
)
from password_helper.domain.services.password_validator import PasswordValidator

POLICIES = [
    Policy(),
    Policy(maximum_length=10),
    Policy.from_config({"minimumDigits": 4, "minimumSpecialChars": 3, "minimumLength": 16}),
    Policy.from_config({"minimumLowercase": 0, "minimumUppercase": 0, "minimumLetters": 5}),
    Policy.from_config({"minimumSpecialChars": 0, "minimumDigits": 0, "minimumUppercase": 0}),
    Policy(minimum_character_types=4, minimum_special_chars=0),
    Policy.from_character_types(),
    Policy.from_character_types(minimum_length=12, maximum_length=12, minimum_character_types=4),
    Policy.from_character_types(minimum_character_types=1),
]


class TestGenerate:
    """Tests for generate()."""

    @pytest.mark.parametrize("policy", POLICIES)
    def test_generated_password_is_valid(self, policy):
        generator = PasswordGenerator(policy)
        validator = PasswordValidator(policy)

        for _ in range(20):
            assert validator.is_valid(generator.generate())

    @pytest.mark.parametrize("policy", POLICIES)
    def test_generated_length_within_bounds(self, policy):
        generator = PasswordGenerator(policy)

        for _ in range(20):
            length = len(generator.generate())
            assert policy.minimum_length <= length <= generator.maximum_length
            if policy.maximum_length is not None:
                assert length <= policy.maximum_length

    def test_default_generate_contains_every_class(self, generator):
        password = generator.generate()

        assert re.search(r"[A-Z]", password)
        assert re.search(r"[a-z]", password)
        assert re.search(r"\d", password)
        assert re.search(r"[^a-zA-Z\d]", password)

    def test_only_required_classes_are_used(self):
        generator = PasswordGenerator(
            Policy.from_config(
                {"minimumLowercase": 0, "minimumSpecialChars": 0, "minimumLetters": 0}
            )
        )

        for _ in range(20):
            password = generator.generate()
            assert re.fullmatch(r"[A-Z0-9]+", password)

    def test_passwords_differ(self, generator):
        passwords = {generator.generate() for _ in range(10)}

        assert len(passwords) == 10

    def test_no_character_class_rejected(self):
        policy = Policy(
            minimum_digits=0,
            minimum_lowercase=0,
            minimum_uppercase=0,
            minimum_special_chars=0,
            minimum_letters=0,
        )

        with pytest.raises(InvalidArgumentError, match=NO_CHARACTER_TYPES_MESSAGE):
            PasswordGenerator(policy).generate()

    def test_exhausted_attempts_raise(self):
        """A validator that rejects everything exhausts the retry budget."""

        class RejectAll(PasswordValidator):
            def is_valid(self, password: str) -> bool:
                return False

        generator = PasswordGenerator(Policy(), validator=RejectAll(), max_attempts=3)

        with pytest.raises(GenerationExhaustedError) as exc_info:
            generator.generate()

        assert exc_info.value.attempts == 3

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(InvalidArgumentError):
            PasswordGenerator(Policy(), max_attempts=0)

    def test_max_attempts_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("PASSWORD_HELPER_GENERATOR_MAX_ATTEMPTS", "7")
        monkeypatch.setenv("PASSWORD_HELPER_GENERATOR_DEFAULT_MAXIMUM_LENGTH", "30")

        generator = PasswordGenerator(Policy())

        assert generator.max_attempts == 7
        assert generator.maximum_length == 30


class TestLengthRange:
    def test_policy_maximum_is_used(self):
        generator = PasswordGenerator(Policy(maximum_length=15))

        assert generator.minimum_length == 10
        assert generator.maximum_length == 15

    def test_unbounded_policy_uses_default_maximum(self):
        generator = PasswordGenerator(Policy(), default_maximum_length=20)

        assert generator.maximum_length == 20

    def test_default_maximum_never_below_minimum(self):
        generator = PasswordGenerator(Policy(minimum_length=40), default_maximum_length=20)

        assert generator.maximum_length == 40
        assert len(generator.generate()) == 40

    def test_choose_length_in_range(self):
        generator = PasswordGenerator(Policy(minimum_length=12, maximum_length=14))

        lengths = {generator.choose_length() for _ in range(200)}

        assert lengths <= {12, 13, 14}


class TestForCharacterTypes:
    """Tests for the boolean-flag construction."""

    def test_defaults(self):
        generator = PasswordGenerator.for_character_types()

        assert generator.minimum_length == 12
        assert generator.maximum_length == 20

    def test_custom_range(self):
        generator = PasswordGenerator.for_character_types(minimum_length=8, maximum_length=16)

        assert generator.minimum_length == 8
        assert generator.maximum_length == 16

    def test_uppercase_and_numbers_only(self):
        generator = PasswordGenerator.for_character_types(
            include_uppercase=True,
            include_lowercase=False,
            include_numbers=True,
            include_special=False,
        )

        password = generator.generate()

        assert re.search(r"[A-Z]", password)
        assert not re.search(r"[a-z]", password)
        assert re.search(r"\d", password)
        assert not re.search(r"[^a-zA-Z\d]", password)

    def test_lowercase_and_special_only(self):
        generator = PasswordGenerator.for_character_types(
            include_uppercase=False,
            include_lowercase=True,
            include_numbers=False,
            include_special=True,
        )

        password = generator.generate()

        assert not re.search(r"[A-Z]", password)
        assert re.search(r"[a-z]", password)
        assert not re.search(r"\d", password)
        assert re.search(r"[^a-zA-Z\d]", password)

    def test_no_types_selected(self):
        generator = PasswordGenerator.for_character_types(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_special=False,
        )

        with pytest.raises(InvalidArgumentError, match="At least one character type must be selected"):
            generator.generate()

    def test_invalid_min_length(self):
        with pytest.raises(InvalidPolicyError, match="at least 8 characters"):
            PasswordGenerator.for_character_types(minimum_length=7)

    def test_invalid_max_length(self):
        with pytest.raises(InvalidPolicyError, match="Maximum length must be greater"):
            PasswordGenerator.for_character_types(minimum_length=10, maximum_length=9)


class TestConstructionSteps:
    """Tests for the decomposed construction helpers."""

    @pytest.mark.parametrize(
        "alphabet",
        [string.digits, SPECIAL_CHARS, string.ascii_lowercase, string.ascii_uppercase],
    )
    def test_get_random_character(self, alphabet):
        result = get_random_character(alphabet)

        assert isinstance(result, str)
        assert result in alphabet

    def test_get_random_character_empty_alphabet(self):
        with pytest.raises(InvalidArgumentError):
            get_random_character("")

    def test_build_character_pool(self):
        pool = build_character_pool(list(CharacterClass))

        assert "A" in pool
        assert "a" in pool
        assert "0" in pool
        assert "!" in pool

        pool = build_character_pool([CharacterClass.UPPERCASE, CharacterClass.DIGIT])

        assert "A" in pool
        assert "a" not in pool
        assert "0" in pool
        assert "!" not in pool

    def test_build_character_pool_deduplicates(self):
        pool = build_character_pool([CharacterClass.DIGIT, CharacterClass.DIGIT])

        assert pool == string.digits

    def test_build_character_pool_empty(self):
        assert build_character_pool([]) == ""

    def test_pool_classes_for_count_policy(self):
        policy = Policy.from_config({"minimumLowercase": 0, "minimumSpecialChars": 0})

        assert pool_classes(policy) == (CharacterClass.UPPERCASE, CharacterClass.DIGIT)

    def test_pool_classes_for_case_free_letters(self):
        policy = Policy(
            minimum_lowercase=0,
            minimum_uppercase=0,
            minimum_letters=2,
            minimum_digits=0,
            minimum_special_chars=0,
        )

        assert pool_classes(policy) == (CharacterClass.UPPERCASE, CharacterClass.LOWERCASE)

    def test_pool_classes_for_character_types(self):
        assert pool_classes(Policy.from_character_types()) == tuple(CharacterClass)

    def test_generate_required_characters_all_types(self):
        password = generate_required_characters(Policy(minimum_letters=0))

        assert len(password) == 4
        assert re.search(r"[A-Z]", password)
        assert re.search(r"[a-z]", password)
        assert re.search(r"\d", password)
        assert re.search(r"[^a-zA-Z\d]", password)

    def test_generate_required_characters_subset(self):
        policy = Policy.from_config(
            {"minimumLowercase": 0, "minimumSpecialChars": 0, "minimumLetters": 0}
        )

        password = generate_required_characters(policy)

        assert len(password) == 2
        assert re.search(r"[A-Z]", password)
        assert not re.search(r"[a-z]", password)
        assert re.search(r"\d", password)
        assert not re.search(r"[^a-zA-Z\d]", password)

    def test_generate_required_characters_honours_counts(self):
        policy = Policy.from_config({"minimumDigits": 3, "minimumLetters": 5})

        password = generate_required_characters(policy)

        assert len(password) == 3 + 5 + 1
        assert len(re.findall(r"\d", password)) == 3
        assert len(re.findall(r"[A-Za-z]", password)) == 5

    def test_generate_required_characters_adds_missing_types(self):
        password = generate_required_characters(Policy.from_character_types(minimum_character_types=3))

        assert len(password) == 3
        assert re.search(r"[A-Z]", password)
        assert re.search(r"[a-z]", password)
        assert re.search(r"\d", password)

    def test_fill_remaining_characters(self):
        initial = "Ab1!"
        pool = build_character_pool(list(CharacterClass))

        password = fill_remaining_characters(initial, pool, 8)

        assert len(password) == 8
        assert password.startswith(initial)
        assert all(c in pool for c in password[4:])

    def test_fill_remaining_characters_long_prefix(self):
        assert fill_remaining_characters("abcdef", "xyz", 3) == "abcdef"

    def test_shuffle_characters_is_permutation(self):
        password = "Ab1!Cd2@Ef3#"

        shuffled = shuffle_characters(password)

        assert sorted(shuffled) == sorted(password)
