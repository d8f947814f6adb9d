"""Tests for short id generation."""

import random

import pytest
from shortener.errors import RandomSourceError
from shortener.idgen import ALPHABET, ID_LENGTH, ShortIDGenerator


class TestShortIDGenerator:
    """Test short id generation."""

    def test_alphabet(self):
        """Alphabet is digits, upper case, lower case, hyphen and underscore."""
        assert len(ALPHABET) == 64
        assert len(set(ALPHABET)) == 64
        assert ALPHABET == (
            "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_"
        )

    def test_generate(self):
        """Generated ids have the default length and only alphabet characters."""
        generator = ShortIDGenerator()

        for _ in range(200):
            code = generator.generate()
            assert len(code) == ID_LENGTH == 4
            assert all(c in ALPHABET for c in code)
            assert generator.is_valid_format(code)

    def test_generate_custom_length(self):
        """Test ids with custom length and alphabet."""
        generator = ShortIDGenerator(length=10, alphabet="xyz")

        code = generator.generate()
        assert len(code) == 10
        assert set(code) <= {"x", "y", "z"}

    def test_capacity(self):
        """Test id space size."""
        assert ShortIDGenerator().capacity == 64 ** 4 == 16_777_216
        assert ShortIDGenerator(length=2, alphabet="ab").capacity == 4

    def test_seeded_source_is_reproducible(self):
        """An injected random source drives generation."""
        first = ShortIDGenerator(rng=random.Random(42))
        second = ShortIDGenerator(rng=random.Random(42))

        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_random_source_failure(self, failing_rng):
        """Entropy failures surface as RandomSourceError."""
        generator = ShortIDGenerator(rng=failing_rng)

        with pytest.raises(RandomSourceError):
            generator.generate()

    def test_is_valid_format(self):
        """Test format validation."""
        generator = ShortIDGenerator()

        assert generator.is_valid_format("aB3-")
        assert generator.is_valid_format("0000")
        assert generator.is_valid_format("a_b-")

        # Invalid formats
        assert not generator.is_valid_format("abc")
        assert not generator.is_valid_format("abcde")
        assert not generator.is_valid_format("ab.c")
        assert not generator.is_valid_format("ab c")

    def test_invalid_settings(self):
        """Constructor rejects unusable settings."""
        with pytest.raises(ValueError):
            ShortIDGenerator(length=0)
        with pytest.raises(ValueError):
            ShortIDGenerator(alphabet="")
        with pytest.raises(ValueError):
            ShortIDGenerator(alphabet="aab")
