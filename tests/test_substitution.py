"""Tests for the cryptogram builder."""

from __future__ import annotations

import random
import string

import pytest

from cryptogram.core.models import ALPHABET, Derangement
from cryptogram.generators.derangement import DerangementGenerator
from cryptogram.generators.substitution import CryptogramBuilder


@pytest.fixture
def builder() -> CryptogramBuilder:
    return CryptogramBuilder()


class TestBuild:

    def test_hello_world(self, builder: CryptogramBuilder, hello_key: Derangement) -> None:
        puzzle = builder.build("Hello, World!", hello_key)
        assert puzzle.encoded == "BXQQN, FNGQS!"
        assert puzzle.decoded == "hello, world!"
        assert puzzle.phrase == "Hello, World!"

    def test_record_fields(self, builder: CryptogramBuilder) -> None:
        key = Derangement(replacements="BCDEFGHIJKLMNOPQRSTUVWXYZA", attempts=4)
        puzzle = builder.build("abc", key)
        assert puzzle.encoded == "BCD"
        assert puzzle.alphabet == ALPHABET
        assert puzzle.derangement is key
        assert puzzle.attempts == 4

    def test_empty_phrase(self, builder: CryptogramBuilder, hello_key: Derangement) -> None:
        puzzle = builder.build("", hello_key)
        assert puzzle.encoded == ""
        assert puzzle.decoded == ""
        assert puzzle.derangement == hello_key

    @pytest.mark.parametrize("phrase", ["123 456", "!?.,;:", "   \t\n", "ÀÉÎ 42", "#%&()"])
    def test_non_letters_pass_through(
        self, builder: CryptogramBuilder, hello_key: Derangement, phrase: str
    ) -> None:
        assert builder.build(phrase, hello_key).encoded == phrase.lower()

    def test_uppercase_input_is_lowercased_first(
        self, builder: CryptogramBuilder, hello_key: Derangement
    ) -> None:
        assert builder.build("HELLO", hello_key).encoded == builder.build("hello", hello_key).encoded

    def test_no_double_substitution(self, builder: CryptogramBuilder) -> None:
        # a->B and b->C: a chained replace would turn 'a' into 'C'
        key = Derangement(replacements="BCDEFGHIJKLMNOPQRSTUVWXYZA")
        assert builder.build("ab", key).encoded == "BC"

    def test_every_letter_is_replaced(self, builder: CryptogramBuilder, hello_key: Derangement) -> None:
        encoded = builder.build(ALPHABET, hello_key).encoded
        assert encoded == hello_key.replacements
        assert not any(c in ALPHABET for c in encoded)


class TestRoundTrip:

    def test_decode_restores_lowercased_phrase(self, builder: CryptogramBuilder) -> None:
        rng = random.Random(11)
        generator = DerangementGenerator(rng)
        alphabet = string.ascii_letters + string.digits + string.punctuation + " "
        for _ in range(200):
            phrase = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 60)))
            puzzle = builder.build(phrase, generator.generate())
            assert puzzle.decode() == phrase.lower()

    def test_inverse_mapping(self, builder: CryptogramBuilder, hello_key: Derangement) -> None:
        puzzle = builder.build("The quick brown fox jumps over the lazy dog.", hello_key)
        inverse = hello_key.inverse()
        restored = "".join(inverse.get(c, c) for c in puzzle.encoded)
        assert restored == "the quick brown fox jumps over the lazy dog."
