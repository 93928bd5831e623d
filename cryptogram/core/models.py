"""
Cryptogram Core Data Models
============================

Pydantic models for the cryptogram generator. A :class:`Derangement`
validates itself on construction, so any instance in circulation is a
bijection over the 26 letters with no fixed point.

All models are frozen and serialisable to JSON for the report layer.

References:
    - de Montmort, P. R. (1713). Essay d'analyse sur les jeux de hazard.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import math
import string

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


ALPHABET: str = string.ascii_lowercase
UPPERCASE: str = string.ascii_uppercase


# ===================================================================== #
#  Derangement
# ===================================================================== #


class Derangement(BaseModel):
    """A fixed-point-free substitution key.

    ``replacements[i]`` is the uppercase letter that ``ALPHABET[i]``
    is replaced with.

    Attributes:
        replacements: 26 distinct uppercase letters in alphabet order.
        attempts: Number of shuffles generated to find this key,
            the accepted one included.
    """

    model_config = ConfigDict(frozen=True)

    replacements: str
    attempts: int = Field(default=1, ge=1)

    @field_validator("replacements")
    @classmethod
    def check_derangement(cls, value: str) -> str:
        if len(value) != len(ALPHABET):
            raise ValueError(
                f"expected {len(ALPHABET)} replacement letters, got {len(value)}"
            )
        if set(value) != set(UPPERCASE):
            raise ValueError(
                "replacement letters must use every uppercase letter exactly once"
            )
        fixed = [
            letter
            for letter, replacement in zip(ALPHABET, value)
            if replacement.lower() == letter
        ]
        if fixed:
            raise ValueError(f"letters map to themselves: {', '.join(fixed)}")
        return value

    @classmethod
    def from_mapping(cls, mapping: dict[str, str], attempts: int = 1) -> Derangement:
        """Build from a ``{'a': 'Q', ...}`` dictionary covering the alphabet."""
        missing = [letter for letter in ALPHABET if letter not in mapping]
        if missing:
            raise ValueError(f"mapping is missing letters: {', '.join(missing)}")
        return cls(
            replacements="".join(mapping[letter] for letter in ALPHABET),
            attempts=attempts,
        )

    @property
    def mapping(self) -> dict[str, str]:
        """Lowercase letter to uppercase replacement."""
        return dict(zip(ALPHABET, self.replacements))

    def lookup(self, letter: str) -> str:
        """Return the replacement for a single lowercase letter."""
        return self.replacements[ALPHABET.index(letter)]

    def inverse(self) -> dict[str, str]:
        """Uppercase replacement back to its lowercase letter."""
        return dict(zip(self.replacements, ALPHABET))

    def encode_table(self) -> dict[int, int]:
        """Translation table for :meth:`str.translate`, lowercase to uppercase."""
        return str.maketrans(ALPHABET, self.replacements)

    def decode_table(self) -> dict[int, int]:
        """Translation table undoing :meth:`encode_table`."""
        return str.maketrans(self.replacements, ALPHABET)


# ===================================================================== #
#  Cryptogram
# ===================================================================== #


class Cryptogram(BaseModel):
    """One generated puzzle.

    Attributes:
        phrase: The phrase as supplied.
        decoded: The lowercased phrase, i.e. the puzzle's solution.
        encoded: The puzzle text: letters replaced by uppercase substitutes.
        alphabet: The plaintext alphabet the key is aligned with.
        derangement: The substitution key used.
        attempts: Shuffles needed to generate the key.
    """

    model_config = ConfigDict(frozen=True)

    phrase: str
    decoded: str
    encoded: str
    alphabet: str = ALPHABET
    derangement: Derangement
    attempts: int = Field(ge=1)

    @model_validator(mode="after")
    def check_attempts(self) -> Cryptogram:
        if self.attempts != self.derangement.attempts:
            raise ValueError("attempts must match the derangement's attempt count")
        return self

    def decode(self) -> str:
        """Undo the substitution on :attr:`encoded`."""
        return self.encoded.translate(self.derangement.decode_table())


# ===================================================================== #
#  Round Statistics
# ===================================================================== #


class RoundStatisticsResult(BaseModel):
    """Empirical attempt counts over repeated derangement generation.

    Attributes:
        trials: Number of derangements generated.
        mean: Arithmetic mean of the attempt counts.
        std_dev: Sample standard deviation of the attempt counts.
        minimum: Fewest attempts observed.
        maximum: Most attempts observed.
        expected: Theoretical mean, n! / !n (about e for n = 26).
    """

    model_config = ConfigDict(frozen=True)

    trials: int = Field(ge=1)
    mean: float
    std_dev: float = 0.0
    minimum: int = Field(ge=1)
    maximum: int = Field(ge=1)
    expected: float = math.e

    @property
    def deviation(self) -> float:
        """Signed difference between the observed and expected mean."""
        return self.mean - self.expected
