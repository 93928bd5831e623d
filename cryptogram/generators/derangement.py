"""
Derangement Generator
=====================

Produces random substitution keys in which no letter maps to itself.

The generator uses rejection sampling:

1. Shuffle the 26-letter alphabet uniformly (Fisher-Yates).
2. Align the shuffled letters, uppercased, with the sorted alphabet.
3. Reject the candidate if any letter lands on its own position.
4. Accept the first candidate without a fixed point.

Since !n / n! converges to 1/e, the number of shuffles is geometric
with mean n! / !n, about 2.718 for n = 26. The loop is capped at
``max_attempts`` shuffles; hitting the cap means the random source is
broken, and :class:`DerangementError` is raised.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2,
      Algorithm 3.4.2P (shuffling).
    - de Montmort, P. R. (1713). Essay d'analyse sur les jeux de hazard.
"""

from __future__ import annotations

import random
from typing import Any, MutableSequence, Optional, Protocol

from cryptogram.core.models import ALPHABET, Derangement


class RandomSource(Protocol):
    """Anything that can shuffle a list in place, e.g. :class:`random.Random`."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


class DerangementError(RuntimeError):
    """No derangement found within the attempt cap."""


DEFAULT_MAX_ATTEMPTS: int = 10_000


class DerangementGenerator:
    """Generates :class:`Derangement` keys by reject-and-retry shuffling.

    Usage::

        generator = DerangementGenerator(rng=random.Random(42))
        key = generator.generate()
        print(key.mapping["a"], generator.last_attempts)

    Args:
        rng: Random source used for shuffling. A fresh
            :class:`random.Random` when omitted.
        max_attempts: Sanity cap on the number of shuffles per key.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._max_attempts = max_attempts
        self._last_attempts = 0

    @classmethod
    def seeded(cls, seed: Optional[int], **kwargs: Any) -> DerangementGenerator:
        """Generator over ``random.Random(seed)``; unseeded when *seed* is None."""
        return cls(random.Random(seed), **kwargs)

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def last_attempts(self) -> int:
        """Shuffles used by the most recent :meth:`generate` call (0 before any)."""
        return self._last_attempts

    def generate(self) -> Derangement:
        """Return a new random derangement of the alphabet.

        Raises:
            DerangementError: If ``max_attempts`` shuffles all had a
                fixed point.
        """
        letters = list(ALPHABET)
        for attempt in range(1, self._max_attempts + 1):
            self._rng.shuffle(letters)
            if self.is_derangement(letters):
                self._last_attempts = attempt
                return Derangement(
                    replacements="".join(letters).upper(),
                    attempts=attempt,
                )

        self._last_attempts = self._max_attempts
        raise DerangementError(
            f"No derangement found after {self._max_attempts} shuffles; "
            f"the random source is not producing uniform permutations"
        )

    @staticmethod
    def is_derangement(candidate: MutableSequence[str]) -> bool:
        """True when no ``candidate[i]`` equals ``ALPHABET[i]`` ignoring case."""
        return all(
            letter.lower() != original
            for letter, original in zip(candidate, ALPHABET)
        )
